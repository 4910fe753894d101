"""Tunable number ranges and distractor constants.

All tables are pydantic models so a caller can override a single tier or a
single constant without rebuilding the rest:

```python
cfg = QuizConfig(ranges={**DEFAULT_RANGES, Difficulty.EASY: RangeConfig(min=1, max=10)})
```
"""

from __future__ import annotations

from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .models import Difficulty


class RangeConfig(BaseModel):
    """Closed integer range used to draw addition/subtraction operands."""

    model_config = ConfigDict(frozen=True)

    min: int = Field(ge=1)
    max: int = Field(ge=2)

    @model_validator(mode="after")
    def _check_order(self) -> "RangeConfig":
        if self.max <= self.min:
            raise ValueError(f"max ({self.max}) must be greater than min ({self.min})")
        return self


class TierCaps(BaseModel):
    """Upper bounds for multiplication and division, per difficulty tier."""

    model_config = ConfigDict(frozen=True)

    mul: int = Field(ge=2)
    divisor: int = Field(ge=2)
    quotient: int = Field(ge=2)


DEFAULT_RANGES: Dict[Difficulty, RangeConfig] = {
    Difficulty.EASY: RangeConfig(min=1, max=20),
    Difficulty.MEDIUM: RangeConfig(min=5, max=99),
    Difficulty.HARD: RangeConfig(min=10, max=999),
}

DEFAULT_CAPS: Dict[Difficulty, TierCaps] = {
    Difficulty.EASY: TierCaps(mul=10, divisor=9, quotient=10),
    Difficulty.MEDIUM: TierCaps(mul=15, divisor=12, quotient=15),
    Difficulty.HARD: TierCaps(mul=30, divisor=20, quotient=30),
}


class DistractorConfig(BaseModel):
    """Constants of the mistake-simulation strategies."""

    model_config = ConfigDict(frozen=True)

    # tens-place slip keeps the ones digit
    tens_shift: int = Field(default=10, ge=1)
    small_deviations: Tuple[int, ...] = (1, 2, 5)
    fallback_max_offset: int = Field(default=15, ge=2)
    fallback_attempts: int = Field(default=100, ge=0)

    @field_validator("small_deviations")
    @classmethod
    def _positive_deviations(cls, value: Tuple[int, ...]) -> Tuple[int, ...]:
        if any(d <= 0 for d in value):
            raise ValueError("small_deviations must all be positive")
        return value


class QuizConfig(BaseModel):
    ranges: Dict[Difficulty, RangeConfig] = Field(default_factory=lambda: dict(DEFAULT_RANGES))
    caps: Dict[Difficulty, TierCaps] = Field(default_factory=lambda: dict(DEFAULT_CAPS))
    distractors: DistractorConfig = Field(default_factory=DistractorConfig)

    @model_validator(mode="after")
    def _check_tiers(self) -> "QuizConfig":
        for table_name in ("ranges", "caps"):
            missing = set(Difficulty) - set(getattr(self, table_name))
            if missing:
                names = ", ".join(sorted(d.value for d in missing))
                raise ValueError(f"{table_name} is missing difficulty tiers: {names}")
        return self

    def range_for(self, difficulty: Difficulty) -> RangeConfig:
        return self.ranges[difficulty]

    def caps_for(self, difficulty: Difficulty) -> TierCaps:
        return self.caps[difficulty]
