from __future__ import annotations

import logging
import math
import random
from typing import Callable, Dict, List

from .config import DistractorConfig
from .models import LABELS, Choice, Operation

logger = logging.getLogger(__name__)


DISTRACTOR_COUNT = len(LABELS) - 1


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


# Applying the wrong operator to the same operands.
_CONFUSIONS: Dict[Operation, Callable[[int, int], List[int]]] = {
    # multiplied / subtracted instead of added
    Operation.ADDITION: lambda a, b: [a * b, abs(a - b)],
    # reversed subtraction / added instead of subtracted
    Operation.SUBTRACTION: lambda a, b: [b - a, a + b],
    # added instead of multiplied / one factor too few
    Operation.MULTIPLICATION: lambda a, b: [a + b, a * (b - 1)],
    # multiplied instead of divided / divided by the next number up
    Operation.DIVISION: lambda a, b: [a * b, _round_half_up(a / (b + 1))],
}


class DistractorEngine:
    """
    Build wrong answers that look like real arithmetic slips.

    Candidates come from three strategies (tens-place shift, small deviation,
    operator confusion). Invalid ones are filtered out, the rest are shuffled
    and the first two are kept. When the pool runs dry (tiny
    answers such as 1 or 2) random offsets around the correct answer fill the
    gap, followed by an upward sweep that always succeeds for answers >= 1.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        config: DistractorConfig | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.config = config or DistractorConfig()

    def candidates(self, correct: int, operation: Operation, a: int, b: int) -> List[int]:
        """Raw strategy outputs, unfiltered and in strategy order."""
        if operation not in _CONFUSIONS:
            raise ValueError(f"Unsupported operation: {operation}")

        cfg = self.config
        pool = [correct + cfg.tens_shift, correct - cfg.tens_shift]
        for d in cfg.small_deviations:
            pool.extend([correct + d, correct - d])
        pool.extend(_CONFUSIONS[operation](a, b))
        return pool

    @staticmethod
    def _is_valid(value, correct: int, picked: List[int]) -> bool:
        return (
            isinstance(value, int)
            and not isinstance(value, bool)
            and value > 0
            and value != correct
            and value not in picked
        )

    def pick_distractors(self, correct: int, operation: Operation, a: int, b: int) -> List[int]:
        count = DISTRACTOR_COUNT
        pool: List[int] = []
        for value in self.candidates(correct, operation, a, b):
            if self._is_valid(value, correct, pool):
                pool.append(value)
        self._rng.shuffle(pool)
        picked = pool[:count]

        attempts = 0
        while len(picked) < count and attempts < self.config.fallback_attempts:
            attempts += 1
            offset = self._rng.randint(1, self.config.fallback_max_offset)
            if self._rng.random() < 0.5:
                offset = -offset
            candidate = correct + offset
            if self._is_valid(candidate, correct, picked):
                picked.append(candidate)

        # at most count - 1 values can block the sweep, so this terminates
        step = 1
        while len(picked) < count:
            candidate = correct + step
            if self._is_valid(candidate, correct, picked):
                picked.append(candidate)
            step += 1

        if attempts:
            logger.debug("distractor fallback used %d draw(s) for answer %d", attempts, correct)
        return picked

    def build_choices(
        self, correct: int, operation: Operation, a: int, b: int
    ) -> tuple[Choice, Choice, Choice]:
        """Correct answer plus distractors, shuffled and labeled A/B/C by position."""
        values = [(correct, True)]
        values.extend((v, False) for v in self.pick_distractors(correct, operation, a, b))
        self._rng.shuffle(values)
        return tuple(
            Choice(label=label, value=value, is_correct=is_correct)
            for label, (value, is_correct) in zip(LABELS, values)
        )


def build_choices(
    correct: int,
    operation: Operation,
    a: int,
    b: int,
    rng: random.Random | None = None,
    config: DistractorConfig | None = None,
) -> tuple[Choice, Choice, Choice]:
    return DistractorEngine(rng=rng, config=config).build_choices(correct, operation, a, b)
