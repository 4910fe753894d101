from __future__ import annotations

import logging
import operator
import random
from dataclasses import dataclass
from typing import Callable

from .config import QuizConfig
from .distractors import DistractorEngine
from .models import Difficulty, Operation, Question

logger = logging.getLogger(__name__)


@dataclass
class _OpConfig:
    func: Callable[[int, int], int]
    hint: str


_OPS = {
    Operation.ADDITION: _OpConfig(
        operator.add, "Add {a} and {b}. Start with the ones digits."
    ),
    Operation.SUBTRACTION: _OpConfig(
        operator.sub, "Take {b} away from {a}. The result will not be negative."
    ),
    Operation.MULTIPLICATION: _OpConfig(
        operator.mul, "Add {a} to itself {b} times, or recall the times table."
    ),
    Operation.DIVISION: _OpConfig(
        operator.floordiv, "Think: {b} × ? = {a}. Look it up in the times table."
    ),
}


class ArithmeticGenerator:
    """Generate two-operand multiple-choice questions for each difficulty level."""

    def __init__(
        self,
        seed: int | None = None,
        rng: random.Random | None = None,
        config: QuizConfig | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random(seed)
        self.config = config or QuizConfig()
        self._distractors = DistractorEngine(rng=self._rng, config=self.config.distractors)

    def _resolve(self, operation: Operation) -> Operation:
        if operation == Operation.MIXED:
            return self._rng.choice(Operation.concrete())
        if operation not in _OPS:
            raise ValueError(f"Unsupported operation: {operation}")
        return operation

    def _rand_pair(self, difficulty: Difficulty) -> tuple[int, int]:
        bounds = self.config.range_for(difficulty)
        return (
            self._rng.randint(bounds.min, bounds.max),
            self._rng.randint(bounds.min, bounds.max),
        )

    def _generate_subtraction(self, difficulty: Difficulty) -> tuple[int, int]:
        """a - b with a > b, both inside the tier's range."""
        a, b = self._rand_pair(difficulty)
        if b > a:
            a, b = b, a
        if a == b:
            # keep the answer positive without leaving the range
            lo = self.config.range_for(difficulty).min
            if b > lo:
                b -= 1
            else:
                a += 1
        return a, b

    def _generate_multiplication(self, difficulty: Difficulty) -> tuple[int, int]:
        cap = self.config.caps_for(difficulty).mul
        return self._rng.randint(2, cap), self._rng.randint(2, cap)

    def _generate_division(self, difficulty: Difficulty) -> tuple[int, int]:
        """
        Generate a / b built from divisor * quotient, so the result is always
        a whole number and never a remainder.
        """
        caps = self.config.caps_for(difficulty)
        divisor = self._rng.randint(2, caps.divisor)
        quotient = self._rng.randint(2, caps.quotient)
        return divisor * quotient, divisor

    def _operands(self, operation: Operation, difficulty: Difficulty) -> tuple[int, int]:
        if operation == Operation.SUBTRACTION:
            return self._generate_subtraction(difficulty)
        if operation == Operation.MULTIPLICATION:
            return self._generate_multiplication(difficulty)
        if operation == Operation.DIVISION:
            return self._generate_division(difficulty)
        return self._rand_pair(difficulty)

    def generate(self, operation: Operation, difficulty: Difficulty) -> Question:
        op = self._resolve(operation)
        cfg = _OPS[op]
        a, b = self._operands(op, difficulty)
        answer = cfg.func(a, b)

        question = Question(
            text=f"{a} {op.symbol} {b} = ?",
            operation=op,
            operands=(a, b),
            correct_answer=answer,
            hint=cfg.hint.format(a=a, b=b),
            choices=self._distractors.build_choices(answer, op, a, b),
            difficulty=difficulty,
        )
        logger.debug("generated %r (answer %d)", question.text, answer)
        return question
