from __future__ import annotations

import random
from typing import Iterable, List

from .arithmetic_generator import ArithmeticGenerator
from .config import QuizConfig
from .models import Difficulty, Operation, Question


class MathQuizGenerator:
    """
    High-level API to generate multiple-choice arithmetic quizzes.

    Every call is independent: the generator keeps no state besides its random
    source, so separate instances can be used from separate requests.

    Usage:

    ```python
    gen = MathQuizGenerator(seed=42)
    q = gen.generate_one(operation=Operation.MIXED, difficulty=Difficulty.EASY)
    # q.text -> string to show in UI
    # q.choices -> three labeled choices, one of them correct
    ```
    """

    def __init__(
        self,
        seed: int | None = None,
        config: QuizConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._arithmetic = ArithmeticGenerator(seed=seed, rng=rng, config=config)

    def generate_one(self, operation: Operation, difficulty: Difficulty) -> Question:
        return self._arithmetic.generate(operation, difficulty)

    def generate_batch(
        self,
        operation: Operation,
        difficulty: Difficulty,
        n: int,
    ) -> List[Question]:
        """
        Generate `n` questions for one operation selector and difficulty.

        With `Operation.MIXED` each question resolves its own operation.
        """
        if n <= 0:
            return []
        return [self.generate_one(operation=operation, difficulty=difficulty) for _ in range(n)]

    def generate_mixed(
        self,
        spec: Iterable[tuple[Operation, Difficulty, int]],
    ) -> List[Question]:
        """
        Generate a list of questions covering several (operation, difficulty) pairs.

        Example:
            spec = [
                (Operation.ADDITION, Difficulty.EASY, 5),
                (Operation.DIVISION, Difficulty.MEDIUM, 3),
            ]
        """
        questions: List[Question] = []
        for operation, difficulty, n in spec:
            questions.extend(self.generate_batch(operation, difficulty, n))
        return questions
