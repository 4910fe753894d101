from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class Operation(str, Enum):
    ADDITION = "add"
    SUBTRACTION = "sub"
    MULTIPLICATION = "mul"
    DIVISION = "div"
    MIXED = "mixed"

    @classmethod
    def concrete(cls) -> list["Operation"]:
        """Operations that can actually appear in a question (everything but MIXED)."""
        return [cls.ADDITION, cls.SUBTRACTION, cls.MULTIPLICATION, cls.DIVISION]

    @property
    def symbol(self) -> str:
        if self is Operation.MIXED:
            raise ValueError("MIXED has no symbol; resolve it to a concrete operation first")
        return _SYMBOLS[self]

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_SYMBOLS = {
    Operation.ADDITION: "+",
    Operation.SUBTRACTION: "−",
    Operation.MULTIPLICATION: "×",
    Operation.DIVISION: "÷",
}

_DISPLAY_NAMES = {
    Operation.ADDITION: "Addition",
    Operation.SUBTRACTION: "Subtraction",
    Operation.MULTIPLICATION: "Multiplication",
    Operation.DIVISION: "Division",
    Operation.MIXED: "Mixed",
}

LABELS = ("A", "B", "C")


class Outcome(str, Enum):
    CORRECT = "correct"
    WRONG = "wrong"
    BLANK = "blank"


@dataclass(frozen=True)
class Choice:
    label: str
    value: int
    is_correct: bool


@dataclass(frozen=True)
class Question:
    """
    A single multiple-choice arithmetic question.

    - `text`: the prompt shown to the user (e.g. "12 ÷ 3 = ?")
    - `operation`: the resolved operation (never MIXED)
    - `operands`: the exact (a, b) used to build the prompt and the distractors
    - `correct_answer`: positive integer result
    - `hint`: explanatory text for the operation
    - `choices`: three labeled choices, exactly one correct
    - `hint_revealed`: whether the user asked for the hint

    Questions are immutable; revealing the hint yields a new copy.
    """

    text: str
    operation: Operation
    operands: tuple[int, int]
    correct_answer: int
    hint: str
    choices: tuple[Choice, Choice, Choice]
    difficulty: Difficulty
    hint_revealed: bool = False

    @property
    def correct_choice(self) -> Choice:
        return next(c for c in self.choices if c.is_correct)

    def choice_for(self, label: str) -> Choice:
        for choice in self.choices:
            if choice.label == label:
                return choice
        raise ValueError(f"Unknown choice label: {label!r}")

    def with_hint_revealed(self) -> "Question":
        return replace(self, hint_revealed=True)


@dataclass(frozen=True)
class AnswerRecord:
    """What the session log keeps for one answered (or skipped) question."""

    index: int
    question_text: str
    choices_shown: tuple[Choice, ...]
    correct_label: str
    correct_value: int
    user_label: str | None
    hint_used: bool
    outcome: Outcome


@dataclass
class SessionStats:
    total: int = 0
    correct: int = 0
    wrong: int = 0
    blank: int = 0

    def add(self, outcome: Outcome) -> None:
        if outcome == Outcome.CORRECT:
            self.correct += 1
        elif outcome == Outcome.WRONG:
            self.wrong += 1
        else:
            self.blank += 1
        self.total += 1

    @property
    def success_percentage(self) -> int:
        return success_percentage(self.correct, self.total)

    @property
    def result_title(self) -> str:
        return result_title(self.success_percentage)


def success_percentage(correct: int, total: int) -> int:
    """Share of correct answers as a whole percent, 0 for an empty session."""
    if total <= 0:
        return 0
    # half rounds up, like the score shown on the result screen
    return int(correct * 100 / total + 0.5)


_RESULT_TITLES = (
    (80, "Excellent!"),
    (60, "Good job!"),
    (40, "Keep going!"),
)


def result_title(percentage: int) -> str:
    """Headline shown with the final score."""
    for threshold, title in _RESULT_TITLES:
        if percentage >= threshold:
            return title
    return "More practice needed!"
