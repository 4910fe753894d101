from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, List

from pydantic import BaseModel, Field

from .generator import MathQuizGenerator
from .models import (
    LABELS,
    AnswerRecord,
    Difficulty,
    Operation,
    Outcome,
    Question,
    SessionStats,
)

if TYPE_CHECKING:
    from .history import HistoryStore

logger = logging.getLogger(__name__)


class QuizSessionError(RuntimeError):
    pass


class AlreadyAnsweredError(QuizSessionError):
    pass


class NotAnsweredError(QuizSessionError):
    pass


class SessionFinishedError(QuizSessionError):
    pass


class SessionSettings(BaseModel):
    operation: Operation = Operation.MIXED
    difficulty: Difficulty = Difficulty.EASY
    question_count: int = Field(default=10, ge=1, le=100)


class QuizSession:
    """
    One run through a quiz: the questions, the running stats and the answer log.

    Flow: `start()`, then for each question optionally `reveal_hint()`, then
    `answer(label)` (None skips it), then `advance()`. `finish()` may be
    called at any point and records the session in the history store.
    """

    def __init__(
        self,
        settings: SessionSettings,
        generator: MathQuizGenerator | None = None,
        history: "HistoryStore | None" = None,
    ) -> None:
        self.settings = settings
        self._generator = generator or MathQuizGenerator()
        self._history = history
        self.questions: List[Question] = []
        self.log: List[AnswerRecord] = []
        self.stats = SessionStats()
        self.position = 0
        self.finished_at: datetime | None = None
        self._answered = False

    def start(self) -> "QuizSession":
        self.questions = self._generator.generate_batch(
            self.settings.operation,
            self.settings.difficulty,
            self.settings.question_count,
        )
        self.log = []
        self.stats = SessionStats()
        self.position = 0
        self.finished_at = None
        self._answered = False
        logger.info(
            "session started: %s/%s, %d questions",
            self.settings.operation.value,
            self.settings.difficulty.value,
            len(self.questions),
        )
        return self

    @property
    def is_finished(self) -> bool:
        return self.finished_at is not None or self.position >= len(self.questions)

    @property
    def current(self) -> Question | None:
        if self.is_finished:
            return None
        return self.questions[self.position]

    @property
    def answered(self) -> bool:
        return self._answered

    def _require_current(self) -> Question:
        question = self.current
        if question is None:
            raise SessionFinishedError("the session has no more questions")
        return question

    def reveal_hint(self) -> str:
        question = self._require_current().with_hint_revealed()
        self.questions[self.position] = question
        return question.hint

    def answer(self, label: str | None) -> AnswerRecord:
        """Score the current question. `None` (or a blank label) leaves it blank."""
        question = self._require_current()
        if self._answered:
            raise AlreadyAnsweredError(f"question {self.position + 1} was already answered")

        label = (label or "").strip().upper() or None
        if label is not None and label not in LABELS:
            raise ValueError(f"Unknown choice label: {label!r}")

        correct = question.correct_choice
        if label is None:
            outcome = Outcome.BLANK
        elif label == correct.label:
            outcome = Outcome.CORRECT
        else:
            outcome = Outcome.WRONG

        record = AnswerRecord(
            index=len(self.log) + 1,
            question_text=question.text,
            choices_shown=question.choices,
            correct_label=correct.label,
            correct_value=correct.value,
            user_label=label,
            hint_used=question.hint_revealed,
            outcome=outcome,
        )
        self.log.append(record)
        self.stats.add(outcome)
        self._answered = True
        return record

    def advance(self) -> Question | None:
        self._require_current()
        if not self._answered:
            raise NotAnsweredError("answer or skip the current question first")
        self.position += 1
        self._answered = False
        if self.position >= len(self.questions):
            self.finish()
        return self.current

    def finish(self) -> SessionStats:
        if self.finished_at is not None:
            return self.stats
        self.finished_at = datetime.now()
        logger.info(
            "session finished: %d/%d correct (%d%%)",
            self.stats.correct,
            self.stats.total,
            self.stats.success_percentage,
        )
        if self._history is not None:
            self._history.save(self.settings, self.stats, when=self.finished_at)
        return self.stats
