import pytest

from quiz_engine import (
    Difficulty,
    HistoryStore,
    MathQuizGenerator,
    Operation,
    Outcome,
    QuizSession,
    SessionSettings,
    SessionStats,
    success_percentage,
)
from quiz_engine.session import AlreadyAnsweredError, NotAnsweredError, SessionFinishedError


def _wrong_label(question):
    return next(c.label for c in question.choices if not c.is_correct)


@pytest.fixture
def session():
    settings = SessionSettings(
        operation=Operation.ADDITION, difficulty=Difficulty.EASY, question_count=3
    )
    return QuizSession(settings, generator=MathQuizGenerator(seed=5)).start()


def test_start_builds_questions(session):
    assert len(session.questions) == 3
    assert session.current is session.questions[0]
    assert not session.is_finished


def test_scoring_correct_wrong_blank(session):
    q = session.current
    record = session.answer(q.correct_choice.label)
    assert record.outcome == Outcome.CORRECT
    assert record.index == 1
    assert record.correct_value == q.correct_answer
    session.advance()

    q = session.current
    record = session.answer(_wrong_label(q).lower())
    assert record.outcome == Outcome.WRONG
    assert record.user_label == _wrong_label(q)
    session.advance()

    record = session.answer(None)
    assert record.outcome == Outcome.BLANK
    assert record.user_label is None
    assert session.advance() is None

    assert session.is_finished
    stats = session.stats
    assert (stats.total, stats.correct, stats.wrong, stats.blank) == (3, 1, 1, 1)
    assert stats.success_percentage == 33


def test_hint_is_carried_into_the_record(session):
    hint = session.reveal_hint()
    assert hint == session.current.hint
    assert session.current.hint_revealed
    assert session.questions[0] is session.current
    record = session.answer(None)
    assert record.hint_used
    session.advance()
    assert not session.answer("A").hint_used


def test_misuse_raises(session):
    with pytest.raises(NotAnsweredError):
        session.advance()
    with pytest.raises(ValueError):
        session.answer("D")
    session.answer("A")
    with pytest.raises(AlreadyAnsweredError):
        session.answer("B")
    session.finish()
    with pytest.raises(SessionFinishedError):
        session.answer("A")
    with pytest.raises(SessionFinishedError):
        session.reveal_hint()


def test_finish_saves_history_once(tmp_path):
    store = HistoryStore(tmp_path / "history.json")
    settings = SessionSettings(question_count=2)
    session = QuizSession(settings, generator=MathQuizGenerator(seed=1), history=store).start()
    session.answer(session.current.correct_choice.label)
    session.finish()
    session.finish()

    entries = store.load()
    assert len(entries) == 1
    assert entries[0].operation == "Mixed"
    assert entries[0].difficulty == "Easy"
    assert (entries[0].total, entries[0].correct) == (1, 1)


def test_settings_bounds():
    with pytest.raises(ValueError):
        SessionSettings(question_count=0)


@pytest.mark.parametrize(
    "correct, total, expected",
    [(7, 10, 70), (0, 0, 0), (1, 8, 13), (2, 3, 67), (10, 10, 100)],
)
def test_success_percentage(correct, total, expected):
    assert success_percentage(correct, total) == expected


@pytest.mark.parametrize("label", ["", "   ", "\t"])
def test_blank_labels_are_skips(session, label):
    record = session.answer(label)
    assert record.outcome == Outcome.BLANK
    assert record.user_label is None


@pytest.mark.parametrize(
    "correct, total, title",
    [
        (8, 10, "Excellent!"),
        (6, 10, "Good job!"),
        (4, 10, "Keep going!"),
        (3, 10, "More practice needed!"),
        (0, 0, "More practice needed!"),
    ],
)
def test_result_title(correct, total, title):
    stats = SessionStats(total=total, correct=correct, wrong=total - correct)
    assert stats.result_title == title
