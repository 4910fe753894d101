from datetime import datetime

from quiz_engine import Difficulty, Operation, QuizSession, SessionSettings
from quiz_engine.generator import MathQuizGenerator
from quiz_engine.report import export_filename, export_txt, write_txt

NOW = datetime(2026, 10, 19, 14, 30, 0)


def _fixed_session(scripted):
    # divisor 3, quotient 4 -> 12 ÷ 3, choices A=4 (correct), B=14, C=5
    gen = MathQuizGenerator(rng=scripted(ints=[3, 4]))
    settings = SessionSettings(
        operation=Operation.DIVISION, difficulty=Difficulty.EASY, question_count=1
    )
    return QuizSession(settings, generator=gen).start()


def test_report_for_a_correct_answer_with_hint(scripted):
    session = _fixed_session(scripted)
    session.reveal_hint()
    session.answer("A")
    session.advance()

    txt = export_txt(session, now=NOW)
    assert "Date / Time    : 2026-10-19 14:30:00" in txt
    assert "Operation      : Division" in txt
    assert "Difficulty     : Easy" in txt
    assert "Question Count : 1" in txt
    assert "  TOTAL: 1   CORRECT: 1   WRONG: 0   BLANK: 0" in txt
    assert "  SUCCESS RATE: 100%" in txt
    assert "  Excellent!" in txt
    assert "Q01.  12 ÷ 3 = ?" in txt
    assert "     [A] ✓ 4" in txt
    assert "     [B]   14" in txt
    assert "     [C]   5" in txt
    assert "     Correct Answer : [A] = 4" in txt
    assert "     Your Answer    : A" in txt
    assert "     Hint Used      : YES" in txt
    assert "     Result         : CORRECT" in txt
    assert txt.endswith("╝\n")


def test_report_for_a_blank_answer(scripted):
    session = _fixed_session(scripted)
    session.answer(None)

    txt = export_txt(session, now=NOW)
    assert "     Your Answer    : BLANK" in txt
    assert "     Hint Used      : NO" in txt
    assert "     Result         : BLANK" in txt
    assert "  SUCCESS RATE: 0%" in txt


def test_empty_session_report():
    settings = SessionSettings(question_count=5)
    session = QuizSession(settings, generator=MathQuizGenerator(seed=1)).start()
    session.finish()
    txt = export_txt(session, now=NOW)
    assert "  TOTAL: 0   CORRECT: 0   WRONG: 0   BLANK: 0" in txt
    assert "  SUCCESS RATE: 0%" in txt
    assert "Q01." not in txt
    assert "%0" not in txt


def test_write_txt(tmp_path, scripted):
    session = _fixed_session(scripted)
    session.answer("B")
    path = write_txt(session, tmp_path, now=NOW)
    assert path.name == export_filename(NOW) == "quiz_record_2026-10-19.txt"
    assert "Result         : WRONG" in path.read_text(encoding="utf-8")
