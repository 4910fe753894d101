"""
Plain-text export of a finished (or abandoned) quiz session.

The layout mirrors what the user saw: a header with the session settings, a
summary line, then every question with its three choices, the correct one
marked with a check.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from .models import Outcome, success_percentage
from .session import QuizSession

__all__ = ["success_percentage", "export_txt", "export_filename", "write_txt"]

_RULE = "─" * 41
_BANNER_TOP = "╔══════════════════════════════════════════╗"
_BANNER_BOTTOM = "╚══════════════════════════════════════════╝"


def _banner(title: str) -> list[str]:
    width = len(_BANNER_TOP) - 2
    return [_BANNER_TOP, f"║{title.center(width)}║", _BANNER_BOTTOM]


def export_txt(session: QuizSession, now: datetime | None = None) -> str:
    now = now or datetime.now()
    settings = session.settings
    stats = session.stats

    lines = _banner("ARITHMETIC QUIZ – SESSION RECORD")
    lines += [
        "",
        f"Date / Time    : {now.strftime('%Y-%m-%d %H:%M:%S')}",
        f"Operation      : {settings.operation.display_name}",
        f"Difficulty     : {settings.difficulty.display_name}",
        f"Question Count : {settings.question_count}",
        "",
        _RULE,
        f"  TOTAL: {stats.total}   CORRECT: {stats.correct}   "
        f"WRONG: {stats.wrong}   BLANK: {stats.blank}",
        f"  SUCCESS RATE: {success_percentage(stats.correct, stats.total)}%",
        f"  {stats.result_title}",
        _RULE,
        "",
    ]

    for record in session.log:
        lines.append(f"Q{record.index:02d}.  {record.question_text}")
        for choice in record.choices_shown:
            mark = " ✓" if choice.is_correct else "  "
            lines.append(f"     [{choice.label}]{mark} {choice.value}")
        lines.append(f"     Correct Answer : [{record.correct_label}] = {record.correct_value}")
        lines.append(f"     Your Answer    : {record.user_label or 'BLANK'}")
        lines.append(f"     Hint Used      : {'YES' if record.hint_used else 'NO'}")
        lines.append(f"     Result         : {Outcome(record.outcome).value.upper()}")
        lines.append("")

    lines += _banner("END OF RECORD – ARITHMETIC QUIZ")
    return "\n".join(lines) + "\n"


def export_filename(now: datetime | None = None) -> str:
    now = now or datetime.now()
    return f"quiz_record_{now.strftime('%Y-%m-%d')}.txt"


def write_txt(session: QuizSession, directory: str | Path, now: datetime | None = None) -> Path:
    now = now or datetime.now()
    path = Path(directory) / export_filename(now)
    path.write_text(export_txt(session, now=now), encoding="utf-8")
    return path
