from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, List

from pydantic import BaseModel, ValidationError

from .models import SessionStats

if TYPE_CHECKING:
    from .session import SessionSettings

logger = logging.getLogger(__name__)

HISTORY_KEY = "matikquiz_history"
MAX_ENTRIES = 10


class HistoryEntry(BaseModel):
    date: str
    operation: str
    difficulty: str
    total: int
    correct: int
    wrong: int
    blank: int


class HistoryStore:
    """
    Recent session summaries in a small JSON file, newest first.

    Storage problems (missing or unreadable file, broken JSON, read-only
    directory) are logged and otherwise ignored: losing history must never
    stop a quiz.
    """

    def __init__(
        self,
        path: str | Path,
        max_entries: int = MAX_ENTRIES,
        key: str = HISTORY_KEY,
    ) -> None:
        self.path = Path(path)
        self.max_entries = max_entries
        self.key = key

    def _read_raw(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("could not read history from %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def load(self) -> List[HistoryEntry]:
        raw = self._read_raw().get(self.key)
        if not isinstance(raw, list):
            return []
        entries: List[HistoryEntry] = []
        for obj in raw:
            try:
                entries.append(HistoryEntry.model_validate(obj))
            except ValidationError:
                # skip records written by an incompatible version
                continue
        return entries[: self.max_entries]

    def save(
        self,
        settings: "SessionSettings",
        stats: SessionStats,
        when: datetime | None = None,
    ) -> List[HistoryEntry]:
        when = when or datetime.now()
        entry = HistoryEntry(
            date=when.strftime("%Y-%m-%d %H:%M:%S"),
            operation=settings.operation.display_name,
            difficulty=settings.difficulty.display_name,
            total=stats.total,
            correct=stats.correct,
            wrong=stats.wrong,
            blank=stats.blank,
        )
        entries = [entry, *self.load()][: self.max_entries]

        data = self._read_raw()
        data[self.key] = [e.model_dump() for e in entries]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
        except OSError as e:
            logger.warning("could not write history to %s: %s", self.path, e)
        return entries

    def clear(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("could not clear history at %s: %s", self.path, e)
