import json
from datetime import datetime, timedelta

from quiz_engine import Difficulty, HistoryStore, Operation, SessionSettings, SessionStats


def _save(store, correct, when):
    settings = SessionSettings(operation=Operation.DIVISION, difficulty=Difficulty.HARD)
    stats = SessionStats(total=10, correct=correct, wrong=10 - correct, blank=0)
    return store.save(settings, stats, when=when)


def test_newest_first_and_capped(tmp_path):
    store = HistoryStore(tmp_path / "history.json")
    start = datetime(2026, 1, 1, 9, 0, 0)
    for i in range(12):
        _save(store, correct=i % 11, when=start + timedelta(minutes=i))

    entries = store.load()
    assert len(entries) == 10
    assert entries[0].date == "2026-01-01 09:11:00"
    assert entries[-1].date == "2026-01-01 09:02:00"
    assert entries[0].operation == "Division"
    assert entries[0].difficulty == "Hard"


def test_stored_under_fixed_key(tmp_path):
    path = tmp_path / "history.json"
    _save(HistoryStore(path), correct=5, when=datetime(2026, 3, 4, 5, 6, 7))
    data = json.loads(path.read_text(encoding="utf-8"))
    assert list(data) == ["matikquiz_history"]
    assert data["matikquiz_history"][0]["correct"] == 5


def test_missing_file_is_empty(tmp_path):
    assert HistoryStore(tmp_path / "nope.json").load() == []


def test_corrupt_file_is_tolerated(tmp_path):
    path = tmp_path / "history.json"
    path.write_text("{not json", encoding="utf-8")
    store = HistoryStore(path)
    assert store.load() == []
    entries = _save(store, correct=3, when=datetime(2026, 1, 1))
    assert len(entries) == 1
    assert store.load()[0].correct == 3


def test_invalid_entries_are_skipped(tmp_path):
    path = tmp_path / "history.json"
    path.write_text(json.dumps({"matikquiz_history": [{"date": "x"}, "junk"]}), encoding="utf-8")
    assert HistoryStore(path).load() == []


def test_unwritable_location_does_not_raise(tmp_path):
    # a directory cannot be opened as a file
    store = HistoryStore(tmp_path)
    entries = _save(store, correct=1, when=datetime(2026, 1, 1))
    assert len(entries) == 1
    assert store.load() == []


def test_clear(tmp_path):
    path = tmp_path / "history.json"
    store = HistoryStore(path)
    _save(store, correct=2, when=datetime(2026, 1, 1))
    store.clear()
    assert not path.exists()
    assert store.load() == []
    store.clear()
