import json

from services.history_store import FAVORITES_KEY, HISTORY_KEY, QueryHistoryStore


def test_record_puts_newest_first_without_duplicates(store):
    store.record("京A12345")
    store.record("粤BD1234A")
    store.record("京A12345")

    assert store.history() == ["京A12345", "粤BD1234A"]


def test_history_keeps_ten_most_recent(store):
    plates = [f"京A1234{i}" for i in range(10)] + ["沪B88888", "沪B99999"]
    for plate in plates:
        store.record(plate)

    history = store.history()
    assert len(history) == 10
    assert history[0] == "沪B99999"
    assert history[1] == "沪B88888"
    assert "京A12340" not in history
    assert "京A12341" not in history


def test_record_ignores_empty_plate(store):
    assert store.record("") == []
    assert store.history() == []


def test_history_persists_to_file(store, tmp_path):
    store.record("京A12345")
    store.toggle_favorite("京A12345")

    data = json.loads((tmp_path / "history.json").read_text(encoding="utf-8"))
    assert data[HISTORY_KEY] == ["京A12345"]
    assert data[FAVORITES_KEY] == ["京A12345"]

    reopened = QueryHistoryStore(tmp_path / "history.json")
    assert reopened.history() == ["京A12345"]
    assert reopened.is_favorite("京A12345")


def test_toggle_favorite_adds_and_removes(store):
    assert store.toggle_favorite("京A12345") is True
    assert store.is_favorite("京A12345")
    assert store.toggle_favorite("京A12345") is False
    assert store.favorites() == []


def test_favorites_limit_drops_extra_plate(store):
    for i in range(5):
        assert store.toggle_favorite(f"京A1234{i}") is True

    assert store.toggle_favorite("沪B88888") is False
    assert len(store.favorites()) == 5
    assert "沪B88888" not in store.favorites()

    store.toggle_favorite("京A12340")
    assert store.toggle_favorite("沪B88888") is True
    assert store.favorites()[-1] == "沪B88888"


def test_clear_history_keeps_favorites(store):
    store.record("京A12345")
    store.toggle_favorite("京A12345")
    store.clear_history()

    assert store.history() == []
    assert store.favorites() == ["京A12345"]


def test_returned_lists_are_copies(store):
    store.record("京A12345")
    store.history().append("沪B88888")
    assert store.history() == ["京A12345"]


def test_corrupt_file_is_treated_as_empty(tmp_path):
    path = tmp_path / "history.json"
    path.write_text("{not json", encoding="utf-8")

    store = QueryHistoryStore(path)
    assert store.history() == []
    assert store.favorites() == []

    store.record("京A12345")
    assert json.loads(path.read_text(encoding="utf-8"))[HISTORY_KEY] == ["京A12345"]


def test_oversized_file_is_truncated_on_load(tmp_path):
    path = tmp_path / "history.json"
    path.write_text(
        json.dumps({HISTORY_KEY: [f"京A1234{i}" for i in range(10)], FAVORITES_KEY: ["京A12345"]}),
        encoding="utf-8",
    )

    store = QueryHistoryStore(path, history_limit=3, favorites_limit=5)
    assert store.history() == ["京A12340", "京A12341", "京A12342"]


def test_missing_parent_directory_is_created(tmp_path):
    store = QueryHistoryStore(tmp_path / "nested" / "dir" / "history.json")
    store.record("京A12345")
    assert (tmp_path / "nested" / "dir" / "history.json").exists()


def test_unwritable_path_keeps_in_memory_state(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = QueryHistoryStore(blocker / "history.json")

    assert store.record("京A12345") == ["京A12345"]
    assert store.toggle_favorite("京A12345") is True
    assert store.history() == ["京A12345"]
    assert store.favorites() == ["京A12345"]


def test_full_favorites_does_not_rewrite_file(store, tmp_path):
    for i in range(5):
        store.toggle_favorite(f"京A1234{i}")
    path = tmp_path / "history.json"
    before = path.read_text(encoding="utf-8")
    path.write_text("sentinel", encoding="utf-8")

    assert store.toggle_favorite("沪B88888") is False
    assert path.read_text(encoding="utf-8") == "sentinel"
    assert before
