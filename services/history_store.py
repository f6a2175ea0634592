import json
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from config import logger, settings

HISTORY_KEY = "plateHistory"
FAVORITES_KEY = "plateFavorites"


def _atomic_write_json(path: Path, payload: Any) -> None:
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    tmp.replace(path)


def _clean_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if isinstance(v, str) and v]


class QueryHistoryStore:
    """
    Recent queries and favorite plates, persisted to a small JSON file.

    Recent queries keep the newest `history_limit` distinct plates, newest
    first. Favorites hold at most `favorites_limit` plates; adding one more
    is ignored.
    """

    def __init__(
        self,
        path: Union[str, Path],
        history_limit: int = 10,
        favorites_limit: int = 5,
    ):
        self.path = Path(path)
        self.history_limit = history_limit
        self.favorites_limit = favorites_limit
        self._lock = threading.Lock()
        self._cache: Optional[Dict[str, List[str]]] = None

    def _load(self) -> Dict[str, List[str]]:
        if self._cache is not None:
            return self._cache

        data: Dict[str, Any] = {}
        if self.path.exists():
            try:
                raw = self.path.read_text(encoding="utf-8")
                data = json.loads(raw) if raw.strip() else {}
                if not isinstance(data, dict):
                    logger.warning(f"History file {self.path} is not a JSON object, ignoring it.")
                    data = {}
            except (OSError, ValueError) as e:
                logger.warning(f"Cannot read history file {self.path}: {e}")
                data = {}

        self._cache = {
            HISTORY_KEY: _clean_list(data.get(HISTORY_KEY))[: self.history_limit],
            FAVORITES_KEY: _clean_list(data.get(FAVORITES_KEY))[: self.favorites_limit],
        }
        return self._cache

    def _save(self, data: Dict[str, List[str]]) -> None:
        # cache is updated even when the file cannot be written
        self._cache = data
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            _atomic_write_json(self.path, data)
        except OSError as e:
            logger.warning(f"Cannot write history file {self.path}: {e}")

    def history(self) -> List[str]:
        with self._lock:
            return list(self._load()[HISTORY_KEY])

    def favorites(self) -> List[str]:
        with self._lock:
            return list(self._load()[FAVORITES_KEY])

    def is_favorite(self, plate: str) -> bool:
        with self._lock:
            return plate in self._load()[FAVORITES_KEY]

    def record(self, plate: str) -> List[str]:
        """Move `plate` to the front of the recent queries and return the new list."""
        if not plate:
            return self.history()
        with self._lock:
            data = self._load()
            recent = [plate] + [p for p in data[HISTORY_KEY] if p != plate]
            data = {**data, HISTORY_KEY: recent[: self.history_limit]}
            self._save(data)
            return list(data[HISTORY_KEY])

    def toggle_favorite(self, plate: str) -> bool:
        """Add or remove a favorite. Returns True if the plate is a favorite afterwards."""
        with self._lock:
            data = self._load()
            favorites = data[FAVORITES_KEY]
            if plate in favorites:
                favorites = [p for p in favorites if p != plate]
            elif len(favorites) < self.favorites_limit:
                favorites = favorites + [plate]
            else:
                logger.info(
                    f"Favorites full ({self.favorites_limit}), '{plate}' not added."
                )
                return False
            self._save({**data, FAVORITES_KEY: favorites})
            return plate in favorites

    def clear_history(self) -> None:
        with self._lock:
            data = self._load()
            self._save({**data, HISTORY_KEY: []})


def create_history_store() -> QueryHistoryStore:
    return QueryHistoryStore(
        settings.history_file,
        history_limit=settings.history_limit,
        favorites_limit=settings.favorites_limit,
    )
