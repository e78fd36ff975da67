# model_store.py - simple persistence layer for the word guesser

# Holds the user's ranking state between runs. The host keeps its
# preferences in one JSON file of string keys -> string values; the
# guesser only ever reads and writes a single key ("selected-words").

import json
import os
from typing import Dict, List, Optional

from persian_word_guesser.core.errors import StateSaveError
from persian_word_guesser.utils.logger_utils import Log

DATA_DIRECTORY = "data"
STATE_PATH = os.path.join(DATA_DIRECTORY, "user_state.json")


class PreferenceStore:
    """
    Durable key/value store backed by a JSON file.
    Public API:
      get(key, default=None)
      put(key, value)     -> writes through immediately
      remove(key)
      keys()
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path or STATE_PATH
        self._data: Dict[str, str] = self._load()

    def _load(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            Log.warning(f"[Store] could not read {self.path}, starting empty: {e}")
            return {}
        if not isinstance(data, dict):
            Log.warning(f"[Store] {self.path} does not hold a JSON object, starting empty")
            return {}
        Log.debug(f"[Store] loaded {len(data)} keys from {self.path}")
        return {str(k): v for k, v in data.items()}

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._data.get(key, default)

    def keys(self) -> List[str]:
        return list(self._data)

    def put(self, key: str, value: str) -> None:
        """Store value under key and commit to disk (StateSaveError on failure)."""
        previous = self._data.get(key)
        self._data[key] = value
        try:
            self._commit()
        except OSError as e:
            if previous is None:
                self._data.pop(key, None)
            else:
                self._data[key] = previous
            raise StateSaveError(f"could not write {self.path}: {e}") from e

    def remove(self, key: str) -> None:
        if self._data.pop(key, None) is not None:
            try:
                self._commit()
            except OSError as e:
                raise StateSaveError(f"could not write {self.path}: {e}") from e

    def _commit(self) -> None:
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        tmp = self.path + ".tmp"
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(self._data, f, indent=2, ensure_ascii=False)
        os.replace(tmp, self.path)
        Log.debug(f"[Store] committed {len(self._data)} keys to {self.path}")
