# config_manager.py - JSON config manager

import json
import os

from persian_word_guesser.utils.logger_utils import Log

DEFAULTS = {
    "word_list": os.path.join("data", "persian_words.txt"),
    "word_list_format": "",  # "" = pick by file extension
    "state_path": os.path.join("data", "user_state.json"),
    "state_key": "selected-words",
    "max_total_guesses": 90,
    "max_returned_guesses": 30,
    "select_suggestion": True,  # auto-replace composing text with the best guess on commit
    "log_path": os.path.join("logs", "guesser.log"),
    "log_level": "INFO",
    "log_echo": False,
}


class Config:
    def __init__(self, path="config.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    self.data.update(json.load(f))
            except (OSError, ValueError) as e:
                Log.warning(f"[Config] could not read {self.path}, using defaults: {e}")
        else:
            self.save()

    def save(self):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2, ensure_ascii=False)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def __getitem__(self, key):
        return self.data[key]

    def set(self, key, val) -> bool:
        """Set a known option, coercing to the default's type. Returns False for unknown keys or bad values."""
        if key not in DEFAULTS:
            Log.warning(f"[Config] no such option: {key}")
            return False
        kind = type(DEFAULTS[key])
        if kind is bool and isinstance(val, str):
            val = val.strip().lower() in ("1", "true", "yes", "on")
        try:
            val = kind(val)
        except (TypeError, ValueError):
            Log.warning(f"[Config] bad value for {key}: {val!r}")
            return False
        self.data[key] = val
        self.save()
        return True
