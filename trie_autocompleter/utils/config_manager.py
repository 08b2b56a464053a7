# config_manager.py - JSON config manager

import json
import logging
import os

from rich.console import Console
from rich.table import Table

from trie_autocompleter.core.collector import CASE_MODES

logger = logging.getLogger(__name__)

DEFAULTS = {
    "max_results": 100,       # collector cap for prefix searches
    "max_word_length": 255,   # longest accepted word
    "label_case": "label",    # "label" = first-inserted casing, "path" = typed prefix + lowercase
    "log_level": "WARNING",
    "log_path": os.path.join("logs", "trie_autocompleter.log"),
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate(key, val):
    """Raise ValueError if `val` is not an acceptable value for `key`."""
    if key in ("max_results", "max_word_length"):
        if isinstance(val, bool) or not isinstance(val, int) or val < 1:
            raise ValueError(f"{key} must be a positive integer, got {val!r}")
    elif key == "label_case":
        if val not in CASE_MODES:
            raise ValueError(f"label_case must be one of {CASE_MODES}, got {val!r}")
    elif key == "log_level":
        if val not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {val!r}")
    elif key == "log_path":
        if not isinstance(val, str) or not val:
            raise ValueError("log_path must be a non-empty string")


class Config:
    def __init__(self, path="config.json", create=True):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load(create)

    def _load(self, create):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning("Config %s unreadable, using defaults: %s", self.path, e)
                return
            if not isinstance(loaded, dict):
                logger.warning("Config %s is not a JSON object, using defaults", self.path)
                return
            for k, v in loaded.items():
                if k not in DEFAULTS:
                    continue
                try:
                    validate(k, v)
                except ValueError as e:
                    logger.warning("Config %s: %s, using default %r", self.path, e, DEFAULTS[k])
                    continue
                self.data[k] = v
        elif create:
            self.save()

    def save(self):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def __getitem__(self, key):
        return self.data[key]

    def show(self, console: Console = None):
        table = Table(title="Config")
        table.add_column("Key", style="cyan")
        table.add_column("Value")
        for k, v in self.data.items():
            table.add_row(k, str(v))
        (console or Console()).print(table)

    def set(self, key, val):
        """
        Cast `val` to the default's type, check it, then persist.
        Raises KeyError for unknown keys and ValueError for bad values;
        nothing is saved on error.
        """
        if key not in DEFAULTS:
            raise KeyError(f"No such option: {key}")
        val = type(DEFAULTS[key])(val)
        if key == "log_level":
            val = val.upper()
        validate(key, val)
        self.data[key] = val
        self.save()
