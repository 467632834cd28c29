# config_manager.py - JSON config manager

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULTS = {
    "table_size": 1000,        # hash table slot count, fixed once built
    "render_limit": 100,       # buckets shown by the table dump
    "max_suggestions": 5,
    "lowercase": False,        # ingestion normalization
    "strip_punctuation": False,
    "show_table": True,        # dump the table after loading a corpus
}

POSITIVE_KEYS = ("table_size", "render_limit", "max_suggestions")


class Config:
    """
    Settings with built-in defaults, optionally backed by a JSON file.
    path=None keeps everything in memory; with a path a missing file is
    created from the defaults.
    """

    def __init__(self, path=None):
        self.path = path
        self.data = dict(DEFAULTS)
        if self.path:
            self._load()

    def _load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning("ignoring unreadable config %s: %s", self.path, e)
                return
            if not isinstance(loaded, dict):
                logger.warning("ignoring config %s: top level is not an object", self.path)
                return
            for k, v in loaded.items():
                if k not in self.data:
                    logger.warning("unknown config key %r in %s", k, self.path)
                    continue
                try:
                    self.data[k] = self._coerce(k, v)
                except ValueError as e:
                    logger.warning("keeping default for %s in %s: %s", k, self.path, e)
        else:
            self.save()

    def save(self):
        if not self.path:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def show(self):
        return "\n".join(f"{k:18} = {v}" for k, v in self.data.items())

    def _coerce(self, key, val):
        """Cast `val` to the type of the default for `key`; ValueError if it can't be."""
        default = DEFAULTS[key]
        if isinstance(default, bool):
            if isinstance(val, bool):
                return val
            if isinstance(val, str):
                return val.strip().lower() in ("1", "true", "yes", "on")
            raise ValueError(f"{key} must be true or false, got {val!r}")
        # bool is an int subclass, don't let true/false through as numbers
        if isinstance(val, bool) or not isinstance(val, (int, str)):
            raise ValueError(f"{key} must be an integer, got {val!r}")
        try:
            out = int(val)
        except ValueError:
            raise ValueError(f"{key} must be an integer, got {val!r}") from None
        if key in POSITIVE_KEYS and out <= 0:
            raise ValueError(f"{key} must be positive, got {out}")
        return out

    def set(self, key, val):
        """
        Cast `val` to the type of the default and store it. False for unknown
        keys, ValueError for values that don't fit the option.
        """
        if key not in self.data:
            return False
        self.data[key] = self._coerce(key, val)
        self.save()
        return True
