# config_manager.py - JSON config manager

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# environment overrides for the two dictionary files
ENV_TEXT_PATH = "WORD_COMPLETION_TEXT_PATH"
ENV_BIN_PATH = "WORD_COMPLETION_BIN_PATH"

DEFAULTS: Dict[str, Any] = {
    "text_path": "words.txt",
    "bin_path": "words.txt.bin",
    "top_k": 10,
    "autosave": True,
    "spell_max_dist": None,  # None = rank every word
    "log_path": os.path.join("logs", "word_completion.log"),
}


class Config:
    """
    Settings for a dictionary session.
    Precedence: defaults < JSON file < environment (paths only).
    A missing file just means defaults.
    """

    def __init__(self, path: Optional[str] = None, env: bool = True):
        self.path = path
        self.data: Dict[str, Any] = dict(DEFAULTS)
        if path:
            self._load()
        if env:
            self._apply_env()

    def _load(self) -> None:
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("config %s unreadable, using defaults: %s", self.path, e)
            return
        if not isinstance(raw, dict):
            logger.warning("config %s is not a JSON object, ignored", self.path)
            return
        for k, v in raw.items():
            if k not in DEFAULTS:
                logger.warning("unknown config option %r ignored", k)
                continue
            self.data[k] = v

    def _apply_env(self) -> None:
        for key, var in (("text_path", ENV_TEXT_PATH), ("bin_path", ENV_BIN_PATH)):
            val = os.environ.get(var)
            if val:
                self.data[key] = val

    def save(self, path: Optional[str] = None) -> None:
        target = path or self.path
        if not target:
            raise ValueError("no config path to save to")
        with open(target, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key: str) -> Any:
        return self.data[key]

    def set(self, key: str, val: Any) -> None:
        """Set an option, coercing to the type of its default. Unknown keys raise KeyError."""
        if key not in DEFAULTS:
            raise KeyError(f"no such option: {key}")
        default = DEFAULTS[key]
        if isinstance(default, bool) and isinstance(val, str):
            val = val.strip().lower() in ("1", "true", "yes", "on")
        elif default is None and isinstance(val, str):
            val = None if val.strip().lower() in ("", "none", "null") else int(val)
        elif default is not None:
            val = type(default)(val)
        self.data[key] = val

    # shortcuts
    @property
    def text_path(self) -> str:
        return self.data["text_path"]

    @property
    def bin_path(self) -> str:
        return self.data["bin_path"]

    @property
    def top_k(self) -> int:
        return int(self.data["top_k"])

    @property
    def autosave(self) -> bool:
        return bool(self.data["autosave"])

    @property
    def spell_max_dist(self) -> Optional[int]:
        v = self.data["spell_max_dist"]
        return None if v is None else int(v)

    @property
    def log_path(self) -> str:
        return self.data["log_path"]
