from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from keysprint.core.wordlists import BuiltInWordlist

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".keysprint" / "config.yaml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class TestConfig:
    """Settings for a run of typing tests."""

    __test__ = False  # not a pytest test class

    num_words: int = 30
    wordlist: Optional[BuiltInWordlist] = BuiltInWordlist.COMMON
    wordlist_file: Optional[Path] = None
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    def __post_init__(self) -> None:
        if self.num_words <= 0:
            raise ValueError(f"num_words must be a positive integer, got {self.num_words}")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{self.log_level}' (choose from {', '.join(LOG_LEVELS)})")

    def text_name(self) -> str:
        """Label of the text source shown on the results screen."""
        if self.wordlist_file is not None:
            return self.wordlist_file.name
        if self.wordlist is not None:
            return self.wordlist.title
        return "an unknown word list"

    def with_overrides(self, **overrides: Any) -> "TestConfig":
        """Return a copy with every override that is not None applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes) if changes else self


def _coerce(raw: Dict[str, Any]) -> Dict[str, Any]:
    known = {f.name for f in fields(TestConfig)}
    values: Dict[str, Any] = {}
    for key, value in raw.items():
        if key not in known:
            logger.warning("Ignoring unknown config key '%s'", key)
            continue
        if value is None:
            continue
        if key == "num_words":
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"num_words must be an integer, got {value!r}")
            values[key] = value
        elif key == "wordlist":
            values[key] = BuiltInWordlist.from_name(str(value))
        elif key in ("wordlist_file", "log_file"):
            values[key] = Path(str(value)).expanduser()
        elif key == "log_level":
            values[key] = str(value).upper()
    return values


def load_config(path: Optional[Path] = None) -> TestConfig:
    """Load settings from a YAML file, falling back to defaults.

    A missing file means defaults. A file that cannot be read or parsed is
    reported and ignored; values that parse but are invalid raise ValueError.
    """
    file_path = path if path is not None else DEFAULT_CONFIG_PATH
    if not file_path.exists():
        logger.debug("No config file at %s, using defaults", file_path)
        return TestConfig()
    try:
        raw = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, OSError) as e:
        logger.warning("Could not load config from %s: %s", file_path, e)
        return TestConfig()

    if raw is None:
        return TestConfig()
    if not isinstance(raw, dict):
        logger.warning("Could not load config from %s: expected a mapping", file_path)
        return TestConfig()
    return TestConfig(**_coerce(raw))
