"""Configuration system for completetreelib.

A TreeConfig controls how trees report rejected mutations and how much
checking they do before structural edits. Trees take an explicit config
or fall back to the process-wide one built from environment variables:

    COMPLETETREE_LOG_LEVEL     logging level name (default WARNING)
    COMPLETETREE_STRICT        raise instead of returning rejections
    COMPLETETREE_CHECK_REMOVE  verify completeness before remove()
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


def _bool_from_env(value: Optional[str], *, default: bool) -> bool:
    if value is None:
        return default
    value = value.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default


def _normalise_log_level(value: Optional[str]) -> str:
    if value is None or value.strip() == "":
        return "WARNING"
    level = value.strip().upper()
    if level not in _LOG_LEVELS:
        raise ValueError(f"Unsupported log level '{value}'. Expected one of {sorted(_LOG_LEVELS)}.")
    return level


@dataclass(frozen=True)
class TreeConfig:
    """Behaviour switches shared by CompleteBinaryTree and Heap."""

    log_level: str = "WARNING"                  # Logger level; only runtime_config() applies it
    strict: bool = False                        # Raise on rejected / not-found mutations
    check_completeness_on_remove: bool = True   # Refuse to remove from a broken tree

    def __post_init__(self):
        object.__setattr__(self, "log_level", _normalise_log_level(self.log_level))

    @property
    def log_level_value(self) -> int:
        """Numeric logging level, as understood by the logging module."""
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls) -> "TreeConfig":
        return cls(
            log_level=_normalise_log_level(os.getenv("COMPLETETREE_LOG_LEVEL")),
            strict=_bool_from_env(os.getenv("COMPLETETREE_STRICT"), default=False),
            check_completeness_on_remove=_bool_from_env(
                os.getenv("COMPLETETREE_CHECK_REMOVE"), default=True
            ),
        )


@lru_cache(maxsize=None)
def runtime_config() -> TreeConfig:
    """Return the process-wide configuration, read once from the environment."""
    return TreeConfig.from_env()


def reset_runtime_config() -> None:
    """Forget the cached configuration so the environment is read again."""
    runtime_config.cache_clear()
