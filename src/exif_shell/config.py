"""Settings for the extractor CLI and the desktop shell.

Defaults can be overridden through ``EXIF_SHELL_*`` environment variables;
command line flags override both.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import FrozenSet, Mapping

logger = logging.getLogger(__name__)

ENV_PREFIX = "EXIF_SHELL_"

IMAGE_EXTENSIONS = frozenset(
    {".jpg", ".jpeg", ".jpe", ".tif", ".tiff", ".png", ".webp"}
)

LOG_LEVELS = ("debug", "info", "warning", "error")


class EnvReader:
    """Reads typed values from an environment mapping.

    Tests can pass their own mapping instead of touching ``os.environ``.
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env: Mapping[str, str] = env if env is not None else os.environ

    def get_str(self, var: str, default: str | None = None) -> str | None:
        value = self._env.get(var)
        if value is None:
            return default
        return value

    def get_int(self, var: str, default: int) -> int:
        value = self._env.get(var)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid integer value for %s: %s", var, value)
            return default

    def get_list(self, var: str, default: FrozenSet[str]) -> FrozenSet[str]:
        value = self._env.get(var)
        if value is None:
            return default
        items = frozenset(part.strip().lower() for part in value.split(",") if part.strip())
        if not items:
            logger.warning("Empty list value for %s, using defaults", var)
            return default
        return items


@dataclass(frozen=True)
class ExtractorSettings:
    workers: int = 1
    max_binary_bytes: int = 32
    image_extensions: FrozenSet[str] = field(default=IMAGE_EXTENSIONS)
    log_level: str = "warning"

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if self.max_binary_bytes < 0:
            raise ValueError(f"max_binary_bytes must be >= 0, got {self.max_binary_bytes}")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level}")

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "ExtractorSettings":
        reader = EnvReader(env)
        defaults = cls()
        extensions = reader.get_list(f"{ENV_PREFIX}EXTENSIONS", defaults.image_extensions)
        level = (reader.get_str(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level) or "").lower()
        if level not in LOG_LEVELS:
            logger.warning("Invalid log level for %sLOG_LEVEL: %s", ENV_PREFIX, level)
            level = defaults.log_level
        return cls(
            workers=max(1, reader.get_int(f"{ENV_PREFIX}WORKERS", defaults.workers)),
            max_binary_bytes=max(
                0, reader.get_int(f"{ENV_PREFIX}MAX_BINARY_BYTES", defaults.max_binary_bytes)
            ),
            image_extensions=frozenset(
                ext if ext.startswith(".") else f".{ext}" for ext in extensions
            ),
            log_level=level,
        )
