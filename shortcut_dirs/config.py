"""
Configuration management for shortcut-dirs.

This module handles loading and validating resolver overrides from a JSON
file and from environment variables.
"""

import json
import logging
import os
from dataclasses import dataclass, asdict, replace
from pathlib import Path
from typing import Any, Mapping, Optional

from .constants import ENV_HOME, ENV_LOG_LEVEL, ENV_PLATFORM
from .logger import get_logger
from .platforms import Platform, detect_platform, parse_platform

__all__ = ["ResolverConfig", "load_config"]

logger = get_logger(__name__)


@dataclass
class ResolverConfig:
    """Resolver overrides.

    Empty strings mean "not overridden": the running platform, the
    ``HOME`` environment variable and the logging default are used instead.
    """

    platform: str = ""
    home: str = ""
    log_level: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary.

        Returns:
            Dict with keys ``platform``, ``home`` and ``log_level``.
        """
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResolverConfig":
        """Create config from dictionary.

        Args:
            data: Dictionary with config keys. Missing keys use defaults.
                Unknown keys are silently ignored.

        Returns:
            A new ``ResolverConfig`` instance.
        """
        return cls(
            platform=str(data.get("platform", "") or ""),
            home=str(data.get("home", "") or ""),
            log_level=str(data.get("log_level", "") or ""),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ResolverConfig":
        """Create config from ``SHORTCUT_DIRS_*`` environment variables."""
        env = os.environ if environ is None else environ
        return cls.from_dict(
            {
                "platform": env.get(ENV_PLATFORM, ""),
                "home": env.get(ENV_HOME, ""),
                "log_level": env.get(ENV_LOG_LEVEL, ""),
            }
        )

    def merged_with(self, other: "ResolverConfig") -> "ResolverConfig":
        """Return a copy where every field set in *other* wins."""
        overrides = {key: value for key, value in other.to_dict().items() if value}
        return replace(self, **overrides)

    def resolved_platform(self) -> Platform:
        """Return the configured platform, or the running one when unset.

        Raises:
            ValueError: If ``platform`` is not a known platform name.
        """
        if not self.platform:
            return detect_platform()
        return parse_platform(self.platform)

    def resolved_log_level(self) -> Optional[int]:
        """Return the numeric logging level, or ``None`` when unset.

        Raises:
            ValueError: If ``log_level`` is not a standard level name.
        """
        if not self.log_level:
            return None
        level = logging.getLevelName(self.log_level.strip().upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        return level


def load_config(config_path: Optional[str] = None) -> ResolverConfig:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to the config file (default: no file)

    Returns:
        ResolverConfig with loaded values, or defaults if no file is
        given or the file does not exist.

    Raises:
        json.JSONDecodeError: If the config file contains invalid JSON.
        ValueError: If the config file does not hold a JSON object.
        IOError: If the config file exists but cannot be read.
    """
    if not config_path:
        return ResolverConfig()

    path = Path(config_path)
    if not path.exists():
        logger.info(f"Config file {path} not found, using defaults")
        return ResolverConfig()

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")

    config = ResolverConfig.from_dict(data)
    logger.debug(f"Configuration loaded from {path}: {config.to_dict()}")
    return config
