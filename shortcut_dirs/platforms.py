"""
Platform detection for shortcut directory resolution.
"""

import enum
import sys
from typing import Optional

__all__ = ["Platform", "detect_platform", "parse_platform"]


class Platform(enum.Enum):
    """Operating system families with distinct shortcut folder layouts."""

    WINDOWS = "windows"
    LINUX = "linux"
    MACOS = "macos"
    OTHER = "other"


def detect_platform(sys_platform: Optional[str] = None) -> Platform:
    """Map a ``sys.platform`` value to a :class:`Platform`.

    Args:
        sys_platform: Value to classify (default: the running interpreter's
            ``sys.platform``).

    Returns:
        The matching platform, ``Platform.OTHER`` when unrecognised.
    """
    value = sys.platform if sys_platform is None else sys_platform
    if value == "win32":
        return Platform.WINDOWS
    if value.startswith("linux"):
        return Platform.LINUX
    if value == "darwin":
        return Platform.MACOS
    return Platform.OTHER


def parse_platform(name: str) -> Platform:
    """Parse a user-supplied platform name such as ``"macOS"``.

    Raises:
        ValueError: If *name* is not a known platform name.
    """
    try:
        return Platform(name.strip().lower())
    except ValueError:
        choices = ", ".join(p.value for p in Platform)
        raise ValueError(
            f"Unknown platform {name!r} (expected one of: {choices})"
        ) from None
