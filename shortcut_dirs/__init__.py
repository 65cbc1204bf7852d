"""
shortcut-dirs - locate the folders where application shortcuts live.

This package provides modules for:
- Shortcut folder resolution (resolver)
- Windows known-folder lookups (known_folders)
- Platform detection (platforms)
- Resolver overrides (config)
- Constants (constants)
- Logging setup (logger)
- Command line entry point (main)
"""

__version__ = "1.0.0"
__author__ = "shortcut-dirs contributors"

from .known_folders import KnownFolderError
from .platforms import Platform, detect_platform
from .resolver import (
    ShortcutDirResolver,
    ShortcutDirs,
    get_default_resolver,
    local_shortcuts_dir,
    system_shortcuts_dir,
)

__all__ = [
    "KnownFolderError",
    "Platform",
    "ShortcutDirResolver",
    "ShortcutDirs",
    "detect_platform",
    "get_default_resolver",
    "local_shortcuts_dir",
    "system_shortcuts_dir",
    "main",
]


def __getattr__(name: str) -> object:
    """Lazy-import the command line entry point.

    Args:
        name: The attribute name being looked up.

    Returns:
        The ``main`` function of :mod:`shortcut_dirs.main`.

    Raises:
        AttributeError: If *name* is not a public symbol of this package.
    """

    if name == "main":
        from .main import main  # noqa: F811

        globals()["main"] = main
        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
