"""
Resolution of system-wide and per-user application shortcut folders.

Each platform has its own strategy; a :class:`ShortcutDirResolver` picks one
when it is built and uses it for every call. Windows asks the shell for the
Start Menu ``Programs`` known folder, Linux and macOS use fixed locations,
and any other platform has no shortcut folders at all.
"""

from __future__ import annotations

import os
import posixpath
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from .constants import (
    HOME_ENV_VAR,
    LINUX_LOCAL_SHORTCUTS_SUFFIX,
    LINUX_SYSTEM_SHORTCUTS_DIR,
    MACOS_LOCAL_SHORTCUTS_SUFFIX,
    MACOS_SYSTEM_SHORTCUTS_DIR,
)
from .known_folders import KnownFolderError, get_programs_folder
from .logger import get_logger
from .platforms import Platform, detect_platform

if TYPE_CHECKING:
    from .config import ResolverConfig

__all__ = [
    "HomeProvider",
    "ShortcutDirs",
    "ShortcutDirResolver",
    "env_home",
    "fixed_home",
    "get_default_resolver",
    "system_shortcuts_dir",
    "local_shortcuts_dir",
]

logger = get_logger(__name__)

HomeProvider = Callable[[], Optional[str]]


def env_home() -> Optional[str]:
    """Return ``$HOME`` from the process environment, or ``None`` if unset."""
    return os.environ.get(HOME_ENV_VAR)


def fixed_home(home: Optional[str]) -> HomeProvider:
    """Build a home provider that always answers *home*."""
    return lambda: home


@dataclass(frozen=True)
class ShortcutDirs:
    """Both shortcut folders resolved in one go.

    Attributes:
        platform: Platform the values were resolved for.
        system: System-wide shortcut folder, or ``None``.
        local: Per-user shortcut folder, or ``None``.
        error: Known-folder failure message, or ``None`` when nothing failed.
    """

    platform: Platform
    system: Optional[str]
    local: Optional[str]
    error: Optional[str] = None

    def to_dict(self) -> dict[str, Optional[str]]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "platform": self.platform.value,
            "system": self.system,
            "local": self.local,
            "error": self.error,
        }


class _Strategy:
    """Shortcut folder lookup for one platform."""

    def system_dir(self) -> Optional[str]:
        return None

    def local_dir(self) -> Optional[str]:
        return None


class _WindowsStrategy(_Strategy):
    """Start Menu ``Programs`` folder, the same for both lookups."""

    def __init__(self, known_folder: Callable[[], str]):
        self._known_folder = known_folder

    def system_dir(self) -> Optional[str]:
        return self._known_folder()

    def local_dir(self) -> Optional[str]:
        # The shell already resolves Programs for the current user.
        return self.system_dir()


class _PosixStrategy(_Strategy):
    """Fixed system folder plus a folder under the user's home directory."""

    def __init__(self, system_dir: str, local_suffix: str, home_provider: HomeProvider):
        self._system_dir = system_dir
        self._local_suffix = local_suffix
        self._home_provider = home_provider

    def system_dir(self) -> Optional[str]:
        return self._system_dir

    def local_dir(self) -> Optional[str]:
        home = self._home_provider()
        if home is None:
            logger.debug(f"{HOME_ENV_VAR} is not set; no local shortcuts folder")
            return None
        if not home or not posixpath.isabs(home):
            logger.warning(
                f"Ignoring {HOME_ENV_VAR}={home!r}: not an absolute path"
            )
            return None
        return posixpath.join(home, self._local_suffix)


class ShortcutDirResolver:
    """Resolves shortcut folders for a single platform.

    The platform strategy is selected once, in the constructor. Instances
    hold no mutable state and can be shared between threads.
    """

    def __init__(
        self,
        platform: Optional[Platform] = None,
        home_provider: Optional[HomeProvider] = None,
        known_folder: Optional[Callable[[], str]] = None,
    ):
        """
        Initialize ShortcutDirResolver.

        Args:
            platform: Platform to resolve for (default: the running one)
            home_provider: Source of the user's home directory
                (default: the ``HOME`` environment variable)
            known_folder: Windows ``Programs`` folder lookup
                (default: :func:`get_programs_folder`)
        """
        self.platform = platform if platform is not None else detect_platform()
        home_provider = home_provider or env_home
        known_folder = known_folder or get_programs_folder

        if self.platform is Platform.WINDOWS:
            self._strategy: _Strategy = _WindowsStrategy(known_folder)
        elif self.platform is Platform.LINUX:
            self._strategy = _PosixStrategy(
                LINUX_SYSTEM_SHORTCUTS_DIR, LINUX_LOCAL_SHORTCUTS_SUFFIX, home_provider
            )
        elif self.platform is Platform.MACOS:
            self._strategy = _PosixStrategy(
                MACOS_SYSTEM_SHORTCUTS_DIR, MACOS_LOCAL_SHORTCUTS_SUFFIX, home_provider
            )
        else:
            self._strategy = _Strategy()

    @classmethod
    def from_config(cls, config: "ResolverConfig") -> "ShortcutDirResolver":
        """Build a resolver honouring the overrides in *config*.

        Raises:
            ValueError: If the configured platform name is unknown.
        """
        home_provider = fixed_home(config.home) if config.home else None
        return cls(platform=config.resolved_platform(), home_provider=home_provider)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(platform={self.platform.value!r})"

    def system_dir(self) -> Optional[str]:
        """
        Return the system-wide shortcuts folder.

        Returns:
            ``/usr/share/applications/`` on Linux, ``/Applications/`` on
            macOS, the Start Menu ``Programs`` folder on Windows, or
            ``None`` on any other platform

        Raises:
            KnownFolderError: If the Windows known-folder query fails
        """
        path = self._strategy.system_dir()
        logger.debug(f"System shortcuts dir ({self.platform.value}): {path}")
        return path

    def local_dir(self) -> Optional[str]:
        """
        Return the current user's shortcuts folder.

        Returns:
            ``$HOME/.local/share/applications`` on Linux,
            ``$HOME/Applications`` on macOS, the same folder as
            :meth:`system_dir` on Windows, or ``None`` when ``HOME`` is
            unset or the platform is unsupported

        Raises:
            KnownFolderError: If the Windows known-folder query fails
        """
        path = self._strategy.local_dir()
        logger.debug(f"Local shortcuts dir ({self.platform.value}): {path}")
        return path

    def resolve_all(self) -> ShortcutDirs:
        """Resolve both folders, capturing a known-folder failure instead of raising."""
        try:
            system = self.system_dir()
            if self.platform is Platform.WINDOWS:
                # Same known folder; one shell query per snapshot.
                local = system
            else:
                local = self.local_dir()
        except KnownFolderError as e:
            logger.debug(f"Known folder lookup failed: {e}")
            return ShortcutDirs(self.platform, None, None, str(e))
        return ShortcutDirs(self.platform, system, local)


_default_resolver: Optional[ShortcutDirResolver] = None


def get_default_resolver() -> ShortcutDirResolver:
    """Return the shared resolver for the running platform."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = ShortcutDirResolver()
    return _default_resolver


def system_shortcuts_dir() -> Optional[str]:
    """Return the system-wide shortcuts folder for the running platform.

    Raises:
        KnownFolderError: If the Windows known-folder query fails
    """
    return get_default_resolver().system_dir()


def local_shortcuts_dir() -> Optional[str]:
    """Return the current user's shortcuts folder for the running platform.

    Raises:
        KnownFolderError: If the Windows known-folder query fails
    """
    return get_default_resolver().local_dir()
