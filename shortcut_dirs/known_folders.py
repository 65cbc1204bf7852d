"""
Windows known-folder lookups for shortcut-dirs.

This module wraps the shell ``SHGetKnownFolderPath`` facility exposed by
pywin32. Failures are raised as :class:`KnownFolderError` so callers can
tell a broken lookup apart from a platform that has no such folder.
"""

from typing import Optional

# Platform-specific imports
try:
    import pywintypes
    from win32com.shell import shell
    HAS_PYWIN32 = True
except ImportError:
    HAS_PYWIN32 = False
    pywintypes = None  # type: ignore
    shell = None  # type: ignore

from .constants import FOLDERID_PROGRAMS, FOLDERID_PROGRAMS_NAME, KF_FLAG_DEFAULT
from .logger import get_logger

__all__ = [
    "HAS_PYWIN32",
    "KnownFolderError",
    "get_known_folder_path",
    "get_programs_folder",
]

logger = get_logger(__name__)


class KnownFolderError(OSError):
    """Raised when Windows cannot resolve a known folder.

    Attributes:
        folder: Human-readable known folder name, e.g. ``"Programs"``.
        hresult: HRESULT reported by the shell, or ``None`` if unknown.
    """

    def __init__(self, folder: str, message: str, hresult: Optional[int] = None):
        self.folder = folder
        self.hresult = hresult
        detail = f"Could not resolve known folder {folder!r}: {message}"
        if hresult is not None:
            detail += f" (HRESULT: 0x{hresult & 0xFFFFFFFF:08X})"
        super().__init__(detail)


def get_known_folder_path(
    folder_id: str,
    folder_name: str,
    flags: int = KF_FLAG_DEFAULT,
) -> str:
    """
    Resolve a Windows known folder for the current user.

    Args:
        folder_id: KNOWNFOLDERID GUID string, e.g. ``FOLDERID_PROGRAMS``
        folder_name: Name used in log and error messages
        flags: KNOWN_FOLDER_FLAG bits (default: ``KF_FLAG_DEFAULT``)

    Returns:
        The absolute folder path reported by the shell

    Raises:
        KnownFolderError: If pywin32 is unavailable or the shell call fails
    """
    if not HAS_PYWIN32:
        raise KnownFolderError(
            folder_name, "pywin32 is required to query Windows known folders"
        )

    try:
        # No access token: resolve for the user running this process.
        path = shell.SHGetKnownFolderPath(pywintypes.IID(folder_id), flags, None)
    except pywintypes.com_error as e:
        raise KnownFolderError(
            folder_name, e.strerror or str(e), getattr(e, "hresult", None)
        ) from e
    except pywintypes.error as e:
        raise KnownFolderError(folder_name, e.strerror or str(e), e.winerror) from e

    if not path:
        raise KnownFolderError(folder_name, "the shell returned an empty path")

    logger.debug(f"Known folder {folder_name} resolved to {path}")
    return str(path)


def get_programs_folder() -> str:
    """Return the current user's Start Menu ``Programs`` folder."""
    return get_known_folder_path(FOLDERID_PROGRAMS, FOLDERID_PROGRAMS_NAME)
