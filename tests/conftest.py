from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from .mocks import FakeComError, FakeWinError


@pytest.fixture
def fake_pywin32():
    """Pretend pywin32 is installed; yields the mocked ``shell`` module."""
    fake_pywintypes = SimpleNamespace(
        IID=lambda guid: f"IID{guid}",
        com_error=FakeComError,
        error=FakeWinError,
    )
    fake_shell = MagicMock()
    with patch("shortcut_dirs.known_folders.HAS_PYWIN32", True), patch(
        "shortcut_dirs.known_folders.pywintypes", fake_pywintypes
    ), patch("shortcut_dirs.known_folders.shell", fake_shell):
        yield fake_shell


@pytest.fixture(autouse=True)
def reset_default_resolver(monkeypatch):
    """Each test gets a freshly built process-wide resolver."""
    monkeypatch.setattr("shortcut_dirs.resolver._default_resolver", None)
