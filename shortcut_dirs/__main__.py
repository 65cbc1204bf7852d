"""Allow ``python -m shortcut_dirs``."""

from .main import main

main()
