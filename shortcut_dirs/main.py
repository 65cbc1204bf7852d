"""
shortcut-dirs - command line entry point.

Prints the system-wide and per-user application shortcut folders for the
running (or a chosen) platform.
"""

from __future__ import annotations

import json
from typing import Optional

import typer

from . import __version__
from .config import ResolverConfig, load_config
from .constants import EXIT_ABSENT, EXIT_ERROR, UNAVAILABLE_LABEL
from .known_folders import KnownFolderError
from .logger import get_logger, setup_logging
from .platforms import Platform
from .resolver import ShortcutDirResolver

logger = get_logger(__name__)

app = typer.Typer(help="Show where application shortcuts live on this system.")


def _platform_option() -> typer.Option:
    return typer.Option(
        None,
        "--platform",
        case_sensitive=False,
        help="Resolve for this platform instead of the running one.",
    )


def _home_option() -> typer.Option:
    return typer.Option(None, "--home", help="Home directory to use instead of $HOME.")


def _config_option() -> typer.Option:
    return typer.Option(None, "--config", help="JSON file with resolver overrides.")


def _log_dir_option() -> typer.Option:
    return typer.Option(None, "--log-dir", help="Also write a log file to this directory.")


def _json_option() -> typer.Option:
    return typer.Option(False, "--json", help="Print the result as a JSON object.")


def _verbose_option() -> typer.Option:
    return typer.Option(False, "--verbose", "-v", help="Enable debug logging.")


def _build_resolver(
    platform: Optional[Platform],
    home: Optional[str],
    config_path: Optional[str],
    log_dir: Optional[str],
    verbose: bool,
) -> ShortcutDirResolver:
    """Combine config file, environment and flags (flags win) into a resolver."""
    try:
        config = load_config(config_path).merged_with(ResolverConfig.from_env())
        config = config.merged_with(
            ResolverConfig(
                platform=platform.value if platform is not None else "",
                home=home or "",
                log_level="DEBUG" if verbose else "",
            )
        )
        setup_logging(log_level=config.resolved_log_level(), log_dir=log_dir)
        resolver = ShortcutDirResolver.from_config(config)
    except (OSError, ValueError) as exc:
        # Logging may not be configured yet
        typer.echo(f"shortcut-dirs: configuration error: {exc}", err=True)
        raise typer.Exit(code=EXIT_ERROR) from exc

    logger.debug(f"Using {resolver!r}")
    return resolver


def _echo_single(resolver: ShortcutDirResolver, which: str, as_json: bool) -> None:
    try:
        path = resolver.system_dir() if which == "system" else resolver.local_dir()
    except KnownFolderError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=EXIT_ERROR) from exc

    if as_json:
        typer.echo(json.dumps({"platform": resolver.platform.value, which: path}))
    elif path is not None:
        typer.echo(path)

    if path is None:
        logger.info(f"No {which} shortcuts folder on {resolver.platform.value}")
        raise typer.Exit(code=EXIT_ABSENT)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"shortcut-dirs {__version__}")
        raise typer.Exit()


@app.callback()
def _main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Show where application shortcuts live on this system.

    Exit codes: 0 success, 1 folder not available on this platform,
    2 known-folder lookup or configuration error.
    """


@app.command()
def system(
    platform: Optional[Platform] = _platform_option(),
    home: Optional[str] = _home_option(),
    config: Optional[str] = _config_option(),
    log_dir: Optional[str] = _log_dir_option(),
    as_json: bool = _json_option(),
    verbose: bool = _verbose_option(),
) -> None:
    """Print the system-wide shortcuts folder."""

    resolver = _build_resolver(platform, home, config, log_dir, verbose)
    _echo_single(resolver, "system", as_json)


@app.command()
def local(
    platform: Optional[Platform] = _platform_option(),
    home: Optional[str] = _home_option(),
    config: Optional[str] = _config_option(),
    log_dir: Optional[str] = _log_dir_option(),
    as_json: bool = _json_option(),
    verbose: bool = _verbose_option(),
) -> None:
    """Print the current user's shortcuts folder."""

    resolver = _build_resolver(platform, home, config, log_dir, verbose)
    _echo_single(resolver, "local", as_json)


@app.command("all")
def show_all(
    platform: Optional[Platform] = _platform_option(),
    home: Optional[str] = _home_option(),
    config: Optional[str] = _config_option(),
    log_dir: Optional[str] = _log_dir_option(),
    as_json: bool = _json_option(),
    verbose: bool = _verbose_option(),
) -> None:
    """Print both folders, marking missing ones as unavailable."""

    resolver = _build_resolver(platform, home, config, log_dir, verbose)
    dirs = resolver.resolve_all()
    if as_json:
        typer.echo(json.dumps(dirs.to_dict()))
    else:
        typer.echo(f"system: {dirs.system or UNAVAILABLE_LABEL}")
        typer.echo(f"local: {dirs.local or UNAVAILABLE_LABEL}")

    if dirs.error is not None:
        logger.error(dirs.error)
        raise typer.Exit(code=EXIT_ERROR)


def main() -> None:
    """Execute the Typer application."""

    app()


if __name__ == "__main__":
    main()
