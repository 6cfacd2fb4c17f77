import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Annotated

import typer

from .config import CONFIG_FILENAME, AppConfig
from .errors import ScanError
from .formatting import format_size, render_report
from .log import configure_logging, resolve_level
from .models import ScanResult
from .scanner import scan

app: typer.Typer = typer.Typer(
    help="dirscan: summarize what takes up space in a directory tree",
)


def installed_version() -> str:
    try:
        return version(distribution_name="dirscan")
    except PackageNotFoundError:
        return "unknown (package not installed)"


def print_version(is_version: bool) -> None:
    """
    Callback for the global --version / -V option.

    Prints the installed version and stops before any subcommand runs.
    """
    if not is_version:
        return

    typer.echo(installed_version())
    raise typer.Exit()


def load_config(config_path: Path) -> AppConfig:
    try:
        return AppConfig.load(config_path)
    except (ValueError, TypeError) as e:
        typer.echo(f"Error: invalid config {config_path}: {e}", err=True)
        raise typer.Exit(code=1)


def show_progress(current_path: str, files: int, dirs: int, bytes_scanned: int) -> None:
    typer.echo(f"\r  {dirs} dirs, {files} files, {format_size(bytes_scanned)}", nl=False, err=True)


@app.command(name="scan")
def scan_cmd(
    path: Annotated[Path, typer.Argument(help="Directory to scan.")] = Path("."),
    top: Annotated[int | None, typer.Option("--top", "-n", help="Number of largest files to list.")] = None,
    config: Annotated[Path, typer.Option(help="Config file to read.")] = CONFIG_FILENAME,
    log_level: Annotated[str | None, typer.Option(help="DEBUG, INFO, WARNING or ERROR.")] = None,
    progress: Annotated[bool | None, typer.Option("--progress/--no-progress")] = None,
) -> None:
    """Scan a directory and print size statistics."""
    cfg: AppConfig = load_config(config)

    if top is not None:
        cfg.top_files = top
    if log_level is not None:
        cfg.log_level = log_level
    if progress is not None:
        cfg.show_progress = progress

    try:
        level: int = resolve_level(cfg.log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")

    logger: logging.Logger = configure_logging(level)

    typer.echo("Starting directory scan...")

    try:
        result: ScanResult = scan(path, progress=show_progress if cfg.show_progress else None)
    except ScanError as e:
        if cfg.show_progress:
            typer.echo("", err=True)
        logger.error("Scan aborted: %s", e)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if cfg.show_progress:
        typer.echo("", err=True)

    typer.echo(f"Scan completed in {result.elapsed_sec:.2f} seconds. Found {len(result)} items.\n")
    for line in render_report(result, top=cfg.top_files):
        typer.echo(line)


@app.command()
def init(
    top: Annotated[int, typer.Option("--top", "-n")] = AppConfig().top_files,
    log_level: Annotated[str, typer.Option()] = AppConfig().log_level,
    progress: Annotated[bool, typer.Option("--progress/--no-progress")] = True,
    force: Annotated[bool, typer.Option()] = False,
) -> None:
    """Write a config file with the given defaults."""

    if CONFIG_FILENAME.exists() and not force:
        typer.echo("Config file already exists. Use --force to overwrite.")
        raise typer.Exit(code=1)

    cfg: AppConfig = AppConfig(top_files=top, log_level=log_level, show_progress=progress)

    cfg.save(CONFIG_FILENAME)
    typer.echo(f"Config written to {CONFIG_FILENAME}")


@app.command(name="version")
def version_cmd() -> None:
    """Print the installed version of dirscan."""
    print_version(True)


@app.callback()
def main(
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=print_version,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """
    Global options for dirscan. All subcommands run after this callback unless
    --version is used.
    """
    return


if __name__ == "__main__":
    app()
