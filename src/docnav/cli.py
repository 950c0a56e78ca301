"""Command-line interface."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
import yaml
from ruamel.yaml import YAML

from docnav import __version__
from docnav.build import build_navigation, list_sections
from docnav.config import Config, default_config, load_config
from docnav.config.load import DEFAULT_CONFIG_NAME
from docnav.output import OUTPUT_FORMATS, dump_navigation

STARTER_CONFIG = """\
# Documentation root; each subdirectory becomes a nav section.
docs_dir: docs
# File extensions treated as pages.
doc_extensions:
  - .md
# Top-level directories to skip.
excluded_dirs: []
# output: .vitepress/navigation.json
format: json
"""

STARTER_DEFAULTS = {
    "docs_dir": "docs",
    "doc_extensions": [".md"],
    "excluded_dirs": [],
    "format": "json",
}


def _make_logger(
    quiet: bool, verbose: bool = False, err: bool = False
) -> tuple[Callable[..., None], Callable[..., None]]:
    """Create log and log_verbose functions for CLI output.

    Args:
        quiet: If True, suppress all output.
        verbose: If True, enable verbose logging (quiet overrides this).
        err: Default stream for messages; True sends them to stderr.

    Returns:
        Tuple of (log, log_verbose) functions.
    """
    effective_verbose = verbose and not quiet
    default_err = err

    def log(msg: str, color: str = "green", err: bool = default_err) -> None:
        if not quiet:
            typer.secho(msg, fg=color, err=err)

    def log_verbose(msg: str, color: str = "green", err: bool = default_err) -> None:
        if effective_verbose:
            typer.secho(msg, fg=color, err=err)

    return log, log_verbose


def _configure_logging(verbose: bool, quiet: bool) -> None:
    """Route builder debug records to stderr in verbose mode."""
    if verbose and not quiet:
        logging.basicConfig(format="%(name)s: %(message)s")
        logging.getLogger("docnav").setLevel(logging.DEBUG)


def version_callback(value: bool) -> None:
    """Print version and exit if --version flag is set."""
    if value:
        typer.echo(f"docnav {__version__}")
        raise typer.Exit()


app = typer.Typer(
    help="Generate site navigation and sidebar from a documentation tree.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Generate site navigation and sidebar from a documentation tree."""


def _resolve_config(config: Path | None, log: Callable[..., None]) -> Config:
    """Load the given config, the default config file, or built-in defaults."""
    if config is None:
        default_path = Path(DEFAULT_CONFIG_NAME)
        if not default_path.exists():
            return default_config(Path("."))
        config = default_path

    try:
        return load_config(config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        log(f"Error loading config: {e}", color="red", err=True)
        raise typer.Exit(1) from None


@app.command()
def build(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config", "-c", help="Path to docnav.yml (default: ./docnav.yml if present)"
        ),
    ] = None,
    docs_dir: Annotated[
        Path | None,
        typer.Option("--docs-dir", "-d", help="Documentation root directory"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file (defaults to stdout)"),
    ] = None,
    fmt: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: json or yaml"),
    ] = None,
    exclude: Annotated[
        list[str] | None,
        typer.Option("--exclude", "-x", help="Top-level directory to skip"),
    ] = None,
    ext: Annotated[
        list[str] | None,
        typer.Option("--ext", "-e", help="Document file extension"),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Preview what would be generated without writing files",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress output (exit code only)"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show detailed progress"),
    ] = False,
) -> None:
    """Build nav and sidebar data from a documentation directory."""
    log, _ = _make_logger(quiet, verbose, err=True)
    _configure_logging(verbose, quiet)

    cfg = _resolve_config(config, log)

    # Command-line options override the config file
    if docs_dir is not None:
        cfg.docs_dir = docs_dir
    if output is not None:
        cfg.output = output
    if fmt is not None:
        cfg.format = fmt
    if exclude:
        cfg.excluded_dirs = list(exclude)
    if ext:
        cfg.doc_extensions = [e if e.startswith(".") else f".{e}" for e in ext]

    # stdout carries the payload when no output file is set
    log, log_verbose = _make_logger(quiet, verbose, err=cfg.output is None)

    if cfg.format not in OUTPUT_FORMATS:
        log(
            f"Error: Unknown format '{cfg.format}' "
            f"(expected one of: {', '.join(OUTPUT_FORMATS)})",
            color="red",
            err=True,
        )
        raise typer.Exit(1)

    if not cfg.docs_dir.is_dir():
        log(
            f"Error: Docs directory not found: {cfg.docs_dir}", color="red", err=True
        )
        log(
            "Hint: Pass --docs-dir or set 'docs_dir' in docnav.yml.",
            color="yellow",
            err=True,
        )
        raise typer.Exit(1)

    log_verbose(f"Docs: {cfg.docs_dir}")
    log_verbose(f"Extensions: {cfg.doc_extensions}")
    if cfg.excluded_dirs:
        log_verbose(f"Excluded: {cfg.excluded_dirs}")
    if dry_run:
        log_verbose("Dry run - no files will be written")

    try:
        navigation = build_navigation(cfg.docs_dir, cfg.nav_options())
    except OSError as exc:
        log(f"Error reading docs directory: {exc}", color="red", err=True)
        raise typer.Exit(1) from None

    text = dump_navigation(navigation, cfg.format)

    if cfg.output is None:
        typer.echo(text, nl=False)
    elif dry_run:
        log(
            f"Would generate {cfg.output} ({len(text.encode('utf-8')):,} bytes)",
            color="yellow",
        )
    else:
        try:
            cfg.output.parent.mkdir(parents=True, exist_ok=True)
            cfg.output.write_text(text, encoding="utf-8")
        except OSError as exc:
            log(f"Error writing output file: {exc}", color="red", err=True)
            raise typer.Exit(1) from None
        log(f"Generated {cfg.output} ({len(text.encode('utf-8')):,} bytes)")

    log(
        f"{len(navigation.nav)} sections, {len(navigation.sidebar)} sidebar groups"
    )


@app.command()
def init(
    config: Annotated[
        Path,
        typer.Option("--config", "-c", help="Path to docnav.yml config file"),
    ] = Path(DEFAULT_CONFIG_NAME),
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Update an existing config file"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress output (exit code only)"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show detailed progress"),
    ] = False,
) -> None:
    """Create a starter docnav.yml."""
    log, log_verbose = _make_logger(quiet, verbose)

    if not config.exists():
        try:
            config.parent.mkdir(parents=True, exist_ok=True)
            config.write_text(STARTER_CONFIG, encoding="utf-8")
        except OSError as exc:
            log(f"Error writing config: {exc}", color="red", err=True)
            raise typer.Exit(1) from None
        log(f"Created {config}")
        return

    if not force:
        log(f"Error: Config file already exists: {config}", color="red", err=True)
        log(
            "Use --force to add missing settings to it.",
            color="yellow",
            err=True,
        )
        raise typer.Exit(1)

    # Round-trip so existing values and comments survive
    yaml_rt = YAML()
    yaml_rt.preserve_quotes = True

    with open(config, encoding="utf-8") as f:
        data = yaml_rt.load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        log(
            f"Error: Config file must be a mapping: {config}", color="red", err=True
        )
        raise typer.Exit(1)

    added = []
    for key, value in STARTER_DEFAULTS.items():
        if key not in data:
            data[key] = value
            added.append(key)

    with open(config, "w", encoding="utf-8") as f:
        yaml_rt.dump(data, f)

    if added:
        log(f"Updated {config}")
        for key in added:
            log_verbose(f"  added {key}")
    else:
        log(f"{config} already has all settings")


@app.command()
def validate(
    config: Annotated[
        Path,
        typer.Option("--config", "-c", help="Path to docnav.yml config file"),
    ] = Path(DEFAULT_CONFIG_NAME),
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress output (exit code only)"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="List discovered sections"),
    ] = False,
) -> None:
    """Check config file validity."""
    log, log_verbose = _make_logger(quiet, verbose)

    try:
        cfg = load_config(config)
    except FileNotFoundError:
        log(f"Config invalid: {config}", color="red", err=True)
        log(f"  Error: File not found: {config}", color="red", err=True)
        raise typer.Exit(1) from None
    except (ValueError, yaml.YAMLError) as e:
        log(f"Config invalid: {config}", color="red", err=True)
        log(f"  Error: {e}", color="red", err=True)
        raise typer.Exit(1) from None

    log(f"Config valid: {config}")
    log(f"  Docs: {cfg.docs_dir}")
    log(f"  Extensions: {', '.join(cfg.doc_extensions)}")
    log(f"  Excluded: {', '.join(cfg.excluded_dirs) or '(none)'}")

    if not cfg.docs_dir.is_dir():
        log(
            f"  Warning: Docs directory not found: {cfg.docs_dir}",
            color="yellow",
            err=True,
        )
        return

    if verbose and not quiet:
        try:
            sections = list_sections(cfg.docs_dir, cfg.excluded_dirs)
        except OSError as exc:
            log(f"  Error reading docs directory: {exc}", color="red", err=True)
            raise typer.Exit(1) from None
        log_verbose(f"  Sections: {len(sections)}")
        for name in sections:
            log_verbose(f"    - {name}")


if __name__ == "__main__":
    app()
