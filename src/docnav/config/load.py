"""Configuration loading from docnav.yml."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from docnav.config.model import Config
from docnav.output import OUTPUT_FORMATS

DEFAULT_CONFIG_NAME = "docnav.yml"
DEFAULT_DOCS_DIR = "docs"
DEFAULT_FORMAT = "json"


def default_config(base_dir: Path) -> Config:
    """Return the configuration used when no config file is present."""
    return Config(docs_dir=base_dir / DEFAULT_DOCS_DIR)


def load_config(config_path: Path) -> Config:
    """Load and resolve configuration from docnav.yml.

    Relative ``docs_dir`` and ``output`` paths resolve against the directory
    holding the config file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Resolved Config object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If the document or one of its keys has the wrong type.
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        raw = yaml.load(f, Loader=yaml.SafeLoader)

    # An empty file means "all defaults"
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file must be a mapping: {config_path}")

    return _config_from_mapping(raw, base_dir=config_path.parent)


def _config_from_mapping(raw: dict[str, Any], base_dir: Path) -> Config:
    """Build a Config from a parsed docnav.yml mapping."""
    docs_dir = raw.get("docs_dir", DEFAULT_DOCS_DIR)
    if not isinstance(docs_dir, str):
        raise ValueError(
            f"'docs_dir' must be a string, got {type(docs_dir).__name__}"
        )

    doc_extensions = [
        ext if ext.startswith(".") else f".{ext}"
        for ext in _string_list(raw, "doc_extensions", [".md"])
    ]
    if not doc_extensions:
        raise ValueError("'doc_extensions' must list at least one extension")

    excluded_dirs = _string_list(raw, "excluded_dirs", [])

    output = raw.get("output")
    if output is not None and not isinstance(output, str):
        raise ValueError(f"'output' must be a string, got {type(output).__name__}")

    fmt = raw.get("format", DEFAULT_FORMAT)
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(
            f"'format' must be one of {', '.join(OUTPUT_FORMATS)}, got {fmt!r}"
        )

    return Config(
        docs_dir=base_dir / docs_dir,
        doc_extensions=doc_extensions,
        excluded_dirs=excluded_dirs,
        output=base_dir / output if output else None,
        format=fmt,
    )


def _string_list(raw: dict[str, Any], key: str, default: list[str]) -> list[str]:
    """Read an optional list of strings, rejecting any other shape."""
    value = raw.get(key)
    if value is None:
        return list(default)
    if not isinstance(value, list):
        raise ValueError(
            f"'{key}' must be a list of strings, got {type(value).__name__}"
        )
    for item in value:
        if not isinstance(item, str):
            raise ValueError(
                f"'{key}' entries must be strings, got {type(item).__name__}"
            )
    return list(value)
