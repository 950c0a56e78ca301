"""Serialization of navigation builds."""

from __future__ import annotations

import json

import yaml

from docnav.model import Navigation

OUTPUT_FORMATS = ("json", "yaml")


def dump_navigation(navigation: Navigation, fmt: str = "json") -> str:
    """Serialize a navigation build for a site generator config.

    Args:
        navigation: The navigation to serialize.
        fmt: ``"json"`` or ``"yaml"``.

    Returns:
        Serialized text ending with a newline. Non-ASCII labels are kept as-is.

    Raises:
        ValueError: If ``fmt`` is not a supported format.
    """
    data = navigation.to_dict()
    if fmt == "json":
        return json.dumps(data, ensure_ascii=False, indent=2) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(data, allow_unicode=True, sort_keys=False)
    raise ValueError(f"Unknown output format: {fmt!r}")
