"""Detect whether a document is JSON or YAML."""

import json
from pathlib import Path

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


def detect_format(text: str, path: Path | None = None) -> str:
    """Detect the text format of an API document.

    The file suffix wins when it is known; otherwise the text is tried as JSON.
    Returns: 'json' or 'yaml'.
    """
    if path is not None:
        suffix = path.suffix.lower()
        if suffix in JSON_SUFFIXES:
            return "json"
        if suffix in YAML_SUFFIXES:
            return "yaml"

    # JSON is a subset of YAML, so check it first
    try:
        data = json.loads(text)
        if isinstance(data, dict):
            return "json"
    except (json.JSONDecodeError, ValueError):
        pass

    return "yaml"
