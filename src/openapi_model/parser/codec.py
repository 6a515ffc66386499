"""Load and dump OpenAPI documents as JSON or YAML text."""

import json
import logging
from pathlib import Path

import yaml

from openapi_model.model.document import OpenAPI

from .detect import detect_format

logger = logging.getLogger(__name__)

FORMATS = ("json", "yaml")


class DocumentFormatError(ValueError):
    """The text could not be parsed into a document mapping."""


def loads(text: str, fmt: str = "auto", path: Path | None = None) -> OpenAPI:
    """Parse JSON or YAML text into an OpenAPI document.

    Raises DocumentFormatError for unparsable text and pydantic's
    ValidationError for content that does not fit the model.
    """
    if fmt == "auto":
        fmt = detect_format(text, path)
    logger.debug("Parsing document as %s", fmt)

    try:
        if fmt == "json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DocumentFormatError(f"Cannot parse document as {fmt}: {e}") from e

    if not isinstance(data, dict):
        raise DocumentFormatError(f"Document root must be a mapping, got {type(data).__name__}")

    doc = OpenAPI.model_validate(data)
    logger.debug("Decoded %d paths", len(doc.paths))
    return doc


def load_document(file_path: Path, fmt: str = "auto") -> OpenAPI:
    """Read and decode a document file."""
    text = file_path.read_text(encoding="utf-8")
    logger.debug("Loading %s", file_path)
    return loads(text, fmt=fmt, path=file_path)


def to_data(doc: OpenAPI) -> dict:
    """Encode a document into plain JSON-compatible data."""
    return doc.model_dump(mode="json", by_alias=True)


def dumps(doc: OpenAPI, fmt: str = "yaml") -> str:
    """Encode a document as JSON or YAML text."""
    if fmt not in FORMATS:
        raise ValueError(f"Unknown format {fmt!r}, expected one of {FORMATS}")
    data = to_data(doc)
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)


def dump_document(doc: OpenAPI, file_path: Path, fmt: str | None = None) -> None:
    """Write a document to a file, picking the format from the suffix when not given."""
    if fmt is None:
        fmt = "json" if file_path.suffix.lower() == ".json" else "yaml"
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(dumps(doc, fmt), encoding="utf-8")
    logger.debug("Wrote %s as %s", file_path, fmt)
