"""Notebook header extraction and metadata promotion.

The first cell of a notebook holds page metadata as YAML. This module finds
that cell without running a full conversion, decodes it, and merges the
result into a page's metadata record.

Pipeline:
    content -> extract_header_region -> load_header -> decode_header
            -> merge_metadata -> should_template

Malformed input never raises out of the lenient entry points
(load_header, decode_header, promote_header). A warning is logged and the
page keeps whatever metadata it already had.

Example:
    >>> content = '{"cells": [{"source": ["title: Hello\\\\n"]}]}'
    >>> record = {"layout": "post"}
    >>> promote_header(content, record)
    True
    >>> record
    {'layout': 'post', 'title': 'Hello'}
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping, MutableMapping
from typing import Any

import yaml

from nbfront.errors import HeaderParseError
from nbfront.notebook import parse_document
from nbfront.utils.logger import get_logger

logger = get_logger(__name__)

# A blank line that follows a visible character
HEADER_BOUNDARY_RE = re.compile(r"(?<=\S)\n\n")


def extract_header_region(content: str) -> str:
    """Return the text before the first blank line that follows content.

    A fast path only: the result may still contain more than the header,
    and load_header falls back to the whole document when the region does
    not parse on its own.
    """
    return HEADER_BOUNDARY_RE.split(content, maxsplit=1)[0]


def load_header(content: str, *, source_file: str | None = None) -> str | None:
    """Return the source text of the notebook's header cell.

    Args:
        content: Raw notebook JSON
        source_file: Optional path used in log messages

    Returns:
        Concatenated source of the first cell, or None when the content is
        not a notebook or has no cells.
    """
    region = extract_header_region(content)
    try:
        doc = parse_document(region)
    except ValueError as exc:
        if len(region) == len(content):
            _warn_unparseable(exc, source_file)
            return None
        try:
            doc = parse_document(content)
        except ValueError as full_exc:
            _warn_unparseable(full_exc, source_file)
            return None

    header = doc.header_cell
    if header is None:
        logger.warning("Notebook has no header cell: %s", source_file or "<string>")
        return None
    return header.text


def parse_header_text(text: str, *, source_file: str | None = None) -> dict[str, Any]:
    """Decode header text as a YAML mapping.

    Blank text decodes to an empty mapping.

    Raises:
        HeaderParseError: If text is not valid YAML or not a mapping
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise HeaderParseError(f"Header is not valid YAML: {exc}", source_file) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise HeaderParseError(
            f"Header must be a mapping, got {type(data).__name__}", source_file
        )
    return {str(key): value for key, value in data.items()}


def decode_header(text: str, *, source_file: str | None = None) -> dict[str, Any] | None:
    """Lenient parse_header_text: returns None and logs instead of raising."""
    try:
        return parse_header_text(text, source_file=source_file)
    except HeaderParseError as exc:
        logger.warning("Ignoring notebook header: %s", exc)
        return None


def merge_metadata(
    record: MutableMapping[str, Any],
    decoded: Mapping[str, Any] | None,
    prefix: str = "",
) -> MutableMapping[str, Any]:
    """Merge decoded header values into a page metadata record.

    Decoded values overwrite existing keys. With a non-empty prefix, a key
    spelled ``<prefix>-<name>`` is stored as ``<name>`` and takes priority
    over a bare ``<name>`` from the same header.

    Args:
        record: Page metadata, updated in place
        decoded: Mapping from decode_header; None or empty is a no-op
        prefix: Page attribute prefix (empty disables prefix handling)

    Returns:
        The same record, for chaining
    """
    if not decoded:
        return record

    if not prefix:
        record.update(decoded)
        return record

    marker = f"{prefix}-"
    bare: dict[str, Any] = {}
    prefixed: dict[str, Any] = {}
    for key, value in decoded.items():
        if key.startswith(marker) and len(key) > len(marker):
            prefixed[key[len(marker) :]] = value
        else:
            bare[key] = value

    record.update(bare)
    record.update(prefixed)
    return record


def promote_header(
    content: str,
    record: MutableMapping[str, Any],
    prefix: str = "",
    *,
    source_file: str | None = None,
) -> bool:
    """Load, decode and merge a notebook header into record.

    Returns:
        True if the header decoded and was merged, False if the record was
        left untouched.
    """
    text = load_header(content, source_file=source_file)
    if text is None:
        return False
    decoded = decode_header(text, source_file=source_file)
    if decoded is None:
        return False
    merge_metadata(record, decoded, prefix)
    return True


def should_template(record: Mapping[str, Any], key: str = "liquid") -> bool:
    """Whether the templating stage should process a page.

    Templating runs by default. A page opts out by setting ``key`` to a
    false value in its metadata.
    """
    return key not in record or bool(record[key])


def _warn_unparseable(exc: ValueError, source_file: str | None) -> None:
    reason = exc.msg if isinstance(exc, json.JSONDecodeError) else str(exc)
    logger.warning("Cannot read notebook header from %s: %s", source_file or "<string>", reason)


__all__ = [
    "HEADER_BOUNDARY_RE",
    "decode_header",
    "extract_header_region",
    "load_header",
    "merge_metadata",
    "parse_header_text",
    "promote_header",
    "should_template",
]
