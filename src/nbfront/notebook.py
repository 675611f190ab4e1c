"""
Jupyter notebook (.ipynb) document model for nbfront.

Parses nbformat JSON into an ordered sequence of cells. The first cell is
reserved as the header cell: it carries page metadata and is never
rendered. Uses stdlib json only; fields nbfront does not interpret are
kept verbatim so a document survives a parse/serialize cycle.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Cell:
    """One notebook cell.

    Attributes:
        cell_type: Kind discriminator ("markdown", "code", "raw")
        source: Text fragments, concatenated to form the cell text
        raw: The cell mapping as found in the document
    """

    cell_type: str
    source: tuple[str, ...]
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_json(cls, cell: Mapping[str, Any]) -> Cell:
        source = cell.get("source", [])
        if isinstance(source, str):
            source = [source]
        elif not isinstance(source, list):
            raise ValueError(f"Cell source must be a string or list, got {type(source).__name__}")
        if not all(isinstance(fragment, str) for fragment in source):
            raise ValueError("Cell source fragments must be strings")
        return cls(
            cell_type=cell.get("cell_type", "code"),
            source=tuple(source),
            raw=cell,
        )

    @property
    def text(self) -> str:
        """Cell source joined into one string."""
        return "".join(self.source)


@dataclass(frozen=True, slots=True)
class NotebookDocument:
    """A parsed notebook.

    Cell order is the document order. ``fields`` holds every other
    top-level member (metadata, nbformat, ...) untouched.
    """

    cells: tuple[Cell, ...]
    fields: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def header_cell(self) -> Cell | None:
        """The reserved first cell, or None for an empty notebook."""
        return self.cells[0] if self.cells else None

    def without_header(self) -> NotebookDocument:
        """Return a copy with the header cell removed."""
        return NotebookDocument(cells=self.cells[1:], fields=self.fields)

    def to_dict(self) -> dict[str, Any]:
        data = dict(self.fields)
        data["cells"] = [dict(cell.raw) if cell.raw else _cell_to_dict(cell) for cell in self.cells]
        return data

    def to_json(self) -> str:
        """Serialize back to nbformat JSON."""
        return json.dumps(self.to_dict(), ensure_ascii=False)


def parse_document(content: str) -> NotebookDocument:
    """
    Parse raw notebook JSON into a NotebookDocument.

    Args:
        content: Raw JSON content of the .ipynb file (caller handles I/O)

    Returns:
        NotebookDocument with cells in document order

    Raises:
        json.JSONDecodeError: If content is not valid JSON
        ValueError: If the JSON is not a notebook (no ``cells`` list, a cell
            that is not an object, a malformed ``source``) or is nested
            too deeply to decode
    """
    try:
        nb = json.loads(content)
    except RecursionError:
        raise ValueError("Notebook JSON is nested too deeply") from None
    if not isinstance(nb, dict):
        raise ValueError(f"Notebook must be a JSON object, got {type(nb).__name__}")

    cells = nb.get("cells")
    if not isinstance(cells, list):
        raise ValueError("Notebook has no 'cells' list")

    parsed = []
    for index, cell in enumerate(cells):
        if not isinstance(cell, dict):
            raise ValueError(f"Cell {index} is not an object")
        try:
            parsed.append(Cell.from_json(cell))
        except ValueError as exc:
            raise ValueError(f"Cell {index}: {exc}") from None

    fields = {key: value for key, value in nb.items() if key != "cells"}
    return NotebookDocument(cells=tuple(parsed), fields=fields)


def _cell_to_dict(cell: Cell) -> dict[str, Any]:
    return {"cell_type": cell.cell_type, "metadata": {}, "source": list(cell.source)}


__all__ = [
    "Cell",
    "NotebookDocument",
    "parse_document",
]
