"""Template filter for converting notebook strings inline.

Hosts register the filter with their template engine so templates can
render notebook content held in variables:

    env.filters["notebookify"] = make_notebookify_filter(converter)

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nbfront.converter import NotebookConverter


def notebookify(content: str, converter: NotebookConverter) -> str:
    """Convert a notebook JSON string into HTML.

    Args:
        content: Notebook JSON
        converter: Converter registered for the site

    Returns:
        The HTML formatted string
    """
    return converter.convert(content)


def make_notebookify_filter(converter: NotebookConverter) -> Callable[[str], str]:
    """Bind notebookify to a converter, giving a one-argument filter."""

    def _filter(content: str) -> str:
        return notebookify(content, converter)

    _filter.__name__ = "notebookify"
    return _filter


__all__ = ["make_notebookify_filter", "notebookify"]
