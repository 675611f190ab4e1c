"""Site-wide notebook metadata promotion.

Runs once per build, before rendering. Every page and post whose
extension is a notebook extension gets its header cell decoded and
merged into its metadata, and its templating flag set from the result.
Pages without a usable header keep the metadata they already had.

Example:
    >>> site = SimpleSite(pages=[Page(content=nb_json, ext=".ipynb")])
    >>> report = promote_site_metadata(site, NotebookConverter())
    >>> report.promoted
    1
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Protocol

from nbfront.header import promote_header, should_template
from nbfront.utils.logger import get_logger

logger = get_logger(__name__)


class SiteItem(Protocol):
    """A host page or post.

    Posts that store their extension in ``data["ext"]`` instead of an
    ``ext`` attribute are supported.
    """

    content: str
    data: dict[str, Any]
    templating: bool


class Site(Protocol):
    """A host site: pages and posts, iterated once each."""

    @property
    def pages(self) -> Iterable[SiteItem]: ...

    @property
    def posts(self) -> Iterable[SiteItem]: ...


class HeaderSource(Protocol):
    """What the site pass needs from a converter."""

    @property
    def config(self) -> Any: ...

    def ensure_ready(self) -> None: ...

    def matches(self, ext: str | None) -> bool: ...


@dataclass(slots=True)
class Page:
    """Minimal page record for hosts without their own page type.

    Attributes:
        content: Raw file content
        ext: File extension including the dot
        data: Page metadata, mutated by the promotion pass
        templating: Whether the templating stage processes this page
        path: Source path for log messages (optional)
    """

    content: str
    ext: str = ""
    data: dict[str, Any] = field(default_factory=dict)
    templating: bool = True
    path: str | None = None


@dataclass(slots=True)
class SimpleSite:
    pages: list[Page] = field(default_factory=list)
    posts: list[Page] = field(default_factory=list)


@dataclass(slots=True)
class PromotionReport:
    """Counts from one promotion pass."""

    matched: int = 0
    promoted: int = 0
    skipped: int = 0

    def __str__(self) -> str:
        return f"{self.matched} notebooks, {self.promoted} promoted, {self.skipped} skipped"


def promote_site_metadata(site: Site, converter: HeaderSource) -> PromotionReport:
    """Promote notebook header metadata for every page, then every post.

    Raises:
        MissingDependencyError: If the renderer is unavailable. Checked
            before any page is touched.
    """
    converter.ensure_ready()
    report = PromotionReport()
    for collection in (site.pages, site.posts):
        for item in collection:
            if not converter.matches(_extension_of(item)):
                continue
            report.matched += 1
            if promote_item(item, converter):
                report.promoted += 1
            else:
                report.skipped += 1
    logger.info("Notebook metadata: %s", report)
    return report


def promote_item(item: SiteItem, converter: HeaderSource) -> bool:
    """Promote one item's header. Returns False if it was left untouched."""
    config = converter.config
    source_file = getattr(item, "path", None)

    if not promote_header(
        item.content, item.data, config.page_attribute_prefix, source_file=source_file
    ):
        return False

    item.templating = should_template(item.data, config.templating_key)
    logger.debug("Promoted header for %s (templating=%s)", source_file or "<page>", item.templating)
    return True


def _extension_of(item: SiteItem) -> str | None:
    ext = getattr(item, "ext", None)
    if ext:
        return ext
    return item.data.get("ext")


__all__ = [
    "HeaderSource",
    "Page",
    "PromotionReport",
    "SimpleSite",
    "Site",
    "SiteItem",
    "promote_item",
    "promote_site_metadata",
]
