"""
nbfront: Jupyter notebooks as static site pages

Promotes metadata from a notebook's first cell into page metadata and
converts the remaining cells to HTML with ``jupyter nbconvert``.

Quick Start:
    >>> from nbfront import NotebookConfig, NotebookConverter, promote_site_metadata
    >>> config = NotebookConfig.from_dict(site_config)
    >>> converter = NotebookConverter(config)
    >>> promote_site_metadata(site, converter)   # before rendering
    >>> html = converter.convert(page.content)   # when rendering

Header cell:
    The first cell holds YAML and is never rendered:

        title: Exploring the data
        liquid: false

Installation:
    pip install nbfront              # Header promotion (PyYAML)
    pip install nbfront[jupyter]     # + jupyter nbconvert for HTML output
"""

from nbfront.config import Engine, NbconvertOptions, NotebookConfig, SafeMode
from nbfront.converter import NotebookConverter
from nbfront.errors import (
    ConfigError,
    HeaderParseError,
    MissingDependencyError,
    NbfrontError,
    RenderError,
    UnsupportedEngineError,
)
from nbfront.filters import make_notebookify_filter, notebookify
from nbfront.frontmatter import (
    FrontMatterRegistry,
    FrontMatterRegistryBuilder,
    has_yaml_header,
)
from nbfront.header import (
    decode_header,
    extract_header_region,
    load_header,
    merge_metadata,
    parse_header_text,
    promote_header,
    should_template,
)
from nbfront.notebook import Cell, NotebookDocument, parse_document
from nbfront.renderers import NbconvertRenderer, ReadinessProbe, Renderer, create_renderer
from nbfront.site import Page, PromotionReport, SimpleSite, promote_item, promote_site_metadata

__version__ = "0.1.0"


def create_front_matter_registry(converter: NotebookConverter) -> FrontMatterRegistry:
    """Registry with the notebook predicate registered and YAML as fallback."""
    return FrontMatterRegistryBuilder().register("notebook", converter.has_front_matter).build()


__all__ = [
    # Configuration
    "Engine",
    "NbconvertOptions",
    "NotebookConfig",
    "SafeMode",
    # Errors
    "ConfigError",
    "HeaderParseError",
    "MissingDependencyError",
    "NbfrontError",
    "RenderError",
    "UnsupportedEngineError",
    # Documents
    "Cell",
    "NotebookDocument",
    "parse_document",
    # Header pipeline
    "decode_header",
    "extract_header_region",
    "load_header",
    "merge_metadata",
    "parse_header_text",
    "promote_header",
    "should_template",
    # Conversion
    "NbconvertRenderer",
    "NotebookConverter",
    "ReadinessProbe",
    "Renderer",
    "create_renderer",
    "make_notebookify_filter",
    "notebookify",
    # Site integration
    "FrontMatterRegistry",
    "FrontMatterRegistryBuilder",
    "Page",
    "PromotionReport",
    "SimpleSite",
    "create_front_matter_registry",
    "has_yaml_header",
    "promote_item",
    "promote_site_metadata",
    # Version
    "__version__",
]
