"""Notebook converter for static site generators.

NotebookConverter is the object a host framework registers for notebook
files. It answers extension matches, converts notebook content to HTML
through an external renderer, and exposes the header loader used by the
metadata promotion pass.

Example:
    >>> from nbfront import NotebookConfig, NotebookConverter
    >>> converter = NotebookConverter(NotebookConfig.from_dict({"notebook_ext": "ipynb"}))
    >>> converter.matches(".IPYNB")
    True
    >>> html = converter.convert(notebook_json)  # runs jupyter nbconvert
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

from nbfront.config import NotebookConfig
from nbfront.errors import RenderError
from nbfront.header import load_header
from nbfront.notebook import parse_document
from nbfront.renderers import ReadinessProbe, Renderer, create_renderer
from nbfront.utils.logger import get_logger

logger = get_logger(__name__)

INPUT_STEM = "input"


class NotebookConverter:
    """Converter adapter for notebook documents.

    Holds a reference to an immutable NotebookConfig and a ReadinessProbe
    for its renderer. Conversions share no mutable state: each one uses
    its own temporary directory.
    """

    __slots__ = ("_config", "_ext_re", "_probe")

    def __init__(self, config: NotebookConfig | None = None, renderer: Renderer | None = None) -> None:
        """Initialize converter.

        Args:
            config: Notebook configuration (defaults if None)
            renderer: Renderer to use; created from config.engine if None
        """
        self._config = config or NotebookConfig()
        self._ext_re = self._config.extension_pattern()
        self._probe = ReadinessProbe(renderer or create_renderer(self._config))

    @property
    def config(self) -> NotebookConfig:
        return self._config

    @property
    def renderer(self) -> Renderer:
        return self._probe.renderer

    def reconfigure(self, config: NotebookConfig, renderer: Renderer | None = None) -> None:
        """Switch to a new configuration.

        The readiness probe, and with it the cached availability result,
        survives when the engine and renderer options are unchanged.
        """
        same_renderer = (
            renderer is None
            and config.engine is self._config.engine
            and config.nbconvert == self._config.nbconvert
        )
        self._config = config
        self._ext_re = config.extension_pattern()
        if not same_renderer:
            self._probe = ReadinessProbe(renderer or create_renderer(config))

    def matches(self, ext: str | None) -> bool:
        """Whether ext (e.g. ".ipynb", case-insensitive) is a notebook extension."""
        if not ext:
            return False
        if not ext.startswith("."):
            ext = f".{ext}"
        return self._ext_re.match(ext) is not None

    def output_ext(self, ext: str) -> str:
        return ".html"

    def has_front_matter(self, path: Path) -> bool:
        """Front matter predicate: every notebook carries its header inside."""
        return self.matches(path.suffix)

    def ensure_ready(self) -> None:
        """Verify the renderer once; later calls replay the first result.

        Raises:
            MissingDependencyError: If the renderer is unavailable
        """
        self._probe.ensure_ready()

    setup = ensure_ready

    def load_header(self, content: str, *, source_file: str | None = None) -> str | None:
        """Return the header cell source, or None if there is none."""
        return load_header(content, source_file=source_file)

    def convert(self, content: str) -> str:
        """Convert notebook JSON to HTML.

        The header cell is dropped before rendering. Empty content is
        returned unchanged without touching the renderer.

        Raises:
            MissingDependencyError: If the renderer is unavailable
            RenderError: If content is not a notebook or the renderer fails
        """
        if not content:
            return content

        self.ensure_ready()

        try:
            doc = parse_document(content)
        except ValueError as exc:
            reason = exc.msg if isinstance(exc, json.JSONDecodeError) else str(exc)
            raise RenderError(f"Cannot convert notebook: {reason}") from exc

        body = doc.without_header().to_json()
        with tempfile.TemporaryDirectory(prefix="nbfront-") as tmp:
            workdir = Path(tmp)
            source = workdir / f"{INPUT_STEM}.{self._config.primary_extension}"
            source.write_text(body, encoding="utf-8")
            output = self.renderer.render(source, workdir)
            return output.read_text(encoding="utf-8")


__all__ = ["NotebookConverter"]
