"""Renderer protocol: stable interface for external notebook renderers.

A renderer turns a notebook file on disk into an HTML file next to it.
The built-in ``NbconvertRenderer`` is the reference implementation.

Example:
    from nbfront.renderers.protocol import Renderer

    def render_file(renderer: Renderer, path: Path, out: Path) -> str:
        renderer.check_available()
        return renderer.render(path, out).read_text()

"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class Renderer(Protocol):
    """Protocol for notebook-to-HTML renderers.

    Thread Safety:
        render() may be called concurrently, each call with its own
        input file and output directory. Implementations must not keep
        per-call state on the instance.

    """

    name: str

    def check_available(self) -> None:
        """Verify the renderer can run.

        Raises:
            MissingDependencyError: If the renderer is not installed or
                not reachable.

        """
        ...

    def render(self, notebook_path: Path, output_dir: Path) -> Path:
        """Render a notebook file to HTML.

        Args:
            notebook_path: Notebook file to convert.
            output_dir: Directory that receives the HTML file.

        Returns:
            Path of the HTML file written.

        Raises:
            RenderError: If the renderer fails or writes no output.

        """
        ...
