"""nbfront renderers.

Renderers turn a notebook file into an HTML file by running an external
tool. The engine is chosen from a closed set at configuration load time.

Available Renderers:
- NbconvertRenderer: ``jupyter nbconvert --to html --template basic``

"""

from __future__ import annotations

from nbfront.config import Engine, NotebookConfig
from nbfront.renderers.nbconvert import NbconvertRenderer
from nbfront.renderers.probe import ReadinessProbe
from nbfront.renderers.protocol import Renderer


def create_renderer(config: NotebookConfig) -> Renderer:
    """Create the renderer for the configured engine."""
    match config.engine:
        case Engine.NBCONVERT:
            return NbconvertRenderer(config.nbconvert)


__all__ = ["NbconvertRenderer", "ReadinessProbe", "Renderer", "create_renderer"]
