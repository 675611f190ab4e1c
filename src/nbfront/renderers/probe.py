"""Single-shot renderer availability check.

The renderer is probed the first time anything needs it. The outcome is
remembered for the lifetime of the probe, so later calls are free: a
success returns immediately, a failure re-raises the same error without
probing again.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nbfront.errors import MissingDependencyError
from nbfront.utils.logger import get_logger

if TYPE_CHECKING:
    from nbfront.renderers.protocol import Renderer

logger = get_logger(__name__)


class ReadinessProbe:
    """Memoized availability check around one renderer.

    Not thread-safe. Call ensure_ready() once during build setup before
    fanning out conversions.
    """

    __slots__ = ("_renderer", "_checked", "_error")

    def __init__(self, renderer: Renderer) -> None:
        self._renderer = renderer
        self._checked = False
        self._error: MissingDependencyError | None = None

    @property
    def renderer(self) -> Renderer:
        return self._renderer

    @property
    def checked(self) -> bool:
        """Whether the availability check has run."""
        return self._checked

    def ensure_ready(self) -> None:
        """Check the renderer on first call; replay the outcome afterwards.

        Raises:
            MissingDependencyError: If the renderer is unavailable
        """
        if not self._checked:
            self._checked = True
            try:
                self._renderer.check_available()
            except MissingDependencyError as exc:
                self._error = exc
                logger.error("%s", exc)
            else:
                logger.debug("Renderer %r is available", self._renderer.name)
        if self._error is not None:
            raise MissingDependencyError(self._error.dependency, self._error.hint)
