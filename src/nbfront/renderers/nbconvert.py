"""Renderer backed by the ``jupyter nbconvert`` command line tool.

Invocation:
    jupyter nbconvert --to html --template basic --output-dir <dir> \\
        [--sanitize-html] [attributes...] <dir>/input.ipynb

Success means ``<dir>/input.html`` exists after the process exits with
status 0. No retries and no timeout: a hung renderer blocks the caller.
"""

from __future__ import annotations

import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

from nbfront.config import NbconvertOptions, SafeMode
from nbfront.errors import MissingDependencyError, RenderError
from nbfront.utils.logger import get_logger

logger = get_logger(__name__)

# subprocess.run-compatible callable
Runner = Callable[..., subprocess.CompletedProcess]

INSTALL_HINT = (
    "Cannot find jupyter. Check virtual environments are active or run: "
    "pip install jupyter nbconvert"
)


class NbconvertRenderer:
    """Render notebooks to HTML with ``jupyter nbconvert``.

    Thread Safety:
        Stateless apart from immutable options. Each render() call works
        only on the paths it is given.
    """

    name = "nbconvert"

    __slots__ = ("_options", "_run")

    def __init__(self, options: NbconvertOptions | None = None, run: Runner | None = None) -> None:
        """Initialize renderer.

        Args:
            options: Passthrough options from NotebookConfig.nbconvert
            run: subprocess.run replacement, mainly for tests
        """
        self._options = options or NbconvertOptions()
        self._run = run or subprocess.run

    @property
    def options(self) -> NbconvertOptions:
        return self._options

    def check_available(self) -> None:
        argv = [self._options.command, "nbconvert", "--help"]
        try:
            result = self._run(argv, capture_output=True, text=True, check=False)
        except OSError:
            raise MissingDependencyError(self._options.command, INSTALL_HINT) from None
        if result.returncode != 0:
            raise MissingDependencyError(self._options.command, INSTALL_HINT)

    def build_command(self, notebook_path: Path, output_dir: Path) -> list[str]:
        """Build the argv for converting one notebook."""
        argv = [
            self._options.command,
            "nbconvert",
            "--to",
            "html",
            "--template",
            "basic",
            "--output-dir",
            str(output_dir),
        ]
        if self._options.safe is SafeMode.SAFE:
            argv.append("--sanitize-html")
        argv.extend(self._options.attributes)
        argv.append(str(notebook_path))
        return argv

    def render(self, notebook_path: Path, output_dir: Path) -> Path:
        argv = self.build_command(notebook_path, output_dir)
        logger.debug("Running %s", _format_argv(argv))
        try:
            result = self._run(argv, capture_output=True, text=True, check=False)
        except OSError as exc:
            raise RenderError(f"Cannot run {self._options.command}: {exc}") from exc

        if result.returncode != 0:
            raise RenderError(
                f"nbconvert failed for {notebook_path.name}",
                returncode=result.returncode,
                stderr=result.stderr or "",
            )

        output = output_dir / f"{notebook_path.stem}.html"
        if not output.is_file():
            raise RenderError(
                f"nbconvert wrote no output for {notebook_path.name}",
                stderr=result.stderr or "",
            )
        return output


def _format_argv(argv: Sequence[str]) -> str:
    return " ".join(argv)
