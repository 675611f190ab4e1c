"""Shared fixtures for nbfront tests.

No test needs Jupyter: renderers get a FakeRun in place of subprocess.run.
"""

from __future__ import annotations

import json
import subprocess
from pathlib import Path
from typing import Any

import pytest


def make_notebook(*sources: str | list[str], **fields: Any) -> str:
    """Build notebook JSON with one markdown cell per source."""
    cells = [
        {
            "cell_type": "markdown",
            "metadata": {},
            "source": [source] if isinstance(source, str) else source,
        }
        for source in sources
    ]
    nb = {"cells": cells, "metadata": {}, "nbformat": 4, "nbformat_minor": 5}
    nb.update(fields)
    return json.dumps(nb, indent=1)


class FakeRun:
    """Stand-in for subprocess.run that imitates ``jupyter nbconvert``.

    Attributes:
        calls: argv of every invocation
        rendered: Parsed notebook JSON handed to each render call
        workdirs: Output directories of each render call
    """

    def __init__(
        self,
        *,
        available: bool = True,
        missing: bool = False,
        render_status: int = 0,
        write_output: bool = True,
        html: str = "<div>rendered</div>",
    ) -> None:
        self.available = available
        self.missing = missing
        self.render_status = render_status
        self.write_output = write_output
        self.html = html
        self.calls: list[list[str]] = []
        self.rendered: list[dict[str, Any]] = []
        self.workdirs: list[Path] = []

    @property
    def help_calls(self) -> int:
        return sum(1 for argv in self.calls if "--help" in argv)

    @property
    def render_calls(self) -> int:
        return sum(1 for argv in self.calls if "--to" in argv)

    def __call__(self, argv: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        self.calls.append(list(argv))
        if self.missing:
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        if "--help" in argv:
            return subprocess.CompletedProcess(argv, 0 if self.available else 1, "", "")

        output_dir = Path(argv[argv.index("--output-dir") + 1])
        source = Path(argv[-1])
        self.workdirs.append(output_dir)
        self.rendered.append(json.loads(source.read_text(encoding="utf-8")))

        if self.render_status != 0:
            return subprocess.CompletedProcess(argv, self.render_status, "", "Kernel exploded")
        if self.write_output:
            (output_dir / f"{source.stem}.html").write_text(self.html, encoding="utf-8")
        return subprocess.CompletedProcess(argv, 0, "", "")


@pytest.fixture
def fake_run() -> FakeRun:
    return FakeRun()


@pytest.fixture
def header_notebook() -> str:
    """Notebook whose first cell is a YAML header."""
    return make_notebook("title: Hello\n", "# Body")


@pytest.fixture
def notebook() -> Any:
    """Factory fixture: ``notebook("title: x\\n", "# Body")`` -> JSON."""
    return make_notebook
