"""Tests for NotebookConverter and the notebookify filter."""

from __future__ import annotations

from pathlib import Path

import pytest
from conftest import FakeRun

from nbfront import make_notebookify_filter, notebookify
from nbfront.config import NotebookConfig
from nbfront.converter import NotebookConverter
from nbfront.errors import MissingDependencyError, RenderError
from nbfront.renderers import NbconvertRenderer


def make_converter(run: FakeRun, config: NotebookConfig | None = None) -> NotebookConverter:
    config = config or NotebookConfig()
    return NotebookConverter(config, NbconvertRenderer(config.nbconvert, run=run))


class TestMatches:
    def test_default_extension(self, fake_run: FakeRun) -> None:
        converter = make_converter(fake_run)
        assert converter.matches(".ipynb")
        assert converter.matches(".IPyNB")
        assert converter.matches("ipynb")
        assert not converter.matches(".md")
        assert not converter.matches("")
        assert not converter.matches(None)

    def test_configured_set(self, fake_run: FakeRun) -> None:
        converter = make_converter(fake_run, NotebookConfig.from_dict({"notebook_ext": "ipynb,nb"}))
        assert converter.matches(".nb")
        assert converter.matches(".IPYNB")
        assert not converter.matches(".ipy")

    def test_reconfigure_changes_matches(self, fake_run: FakeRun) -> None:
        converter = make_converter(fake_run)
        converter.ensure_ready()
        converter.reconfigure(NotebookConfig.from_dict({"notebook_ext": "nb"}))

        assert converter.matches(".nb")
        assert not converter.matches(".ipynb")
        converter.ensure_ready()
        assert fake_run.help_calls == 1

    def test_reconfigure_with_new_renderer_options(self, fake_run: FakeRun) -> None:
        converter = make_converter(fake_run)
        config = NotebookConfig.from_dict({"nbconvert": {"command": "other-jupyter"}})
        converter.reconfigure(config)
        assert isinstance(converter.renderer, NbconvertRenderer)
        assert converter.renderer.options.command == "other-jupyter"

    def test_output_ext(self, fake_run: FakeRun) -> None:
        assert make_converter(fake_run).output_ext(".ipynb") == ".html"

    def test_has_front_matter(self, fake_run: FakeRun) -> None:
        converter = make_converter(fake_run)
        assert converter.has_front_matter(Path("_posts/2024-01-01-intro.ipynb"))
        assert not converter.has_front_matter(Path("about.md"))


class TestSetup:
    def test_setup_checks_once(self, fake_run: FakeRun) -> None:
        converter = make_converter(fake_run)
        converter.setup()
        converter.setup()
        assert fake_run.help_calls == 1

    def test_missing_renderer(self) -> None:
        converter = make_converter(FakeRun(missing=True))
        with pytest.raises(MissingDependencyError, match="jupyter"):
            converter.setup()


class TestConvert:
    def test_empty_content_is_noop(self, fake_run: FakeRun) -> None:
        assert make_converter(fake_run).convert("") == ""
        assert fake_run.calls == []

    def test_header_cell_is_not_rendered(self, fake_run: FakeRun) -> None:
        content = '{"cells":[{"source":["title: Hello\\n"]}, {"source":["# Body"]}]}'
        converter = make_converter(fake_run)

        assert converter.convert(content) == "<div>rendered</div>"
        assert converter.load_header(content) == "title: Hello\n"
        assert fake_run.render_calls == 1
        assert fake_run.rendered[0]["cells"] == [{"source": ["# Body"]}]

    def test_renderer_invocation(self, fake_run: FakeRun, header_notebook: str) -> None:
        make_converter(fake_run).convert(header_notebook)
        argv = fake_run.calls[-1]
        workdir = fake_run.workdirs[0]
        assert argv[:8] == [
            "jupyter",
            "nbconvert",
            "--to",
            "html",
            "--template",
            "basic",
            "--output-dir",
            str(workdir),
        ]
        assert argv[-1] == str(workdir / "input.ipynb")

    def test_input_uses_primary_extension(self, fake_run: FakeRun, header_notebook: str) -> None:
        config = NotebookConfig.from_dict({"notebook_ext": "nb,ipynb"})
        make_converter(fake_run, config).convert(header_notebook)
        assert fake_run.calls[-1][-1].endswith("input.nb")

    def test_preserves_notebook_fields(self, fake_run: FakeRun, notebook) -> None:
        content = notebook("title: x\n", "one", "two", metadata={"kernelspec": {"name": "python3"}})
        make_converter(fake_run).convert(content)
        rendered = fake_run.rendered[0]
        assert [cell["source"] for cell in rendered["cells"]] == [["one"], ["two"]]
        assert rendered["metadata"] == {"kernelspec": {"name": "python3"}}

    def test_temp_dir_removed_after_success(self, fake_run: FakeRun, header_notebook: str) -> None:
        make_converter(fake_run).convert(header_notebook)
        assert not fake_run.workdirs[0].exists()

    def test_temp_dir_removed_after_failure(self, header_notebook: str) -> None:
        run = FakeRun(render_status=1)
        with pytest.raises(RenderError):
            make_converter(run).convert(header_notebook)
        assert run.workdirs
        assert not run.workdirs[0].exists()

    def test_missing_output_is_fatal(self, header_notebook: str) -> None:
        run = FakeRun(write_output=False)
        with pytest.raises(RenderError):
            make_converter(run).convert(header_notebook)
        assert not run.workdirs[0].exists()

    def test_not_a_notebook(self, fake_run: FakeRun) -> None:
        with pytest.raises(RenderError, match="Cannot convert notebook"):
            make_converter(fake_run).convert("# plain markdown")
        assert fake_run.render_calls == 0

    @pytest.mark.parametrize(
        "content",
        ['{"cells": [{"source": null}, {"source": ["# Body"]}]}', "[" * 100000],
    )
    def test_malformed_notebook_is_render_error(self, fake_run: FakeRun, content: str) -> None:
        with pytest.raises(RenderError, match="Cannot convert notebook"):
            make_converter(fake_run).convert(content)
        assert fake_run.render_calls == 0

    def test_convert_requires_renderer(self, header_notebook: str) -> None:
        run = FakeRun(available=False)
        with pytest.raises(MissingDependencyError):
            make_converter(run).convert(header_notebook)
        assert run.render_calls == 0

    def test_each_conversion_gets_its_own_dir(self, fake_run: FakeRun, header_notebook: str) -> None:
        converter = make_converter(fake_run)
        converter.convert(header_notebook)
        converter.convert(header_notebook)
        assert fake_run.help_calls == 1
        assert fake_run.render_calls == 2
        assert fake_run.workdirs[0] != fake_run.workdirs[1]


class TestNotebookify:
    def test_filter(self, fake_run: FakeRun, header_notebook: str) -> None:
        converter = make_converter(fake_run)
        assert notebookify(header_notebook, converter) == "<div>rendered</div>"

    def test_bound_filter(self, fake_run: FakeRun, header_notebook: str) -> None:
        notebook_filter = make_notebookify_filter(make_converter(fake_run))
        assert notebook_filter.__name__ == "notebookify"
        assert notebook_filter(header_notebook) == "<div>rendered</div>"
        assert notebook_filter("") == ""
