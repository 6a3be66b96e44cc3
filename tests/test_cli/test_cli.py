"""Tests for the runner and the lazyrules CLI commands."""
from __future__ import annotations

import logging

import pytest
from click.testing import CliRunner
from PIL import Image

from lazyrules import __version__
from lazyrules.cli.main import cli
from lazyrules.config import LazyRulesConfig
from lazyrules.errors import EmptyInputError
from lazyrules.runner import LazyRulesRunner


@pytest.fixture
def images(tmp_path):
    """An images/ directory with base and retina variants."""
    root = tmp_path / "images"
    root.mkdir()
    for name, size in [
        ("circle.png", (25, 25)),
        ("circle@2x.png", (50, 50)),
        ("button_hover.png", (40, 20)),
    ]:
        Image.new("RGBA", size).save(root / name, "PNG")
    return root


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------


class TestRunner:
    def test_build_writes_stylesheet(self, images, tmp_path) -> None:
        stylesheet = tmp_path / "css" / "style.css"
        runner = LazyRulesRunner(
            LazyRulesConfig(images=(str(images / "*.png"),), stylesheet=str(stylesheet))
        )
        result = runner.build()
        assert result.ok
        css = stylesheet.read_text(encoding="utf-8")
        assert css == result.css + "\n"
        assert "url(../images/circle.png)" in css
        assert "url(../images/circle@2x.png)" in css
        assert ".button-hover, a:hover .button" in css

    def test_failures_logged(self, images, tmp_path, caplog) -> None:
        (images / "broken.png").write_text("nope", encoding="utf-8")
        caplog.set_level(logging.INFO, logger="lazyrules")
        runner = LazyRulesRunner(
            LazyRulesConfig(
                images=(str(images / "*.png"),), stylesheet=str(tmp_path / "style.css")
            )
        )
        result = runner.build()
        assert len(result.failures) == 1
        assert any(
            r.levelno == logging.ERROR and "broken.png" in r.getMessage()
            for r in caplog.records
        )
        assert any("Stylesheet generated at" in r.getMessage() for r in caplog.records)

    def test_empty_warns(self, tmp_path, caplog) -> None:
        caplog.set_level(logging.WARNING, logger="lazyrules")
        runner = LazyRulesRunner(
            LazyRulesConfig(
                images=(str(tmp_path / "*.png"),), stylesheet=str(tmp_path / "style.css")
            )
        )
        result = runner.build()
        assert result.is_empty
        assert (tmp_path / "style.css").read_text(encoding="utf-8") == ""
        assert any("No images matched" in r.getMessage() for r in caplog.records)

    def test_empty_raises_when_required(self, tmp_path) -> None:
        runner = LazyRulesRunner(
            LazyRulesConfig(
                images=(str(tmp_path / "*.png"),),
                stylesheet=str(tmp_path / "style.css"),
                fail_on_empty=True,
            )
        )
        with pytest.raises(EmptyInputError):
            runner.build()
        assert not (tmp_path / "style.css").exists()


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "background-image CSS rules" in result.output
        assert "build" in result.output
        assert "inspect" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_build_help(self) -> None:
        result = CliRunner().invoke(cli, ["build", "--help"])
        assert result.exit_code == 0
        assert "--stylesheet" in result.output
        assert "--watch" in result.output

    def test_build_success(self, images, tmp_path) -> None:
        stylesheet = tmp_path / "css" / "style.css"
        result = CliRunner().invoke(
            cli, ["build", str(images / "*.png"), "-o", str(stylesheet)]
        )
        assert result.exit_code == 0, result.output
        assert "3 rule(s), 0 failure(s)" in result.output
        css = stylesheet.read_text(encoding="utf-8")
        assert "(min-resolution: 192dpi)" in css

    def test_build_reports_failures(self, images, tmp_path) -> None:
        Image.new("RGBA", (10, 10)).save(images / "@2x.png", "PNG")
        result = CliRunner().invoke(
            cli, ["build", str(images / "*.png"), "-o", str(tmp_path / "style.css")]
        )
        assert result.exit_code == 1
        assert "ParseError" in result.output
        assert ".circle" in (tmp_path / "style.css").read_text(encoding="utf-8")

    def test_build_requires_stylesheet(self, images) -> None:
        result = CliRunner().invoke(cli, ["build", str(images / "*.png")])
        assert result.exit_code != 0

    def test_build_empty_ok(self, tmp_path) -> None:
        result = CliRunner().invoke(
            cli, ["build", str(tmp_path / "*.png"), "-o", str(tmp_path / "style.css")]
        )
        assert result.exit_code == 0
        assert "0 rule(s)" in result.output

    def test_build_fail_on_empty(self, tmp_path) -> None:
        result = CliRunner().invoke(
            cli,
            [
                "build",
                str(tmp_path / "*.png"),
                "-o", str(tmp_path / "style.css"),
                "--fail-on-empty",
            ],
        )
        assert result.exit_code == 1
        assert "No images matched" in result.output


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_inspect_lists_groups(self, images, tmp_path) -> None:
        result = CliRunner().invoke(
            cli, ["inspect", str(images / "*.png"), "-o", str(tmp_path / "style.css")]
        )
        assert result.exit_code == 0, result.output
        assert "Assets:   3" in result.output
        assert "Ratio 1x:" in result.output
        assert "Ratio 2x:" in result.output
        assert "size=50x50 css=25x25" in result.output
        assert ".button-hover, a:hover .button" in result.output
        assert not (tmp_path / "style.css").exists()

    def test_inspect_failures_exit_one(self, images, tmp_path) -> None:
        (images / "broken.png").write_text("nope", encoding="utf-8")
        result = CliRunner().invoke(cli, ["inspect", str(images / "*.png")])
        assert result.exit_code == 1
        assert "DimensionError" in result.output
