"""Tests for the command-line interface."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from bitfont import __version__
from bitfont.cli import app

runner = CliRunner()


@pytest.fixture
def base_args(tmp_path: Path, asset_dirs: tuple[Path, Path]) -> list[str]:
    font_dir, texture_dir = asset_dirs
    return [
        "--font-dir",
        str(font_dir),
        "--texture-dir",
        str(texture_dir),
        "--log-file",
        str(tmp_path / "cli.log"),
        "--workers",
        "1",
    ]


class TestCli:
    """Tests for the bitfont command."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_build(self, tmp_path: Path, base_args: list[str]):
        output = tmp_path / "font.ttf"
        result = runner.invoke(app, [*base_args, "--output", str(output), "--quiet"])

        assert result.exit_code == 0, result.output
        assert output.exists()

    def test_build_bold_vi_with_summary(self, tmp_path: Path, base_args: list[str]):
        output = tmp_path / "bold.ttf"
        result = runner.invoke(
            app,
            [*base_args, "--output", str(output), "--charset", "vi", "--type", "bold"],
        )

        assert result.exit_code == 0, result.output
        assert output.exists()
        assert "Complete" in result.output

    def test_list_glyphs(self, tmp_path: Path, base_args: list[str]):
        output = tmp_path / "never.ttf"
        result = runner.invoke(app, [*base_args, "--list-glyphs", "--output", str(output)])

        assert result.exit_code == 0, result.output
        assert "U+0041" in result.output
        assert "U+0049" in result.output
        assert not output.exists()

    def test_invalid_charset(self, base_args: list[str]):
        result = runner.invoke(app, [*base_args, "--charset", "klingon"])
        assert result.exit_code == 1

    def test_invalid_type(self, base_args: list[str]):
        result = runner.invoke(app, [*base_args, "--type", "italic"])
        assert result.exit_code == 1

    def test_verbose_and_quiet(self, base_args: list[str]):
        result = runner.invoke(app, [*base_args, "--verbose", "--quiet"])
        assert result.exit_code == 1

    def test_missing_font_dir(self, tmp_path: Path):
        result = runner.invoke(app, ["--font-dir", str(tmp_path / "nope")])
        assert result.exit_code == 1

    def test_missing_default_definition(self, tmp_path: Path):
        font_dir = tmp_path / "empty"
        font_dir.mkdir()
        result = runner.invoke(
            app,
            ["--font-dir", str(font_dir), "--log-file", str(tmp_path / "cli.log")],
        )
        assert result.exit_code == 1
