"""Tests for the lazytable CLI."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from lazytable.cli import cli

CSV_INPUT = "who,what,when\nda,foobar foobar,bar\nda,foobar!!,bar\n"


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    """CLI runner with no lazytable environment overrides."""
    for key in list(os.environ):
        if key.startswith("LAZYTABLE_"):
            monkeypatch.delenv(key)
    return CliRunner()


class TestRender:
    """Tests for `lazytable render`."""

    def test_render_stdin(self, runner: CliRunner) -> None:
        """CSV from stdin renders with a title row."""
        result = runner.invoke(cli, ["render"], input=CSV_INPUT)

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            " who | what          | when ",
            "-----+---------------+------",
            " da  | foobar foobar | bar  ",
            " da  | foobar!!      | bar  ",
        ]

    def test_render_with_width(self, runner: CliRunner) -> None:
        """--width wraps the wide column."""
        result = runner.invoke(cli, ["render", "--width", "23"], input=CSV_INPUT)

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            " who | what     | when ",
            "-----+----------+------",
            " da  | foobar   | bar  ",
            "     | foobar   |      ",
            " da  | foobar!! | bar  ",
        ]

    def test_width_from_environment(self, runner: CliRunner) -> None:
        """LAZYTABLE_WIDTH sets the default width."""
        result = runner.invoke(
            cli,
            ["render", "--no-header"],
            input="da,foobar foobar,bar\nda,foobar!,bar\n",
            env={"LAZYTABLE_WIDTH": "20"},
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            " da | foobar  | bar ",
            "    | foobar  |     ",
            " da | foobar! | bar ",
        ]

    def test_fit_terminal(self, runner: CliRunner) -> None:
        """--fit-terminal uses the terminal width."""
        with patch(
            "lazytable.cli.shutil.get_terminal_size",
            return_value=os.terminal_size((20, 24)),
        ):
            result = runner.invoke(
                cli,
                ["render", "--no-header", "--fit-terminal"],
                input="da,foobar foobar,bar\n",
            )

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            " da | foobar  | bar ",
            "    | foobar  |     ",
        ]

    def test_width_beats_fit_terminal(self, runner: CliRunner) -> None:
        """An explicit width wins over the terminal width."""
        with patch(
            "lazytable.cli.shutil.get_terminal_size",
            return_value=os.terminal_size((20, 24)),
        ):
            result = runner.invoke(
                cli,
                ["render", "--no-header", "--fit-terminal", "--width", "80"],
                input="da,foobar foobar,bar\n",
            )

        assert result.exit_code == 0
        assert result.output.splitlines() == [" da | foobar foobar | bar "]

    def test_render_file_tsv(self, runner: CliRunner, tmp_path: Path) -> None:
        """--tsv reads tab separated files."""
        path = tmp_path / "data.tsv"
        path.write_text("a\tb\nc, d\te\n")

        result = runner.invoke(cli, ["render", "--tsv", str(path)])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            " a    | b ",
            "------+---",
            " c, d | e ",
        ]

    def test_custom_delimiter(self, runner: CliRunner) -> None:
        """-d sets the field delimiter."""
        result = runner.invoke(cli, ["render", "-d", ";", "--no-header"], input="a;b\n")

        assert result.exit_code == 0
        assert result.output.splitlines() == [" a | b "]

    def test_bad_delimiter(self, runner: CliRunner) -> None:
        """Delimiters must be one character."""
        result = runner.invoke(cli, ["render", "-d", ";;"], input="a;;b\n")

        assert result.exit_code == 2
        assert "single character" in result.output

    def test_style_options(self, runner: CliRunner) -> None:
        """--border and --padding override the style."""
        result = runner.invoke(
            cli, ["render", "--border", "--padding", "0"], input="x,y\na,bb\n"
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == ["|x|y |", "+-+--+", "|a|bb|"]

    def test_style_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """--style loads a YAML style."""
        style = tmp_path / "style.yaml"
        style.write_text('fill: "="\njunction: "#"\n')

        result = runner.invoke(cli, ["render", "--style", str(style)], input="a,b\n1,2\n")

        assert result.exit_code == 0
        assert result.output.splitlines() == [" a | b ", "===#===", " 1 | 2 "]

    def test_style_from_environment(self, runner: CliRunner) -> None:
        """LAZYTABLE_* variables set the style."""
        result = runner.invoke(
            cli, ["render"], input="a,b\n", env={"LAZYTABLE_FILL": "~"}
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == [" a | b ", "~~~+~~~"]

    def test_invalid_width(self, runner: CliRunner) -> None:
        """Invalid widths exit with an error message."""
        result = runner.invoke(cli, ["render", "--width", "0"], input=CSV_INPUT)

        assert result.exit_code == 1
        assert "Error: Invalid width 0" in result.output

    def test_invalid_style_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """Bad style files exit with an error message."""
        style = tmp_path / "style.yaml"
        style.write_text("- nope\n")

        result = runner.invoke(cli, ["render", "--style", str(style)], input=CSV_INPUT)

        assert result.exit_code == 1
        assert "must contain a mapping" in result.output

    def test_input_not_utf8(self, runner: CliRunner) -> None:
        """Undecodable input exits with an error message."""
        result = runner.invoke(cli, ["render"], input=b"a,b\n\xff\xfe,c\n")

        assert result.exit_code == 1
        assert "Error: cannot read input" in result.output

    def test_style_file_mixed_keys(self, runner: CliRunner, tmp_path: Path) -> None:
        """Style files with non-string keys exit with an error message."""
        style = tmp_path / "style.yaml"
        style.write_text("1: a\nfoo: b\n")

        result = runner.invoke(cli, ["render", "--style", str(style)], input=CSV_INPUT)

        assert result.exit_code == 1
        assert "keys must be strings" in result.output

    def test_empty_input(self, runner: CliRunner) -> None:
        """No records render nothing."""
        result = runner.invoke(cli, ["render"], input="")

        assert result.exit_code == 0
        assert result.output == ""
