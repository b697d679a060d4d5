"""Tests for CLI commands."""

import pytest
from click.testing import CliRunner

from tablestyle.borders import RowKind
from tablestyle.cli import cli, render_rule, render_skeleton
from tablestyle.style import TableStyle


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CLI runner."""
    return CliRunner()


class TestCLI:
    """Test CLI commands."""

    def test_cli_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "tablestyle border preview CLI" in result.output

    def test_borders_lists_variants(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["borders"])

        assert result.exit_code == 0
        assert "ascii" in result.output
        assert "unicode_thick_edge" in result.output
        assert "╭───┬───╮" in result.output
        assert "+---+---+" in result.output

    def test_preview_ascii(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["preview", "--columns", "2", "--cell-width", "2", "--rows", "1"]
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "+----+----+",
            "| c1 | c2 |",
            "+----+----+",
            "|    |    |",
            "+----+----+",
        ]

    def test_preview_round_with_separators(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            [
                "preview",
                "--border",
                "unicode_round",
                "--columns",
                "2",
                "--cell-width",
                "2",
                "--rows",
                "2",
                "--all-separators",
            ],
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "╭────┬────╮",
            "│ c1 │ c2 │",
            "╞════╪════╡",
            "│    │    │",
            "├────┼────┤",
            "│    │    │",
            "╰────┴────╯",
        ]

    def test_preview_no_verticals(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["preview", "--columns", "2", "--cell-width", "2", "--rows", "0", "--no-verticals"],
        )

        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "--------"
        assert result.output.splitlines()[1] == " c1  c2 "

    def test_preview_no_top_bottom(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["preview", "--columns", "1", "--cell-width", "2", "--rows", "1"]
            + ["--no-top", "--no-bottom"],
        )

        assert result.output.splitlines() == ["| c1 |", "+----+", "|    |"]

    def test_preview_unknown_border(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["preview", "--border", "dotted"])

        assert result.exit_code == 1
        assert "Unknown border variant: 'dotted'" in result.output

    def test_preview_negative_padding(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["preview", "--padding", "-1"])

        assert result.exit_code == 1
        assert "Padding cannot be negative" in result.output


class TestRendering:
    """Tests for the preview drawing helpers."""

    def test_rule_with_margin_and_padding(self) -> None:
        style = TableStyle(margin_left="  ", padding_left=0, padding_right=2)
        assert render_rule(style, RowKind.TOP, [1, 3]) == "  +---+-----+"

    def test_thick_edge_skeleton(self) -> None:
        style = TableStyle(border="unicode_thick_edge", padding_left=0, padding_right=0)
        lines = render_skeleton(style, columns=2, cell_width=2, rows=1)

        assert lines == [
            "┏━━┯━━┓",
            "┃c1│c2┃",
            "┣══╪══┫",
            "┃  │  ┃",
            "┗━━┷━━┛",
        ]
