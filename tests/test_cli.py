"""
Tests for CLI functionality.

These tests verify the command-line interface logic.
"""

from __future__ import annotations

import argparse
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest

from bird_rarities.cli import cmd_run, create_parser, main
from bird_rarities.schemas import Result

if TYPE_CHECKING:
    from unittest.mock import Mock


def ok_result() -> Result:
    return Result(
        success=True,
        message="Found 1 overall and 1 yearly rarities",
        data={
            "files_read": ["a.csv"],
            "files_skipped": [],
            "merged_rows": 1,
            "us_observations": 1,
            "overall_report": "rare_species_overall.csv",
            "yearly_report": "rare_species_yearly.csv",
        },
    )


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        """Parser is created successfully."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "bird-rarities"

    def test_parser_has_version(self) -> None:
        """Parser has version argument."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])

    def test_parser_files(self) -> None:
        """Positional arguments are collected as paths."""
        args = create_parser().parse_args(["a.csv", "b.csv"])
        assert args.files == [Path("a.csv"), Path("b.csv")]

    def test_parser_no_files(self) -> None:
        """No files parses to an empty list; main() rejects it."""
        args = create_parser().parse_args([])
        assert args.files == []

    def test_parser_debug_and_output_dir(self) -> None:
        """Options are accepted alongside files."""
        args = create_parser().parse_args(["--debug", "--output-dir", "reports", "a.csv"])
        assert args.debug is True
        assert args.output_dir == Path("reports")

    def test_parser_output_dir_default(self) -> None:
        """Output directory defaults to None (settings decide)."""
        args = create_parser().parse_args(["a.csv"])
        assert args.output_dir is None


class TestCmdRun:
    """Tests for cmd_run function."""

    def test_success_returns_zero(self) -> None:
        """Successful run returns exit code 0."""
        args = argparse.Namespace(files=[Path("a.csv")], output_dir=None, debug=False)

        with patch("bird_rarities.cli.find_rarities", return_value=ok_result()) as mock_flow:
            exit_code = cmd_run(args)

        assert exit_code == 0
        mock_flow.assert_called_once_with([Path("a.csv")], output_dir=None)

    def test_failure_returns_one(self) -> None:
        """Failed run returns exit code 1 and prints the error."""
        args = argparse.Namespace(files=[Path("a.csv")], output_dir=None, debug=False)
        failed = Result(success=False, message="", error="No valid data found in any input file")

        with (
            patch("bird_rarities.cli.find_rarities", return_value=failed),
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            exit_code = cmd_run(args)

        assert exit_code == 1
        assert "No valid data" in mock_stderr.getvalue()

    def test_prints_summary(self) -> None:
        """Summary lists counts and output files."""
        args = argparse.Namespace(files=[Path("a.csv")], output_dir=None, debug=False)

        with (
            patch("bird_rarities.cli.find_rarities", return_value=ok_result()),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            cmd_run(args)

        output = mock_stdout.getvalue()
        assert "rare_species_overall.csv" in output
        assert "rare_species_yearly.csv" in output
        assert "US observations: 1" in output

    def test_debug_mode_prints_settings(self) -> None:
        """Debug mode prints settings."""
        args = argparse.Namespace(files=[Path("a.csv")], output_dir=None, debug=True)

        with (
            patch("bird_rarities.cli.find_rarities", return_value=ok_result()),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            cmd_run(args)

        assert "Settings" in mock_stdout.getvalue()

    def test_passes_output_dir(self) -> None:
        """--output-dir is forwarded to the flow."""
        args = argparse.Namespace(files=[Path("a.csv")], output_dir=Path("out"), debug=False)

        with patch("bird_rarities.cli.find_rarities", return_value=ok_result()) as mock_flow:
            cmd_run(args)

        assert mock_flow.call_args.kwargs["output_dir"] == Path("out")


class TestMain:
    """Tests for main function."""

    def test_no_files_is_usage_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """No arguments exits 1 with usage, runs nothing, writes nothing."""
        monkeypatch.chdir(tmp_path)
        with (
            patch("sys.argv", ["bird-rarities"]),
            patch("bird_rarities.cli.find_rarities") as mock_flow,
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            exit_code = main()

        assert exit_code == 1
        assert "usage" in mock_stderr.getvalue()
        mock_flow.assert_not_called()
        assert list(tmp_path.iterdir()) == []

    def test_files_run_pipeline(self) -> None:
        """File arguments are handed to cmd_run."""
        with (
            patch("sys.argv", ["bird-rarities", "a.csv"]),
            patch("bird_rarities.cli.cmd_run", return_value=0) as mock_cmd,
        ):
            exit_code = main()

        assert exit_code == 0
        mock_cmd.assert_called_once()

    @patch("bird_rarities.cli.find_rarities")
    def test_failure_exit_code(self, mock_flow: Mock) -> None:
        """A failed run makes main() return 1."""
        mock_flow.return_value = Result(success=False, message="", error="boom")
        with patch("sys.argv", ["bird-rarities", "a.csv"]), patch("sys.stderr", new=StringIO()):
            assert main() == 1
