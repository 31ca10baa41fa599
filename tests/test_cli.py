"""Tests for the CLI entry point."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from docprint.cli import app

runner = CliRunner()


class TestCLI:
    """Tests for the docprint CLI."""

    def test_prints_report(self, sample_json: Path) -> None:
        result = runner.invoke(app, [str(sample_json)])
        assert result.exit_code == 0
        assert "Defined in greeter.ts:1:1" in result.stdout
        assert "async function main(): Promise<void>" in result.stdout
        assert "class Greeter<T>" in result.stdout
        assert "  greet(who: T): string" in result.stdout

    def test_functions_before_classes(self, sample_json: Path) -> None:
        result = runner.invoke(app, [str(sample_json)])
        assert result.stdout.index("function main") < result.stdout.index(
            "class Greeter"
        )

    def test_private_hidden_by_default(self, sample_json: Path) -> None:
        result = runner.invoke(app, [str(sample_json)])
        assert result.exit_code == 0
        assert "token" not in result.stdout

    def test_private_flag(self, sample_json: Path) -> None:
        result = runner.invoke(app, [str(sample_json), "--private"])
        assert result.exit_code == 0
        assert "  private token: string" in result.stdout

    def test_no_color_when_not_a_terminal(self, sample_json: Path) -> None:
        result = runner.invoke(app, [str(sample_json)])
        assert "\x1b[" not in result.stdout

    def test_color_flag_forces_ansi(self, sample_json: Path) -> None:
        result = runner.invoke(app, [str(sample_json), "--color"])
        assert result.exit_code == 0
        assert "\x1b[" in result.stdout

    def test_multiple_files_merged(self, sample_json: Path, tmp_path: Path) -> None:
        other = tmp_path / "other.json"
        other.write_text(
            '[{"kind": "function", "name": "aaa", '
            '"location": {"filename": "o.ts", "line": 1, "col": 1}, '
            '"functionDef": {}}]',
            encoding="utf-8",
        )
        result = runner.invoke(app, [str(sample_json), str(other)])
        assert result.exit_code == 0
        assert result.stdout.index("function aaa") < result.stdout.index(
            "function main"
        )

    def test_output_file(self, sample_json: Path, tmp_path: Path) -> None:
        target = tmp_path / "report.txt"
        result = runner.invoke(app, [str(sample_json), "--output", str(target)])
        assert result.exit_code == 0
        assert result.stdout == ""
        report = target.read_text("utf-8")
        assert report.startswith("Defined in greeter.ts:1:1\n\n")
        assert "\x1b[" not in report

    def test_nonexistent_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, [str(tmp_path / "nope.json")])
        assert result.exit_code != 0

    def test_invalid_document(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text('[{"kind": "bogus", "name": "x"}]', encoding="utf-8")
        result = runner.invoke(app, [str(bad)])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_empty_document(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty.json"
        empty.write_text("[]", encoding="utf-8")
        result = runner.invoke(app, [str(empty)])
        assert result.exit_code == 1
        assert "No documentation nodes found." in result.output

    def test_programming_error_not_swallowed(self, sample_json: Path) -> None:
        with patch("docprint.cli.load_doc_nodes", side_effect=TypeError("bug")):
            result = runner.invoke(app, [str(sample_json)])
        assert result.exit_code == 1
        assert isinstance(result.exception, TypeError)

    def test_invalid_utf8_document(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_bytes(b'[{"kind": "function", "name": "\xff"}]')
        result = runner.invoke(app, [str(bad)])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "not valid UTF-8" in result.output

    def test_malformed_node_reported(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text(
            '[{"kind": "enum", "name": "E", '
            '"location": {"filename": "a.ts", "line": 1, "col": 1}, '
            '"enumDef": null}]',
            encoding="utf-8",
        )
        result = runner.invoke(app, [str(bad)])
        assert result.exit_code == 1
        assert "Error: E: malformed node" in result.output
