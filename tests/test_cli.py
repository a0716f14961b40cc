"""Tests for the click CLI."""

import json
import shutil
from pathlib import Path

import pytest
from click.testing import CliRunner

from monoselect.cli import cli

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def workspace(tmp_path):
    """Copy of the fixture workspace with an expression file beside it."""
    shutil.copy(FIXTURES / "workspace.json", tmp_path / "workspace.json")
    shutil.copy(FIXTURES / "frontend.json", tmp_path / "frontend.json")
    return tmp_path / "workspace.json"


def _run(*args):
    return CliRunner().invoke(cli, list(args))


class TestSelectCommand:
    def test_to(self, workspace):
        result = _run("select", "-w", str(workspace), "--to", "name:ui")
        assert result.exit_code == 0, result.output
        assert result.output.split() == ["core", "ui"]

    def test_from(self, workspace):
        result = _run("select", "-w", str(workspace), "--from", "core", "--json")
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == ["app", "core", "ui"]

    def test_positional_and_only_are_unioned(self, workspace):
        result = _run("select", "-w", str(workspace), "tools", "--only", "tag:backend", "--json")
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == ["core", "tools"]

    def test_expr_file_relative_to_workspace(self, workspace):
        result = _run("select", "-w", str(workspace), "--expr", "frontend.json", "--json")
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == ["ui"]

    def test_empty_selection(self, workspace):
        result = _run("select", "-w", str(workspace), "--only", "tag:nothing", "--json")
        assert result.exit_code == 0
        assert json.loads(result.output) == []

    def test_unknown_scope_reports_context(self, workspace):
        result = _run("select", "-w", str(workspace), "--to", "bogus:x")
        assert result.exit_code == 1
        assert "Unknown selector scope 'bogus'" in result.output
        assert "command-line argument --to" in result.output

    def test_requires_a_selector(self, workspace):
        result = _run("select", "-w", str(workspace))
        assert result.exit_code == 2
        assert "Specify at least one selector" in result.output

    def test_invalid_workspace(self, tmp_path):
        bad = tmp_path / "workspace.json"
        bad.write_text("[]")
        result = _run("select", "-w", str(bad), "app")
        assert result.exit_code == 1
        assert "Invalid workspace" in result.output


class TestCompletionsCommand:
    def test_lists_scoped_values(self, workspace):
        result = _run("completions", "-w", str(workspace))
        assert result.exit_code == 0, result.output
        lines = result.output.split()
        assert lines[:4] == ["name:app", "name:ui", "name:core", "name:tools"]
        assert "tag:frontend" in lines
        assert "version-policy:stable" in lines
