"""Tests for SelectionConfig defaults and environment overrides."""

from pathlib import Path

import pytest

from monoselect.models import Project, SelectionConfig


class TestSelectionConfig:
    def test_defaults(self, monkeypatch):
        for name in ("MONOSELECT_GIT_REF", "MONOSELECT_GIT_TIMEOUT", "MONOSELECT_MAX_INCLUDE_DEPTH"):
            monkeypatch.delenv(name, raising=False)
        config = SelectionConfig()
        assert config.workspace_root == Path(".")
        assert config.default_git_ref == "origin/main"
        assert config.git_timeout == 30.0
        assert config.max_include_depth == 32

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("MONOSELECT_GIT_REF", "upstream/trunk")
        monkeypatch.setenv("MONOSELECT_GIT_TIMEOUT", "2.5")
        monkeypatch.setenv("MONOSELECT_MAX_INCLUDE_DEPTH", "4")
        config = SelectionConfig()
        assert config.default_git_ref == "upstream/trunk"
        assert config.git_timeout == 2.5
        assert config.max_include_depth == 4

    def test_explicit_values_win(self, monkeypatch):
        monkeypatch.setenv("MONOSELECT_GIT_REF", "upstream/trunk")
        config = SelectionConfig(workspace_root="/repo", default_git_ref="main")
        assert config.default_git_ref == "main"
        assert config.workspace_root == Path("/repo")

    def test_explicit_zero_values_are_kept(self, monkeypatch):
        monkeypatch.setenv("MONOSELECT_GIT_REF", "upstream/trunk")
        monkeypatch.setenv("MONOSELECT_GIT_TIMEOUT", "2.5")
        monkeypatch.setenv("MONOSELECT_MAX_INCLUDE_DEPTH", "4")
        config = SelectionConfig(default_git_ref="", git_timeout=0.0, max_include_depth=0)
        assert config.default_git_ref == ""
        assert config.git_timeout == 0.0
        assert config.max_include_depth == 0

    def test_bad_environment_value_names_variable(self, monkeypatch):
        monkeypatch.setenv("MONOSELECT_GIT_TIMEOUT", "abc")
        with pytest.raises(ValueError, match="MONOSELECT_GIT_TIMEOUT") as exc:
            SelectionConfig()
        assert "'abc'" in str(exc.value)

    def test_bad_depth_value_names_variable(self, monkeypatch):
        monkeypatch.setenv("MONOSELECT_MAX_INCLUDE_DEPTH", "3.5")
        with pytest.raises(ValueError, match="MONOSELECT_MAX_INCLUDE_DEPTH"):
            SelectionConfig()


class TestProject:
    def test_identity_equality(self):
        a = Project(name="a")
        twin = Project(name="a")
        assert a == a
        assert a != twin
        assert len({a, twin}) == 2
