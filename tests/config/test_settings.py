"""Tests for DepGraphSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from depgraph.config.settings import DepGraphSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = DepGraphSettings.from_cli(project_root=tmp_path)
        assert settings.project_root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.graph.edges_file is None
        assert settings.graph.format == "auto"
        assert settings.output.sort is False
        assert settings.edges_path is None

    def test_frozen(self, tmp_path: Path) -> None:
        settings = DepGraphSettings.from_cli(project_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "depgraph.toml").write_text(
            '[graph]\nedges_file = "cells.json"\nformat = "json"\n[output]\nsort = true\n'
        )
        settings = DepGraphSettings.from_cli(project_root=tmp_path)
        assert settings.config_path == tmp_path / "depgraph.toml"
        assert settings.graph.format == "json"
        assert settings.output.sort is True
        assert settings.edges_path == tmp_path / "cells.json"

    def test_absolute_edges_file(self, tmp_path: Path) -> None:
        target = tmp_path / "elsewhere" / "cells.txt"
        (tmp_path / "depgraph.toml").write_text(f'[graph]\nedges_file = "{target.as_posix()}"\n')
        settings = DepGraphSettings.from_cli(project_root=tmp_path)
        assert settings.edges_path == target

    def test_sparse_override(self, tmp_path: Path) -> None:
        (tmp_path / "depgraph.toml").write_text("[output]\nsort = true\n")
        settings = DepGraphSettings.from_cli(project_root=tmp_path)
        assert settings.output.sort is True
        assert settings.graph.format == "auto"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[graph]\nedges_file = "sheet.txt"\n')
        settings = DepGraphSettings.from_cli(config_path=str(custom), project_root=tmp_path)
        assert settings.config_path == custom
        assert settings.edges_path == tmp_path / "sheet.txt"

    def test_project_root_from_config_location(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "depgraph.toml").write_text('[graph]\nedges_file = "cells.txt"\n')
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        settings = DepGraphSettings.from_cli()
        assert settings.project_root.resolve() == tmp_path.resolve()
        assert settings.edges_path is not None
        assert settings.edges_path.resolve() == (tmp_path / "cells.txt").resolve()

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "depgraph.toml").write_text("[graph\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            DepGraphSettings.from_cli(project_root=tmp_path)


class TestPriority:
    def test_cli_edges_beats_toml(self, tmp_path: Path) -> None:
        (tmp_path / "depgraph.toml").write_text('[graph]\nedges_file = "cells.txt"\n')
        override = tmp_path / "other.txt"
        settings = DepGraphSettings.from_cli(project_root=tmp_path, edges=override)
        assert settings.edges_path == override

    def test_none_flag_falls_through_to_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DEPGRAPH_EDGES", str(tmp_path / "env.txt"))
        settings = DepGraphSettings.from_cli(project_root=tmp_path, edges=None)
        assert settings.edges_path == tmp_path / "env.txt"

    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "depgraph.toml").write_text("[output]\nsort = false\n")
        monkeypatch.setenv("DEPGRAPH_OUTPUT__SORT", "true")
        settings = DepGraphSettings.from_cli(project_root=tmp_path)
        assert settings.output.sort is True

    def test_cli_flag_beats_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEPGRAPH_VERBOSE", "false")
        settings = DepGraphSettings.from_cli(project_root=tmp_path, verbose=True)
        assert settings.verbose is True

    def test_unset_bool_flag_keeps_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEPGRAPH_JSON_OUTPUT", "true")
        settings = DepGraphSettings.from_cli(project_root=tmp_path, json_output=None)
        assert settings.json_output is True
