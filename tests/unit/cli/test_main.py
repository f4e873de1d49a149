"""Tests for the view-paths command line interface."""
import json

import pytest
import yaml

from view_paths.cli import main as cli


@pytest.fixture
def config_file(tmp_path, view_dirs):
    """Configuration with one valid path, one namespace and a file cache."""

    def _write(**overrides) -> str:
        first, second = view_dirs
        data = {
            "paths": [first],
            "namespaced_paths": {"admin": second},
            "cache_store": "file",
            "cache_path": str(tmp_path / "cache"),
        }
        data.update(overrides)
        path = tmp_path / "view_paths.yml"
        path.write_text(yaml.safe_dump(data))
        return str(path)

    return _write


def run(capsys, *argv):
    code = cli.main(list(argv))
    return code, capsys.readouterr().out


class TestCacheCommand:
    """view-paths cache"""

    def test_warms_and_prints_tables(self, capsys, config_file, view_dirs):
        first, second = view_dirs

        code, out = run(capsys, "--config", config_file(), "cache")

        assert code == 0
        assert "View paths cache has been warmed successfully." in out
        assert "Cache Enabled" in out
        assert "Is Cached" in out
        assert "Regular view paths:" in out
        assert first in out
        assert "Namespaced view paths:" in out
        assert "admin" in out
        assert second in out

    def test_json_output(self, capsys, config_file, view_dirs):
        first, _ = view_dirs

        code, out = run(capsys, "--config", config_file(), "--format", "json", "cache")

        data = json.loads(out)
        assert code == 0
        assert data["config"]["is_cached"] is True
        assert data["paths"]["paths"] == [first]


class TestClearCommand:
    """view-paths clear"""

    def test_clears_cached_paths(self, capsys, config_file):
        path = config_file()
        run(capsys, "--config", path, "cache")

        code, out = run(capsys, "--config", path, "clear")

        assert code == 0
        assert "View paths cache has been cleared successfully." in out
        _, listing = run(capsys, "--config", path, "--format", "json", "list")
        assert json.loads(listing)["config"]["is_cached"] is False

    def test_disabled_cache(self, capsys, config_file):
        code, out = run(capsys, "--config", config_file(cache_enabled=False), "clear")

        assert code == 0
        assert "No view paths cache found or cache is disabled." in out

    def test_yaml_output(self, capsys, config_file):
        code, out = run(capsys, "--config", config_file(cache_enabled=False), "--format", "yaml", "clear")

        assert code == 0
        assert yaml.safe_load(out) == {"cleared": False}


class TestListCommand:
    """view-paths list"""

    def test_not_cached_shows_configured_paths(self, capsys, config_file, view_dirs):
        first, _ = view_dirs

        code, out = run(capsys, "--config", config_file(), "list")

        assert code == 0
        assert "View Paths Configuration:" in out
        assert "No regular view paths in cache." in out
        assert "No namespaced view paths in cache." in out
        assert "Configured paths (not cached):" in out
        assert first in out

    def test_cached_paths(self, capsys, config_file):
        path = config_file(namespaced_paths={})
        run(capsys, "--config", path, "cache")

        code, out = run(capsys, "--config", path, "list")

        assert code == 0
        assert "Regular view paths:" in out
        assert "No namespaced view paths in cache." in out
        assert "Configured paths (not cached):" not in out

    def test_configured_paths_include_invalid_ones(self, capsys, config_file):
        code, out = run(capsys, "--config", config_file(paths=["/missing/views"]), "--format", "json", "list")

        data = json.loads(out)
        assert data["configured"]["paths"] == ["/missing/views"]
        assert data["paths"] == {"paths": [], "namespaced_paths": {}}


class TestErrors:
    """Exit codes."""

    def test_no_command(self, capsys):
        code, out = run(capsys)

        assert code == 1
        assert "No command specified" in out

    def test_missing_config_file(self, capsys, tmp_path):
        code, out = run(capsys, "--config", str(tmp_path / "missing.yml"), "list")

        assert code == 1
        assert "Configuration file not found" in out

    def test_invalid_config(self, capsys, config_file):
        code, out = run(capsys, "--config", config_file(cache_store="redis"), "list")

        assert code == 1
        assert out.startswith("Error:")

    def test_unexpected_error(self, capsys, config_file, monkeypatch):
        def broken(service, output_format):
            raise RuntimeError("boom")

        monkeypatch.setitem(cli.COMMAND_HANDLERS, "list", broken)

        code, out = run(capsys, "--config", config_file(), "list")

        assert code == 1
        assert "Unexpected error: boom" in out

    def test_keyboard_interrupt(self, capsys, config_file, monkeypatch):
        def interrupted(config_path=None):
            raise KeyboardInterrupt

        monkeypatch.setattr(cli, "create_service", interrupted)

        code, out = run(capsys, "--config", config_file(), "list")

        assert code == 130
        assert "Operation cancelled by user." in out
