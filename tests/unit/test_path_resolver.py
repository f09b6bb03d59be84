"""
Unit tests for configuration path resolution.

Tests explicit path handling, fallback search ordering, and the default
search location builder.
"""

import os
import shutil
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from confload.config.errors import ConfigError, ConfigInaccessibleError, ConfigNotFoundError
from confload.models.settings import LoaderSettings
from confload.tools.path_resolver import find_config, default_search_paths, candidate_paths


class TestFindConfig:
    """Test cases for find_config."""

    def setup_method(self):
        """Set up a temporary directory with a few configuration files."""
        self.temp_dir = tempfile.mkdtemp()
        self.root = Path(self.temp_dir)

        self.first = self.root / "first.yaml"
        self.second = self.root / "second.yaml"
        self.missing = self.root / "missing.yaml"
        self.first.write_text("name: first\n")
        self.second.write_text("name: second\n")

    def teardown_method(self):
        """Clean up test fixtures."""
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def test_explicit_path_returned_unchanged(self):
        """Test that an existing explicit path is returned as given."""
        result = find_config(str(self.first), [str(self.second)])
        assert result == str(self.first)

    def test_explicit_path_ignores_fallbacks(self):
        """Test that fallbacks do not override an explicit path."""
        result = find_config(str(self.first), [str(self.second), str(self.missing)])
        assert result == str(self.first)

    def test_explicit_relative_path_not_normalised(self):
        """Test that a relative explicit path is not resolved or rewritten."""
        cwd = os.getcwd()
        os.chdir(self.temp_dir)
        try:
            assert find_config("./first.yaml", []) == "./first.yaml"
        finally:
            os.chdir(cwd)

    def test_explicit_path_accepts_pathlike(self):
        """Test that Path objects are accepted and returned as strings."""
        result = find_config(self.first, [])
        assert result == str(self.first)
        assert isinstance(result, str)

    def test_explicit_directory_is_statable(self):
        """Test that any statable entry resolves, including a directory."""
        assert find_config(self.temp_dir, []) == self.temp_dir

    def test_explicit_path_missing(self):
        """Test that a missing explicit path raises ConfigInaccessibleError."""
        with pytest.raises(ConfigInaccessibleError, match="could not stat configuration file") as exc_info:
            find_config(str(self.missing), [str(self.first)])

        error = exc_info.value
        assert error.path == str(self.missing)
        assert error.stage == "stat"
        assert isinstance(error.__cause__, FileNotFoundError)
        assert str(self.missing) in str(error)

    def test_explicit_path_missing_never_checks_fallbacks(self):
        """Test that a failing explicit path does not stat the fallbacks."""
        with patch("confload.tools.path_resolver.os.stat", side_effect=FileNotFoundError("gone")) as mock_stat:
            with pytest.raises(ConfigInaccessibleError):
                find_config("/bad/path.yml", ["/etc/app/config.yml", "/other.yml"])

        mock_stat.assert_called_once_with("/bad/path.yml")

    def test_explicit_path_permission_denied(self):
        """Test that a permission error while stat'ing is wrapped."""
        with patch("confload.tools.path_resolver.os.stat", side_effect=PermissionError("denied")):
            with pytest.raises(ConfigInaccessibleError) as exc_info:
                find_config("/root/secret.yaml", [])

        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_fallback_single_match(self):
        """Test fallback search with one existing candidate."""
        result = find_config("", [str(self.missing), str(self.first)])
        assert result == str(self.first)

    def test_fallback_last_match_wins(self):
        """Test that the last statable candidate is chosen, not the first."""
        result = find_config("", [str(self.first), str(self.missing), str(self.second)])
        assert result == str(self.second)

        result = find_config("", [str(self.second), str(self.first), str(self.missing)])
        assert result == str(self.first)

    def test_fallback_none_path(self):
        """Test that None behaves like an empty path."""
        assert find_config(None, [str(self.first)]) == str(self.first)

    def test_fallback_no_match(self):
        """Test that no statable candidate raises ConfigNotFoundError."""
        with pytest.raises(ConfigNotFoundError, match="could not locate configuration file") as exc_info:
            find_config("", [str(self.missing), str(self.root / "other.yaml")])

        error = exc_info.value
        assert error.path is None
        assert error.__cause__ is None
        assert error.stage == "locate"
        assert isinstance(error, ConfigError)

    def test_fallback_empty_list(self):
        """Test that an empty fallback list raises ConfigNotFoundError."""
        with pytest.raises(ConfigNotFoundError):
            find_config("", [])

    def test_fallback_skips_unstatable_candidates(self):
        """Test that stat errors on candidates are skipped silently."""
        real_stat = os.stat

        def fake_stat(path, *args, **kwargs):
            if path == str(self.second):
                raise PermissionError("denied")
            return real_stat(path, *args, **kwargs)

        with patch("confload.tools.path_resolver.os.stat", side_effect=fake_stat):
            result = find_config("", [str(self.first), str(self.second)])

        assert result == str(self.first)

    def test_idempotent(self):
        """Test that repeated calls give the same result."""
        candidates = [str(self.first), str(self.second)]
        assert find_config("", candidates) == find_config("", candidates)


class TestDefaultSearchPaths:
    """Test cases for default_search_paths."""

    def test_order_least_specific_first(self):
        """Test that system locations come before user and working directory ones."""
        env = {k: v for k, v in os.environ.items() if k != "XDG_CONFIG_HOME"}
        with patch.dict(os.environ, env, clear=True):
            paths = default_search_paths("myapp", filenames=["config.yaml"])

        home = Path.home()
        assert paths == [
            str(Path("/etc") / "myapp" / "config.yaml"),
            str(home / ".config" / "myapp" / "config.yaml"),
            str(home / ".myapp" / "config.yaml"),
            str(Path.cwd() / "config.yaml"),
        ]

    def test_xdg_config_home(self):
        """Test that XDG_CONFIG_HOME replaces ~/.config."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": "/tmp/xdg"}):
            paths = default_search_paths("myapp", filenames=["config.yaml"], include_cwd=False)

        assert str(Path("/tmp/xdg") / "myapp" / "config.yaml") in paths
        assert len(paths) == 3

    def test_default_filenames(self):
        """Test that every default file name is tried in each location."""
        paths = default_search_paths("myapp", include_cwd=False)

        assert len(paths) == 9
        assert paths[0].endswith("config.yaml")
        assert paths[1].endswith("config.yml")
        assert paths[2].endswith("config.json")

    def test_without_cwd(self):
        """Test that include_cwd=False leaves out the working directory."""
        paths = default_search_paths("myapp", filenames=["app.yaml"], include_cwd=False)
        assert str(Path.cwd() / "app.yaml") not in paths

    def test_empty_app_name(self):
        """Test that an empty application name is rejected."""
        with pytest.raises(ValueError, match="app_name is required"):
            default_search_paths("")

    def test_works_with_find_config(self):
        """Test that the working directory copy wins over other locations."""
        temp_dir = tempfile.mkdtemp()
        cwd = os.getcwd()
        try:
            os.chdir(temp_dir)
            Path(temp_dir, "config.yaml").write_text("a: 1\n")
            paths = default_search_paths("confload-test-app-does-not-exist", filenames=["config.yaml"])

            assert find_config("", paths) == str(Path.cwd() / "config.yaml")
        finally:
            os.chdir(cwd)
            shutil.rmtree(temp_dir)


class TestCandidatePaths:
    """Test cases for candidate_paths."""

    def test_no_app_name(self):
        """Test that only explicit search paths are used without an app name."""
        settings = LoaderSettings(search_paths=["/a.yaml", "/b.yaml"])
        assert candidate_paths(settings) == ["/a.yaml", "/b.yaml"]

    def test_defaults_are_empty(self):
        """Test that default settings produce no candidates."""
        assert candidate_paths(LoaderSettings()) == []

    def test_default_locations_before_search_paths(self):
        """Test that default locations come before explicit search paths."""
        settings = LoaderSettings(
            app_name="myapp",
            filenames=["config.yaml"],
            search_paths=["/opt/override.yaml"],
            include_cwd=False
        )

        with patch.dict(os.environ, {"XDG_CONFIG_HOME": "/tmp/xdg"}):
            candidates = candidate_paths(settings)

        assert candidates == [
            str(Path("/etc") / "myapp" / "config.yaml"),
            str(Path("/tmp/xdg") / "myapp" / "config.yaml"),
            str(Path.home() / ".myapp" / "config.yaml"),
            "/opt/override.yaml",
        ]
