"""Tests for policy file parsing and discovery."""

from pathlib import Path

import pytest

from shwrap.configs import ConfigLoader, parse_document
from shwrap.core.environment import Environment
from shwrap.core.exceptions import ConfigNotFoundError, ConfigParseError


class TestParseDocument:
    """Tests for YAML parsing."""

    def test_parse_basic_config(self):
        """Commands and templates are parsed."""
        document = parse_document(
            """
templates:
  base:
    share: [user]
    ro_bind: [/usr, /lib]
commands:
  node:
    extends: base
    bind:
      - ~/.npm:~/.npm
"""
        )

        assert list(document.templates) == ["base"]
        assert document.templates["base"].read_only_bind == ("/usr", "/lib")
        node = document.get_command("node")
        assert node.extends == "base"
        assert node.bind == ("~/.npm:~/.npm",)

    def test_empty_file(self):
        """An empty file is an empty document."""
        document = parse_document("")

        assert document.commands == {}
        assert document.templates == {}

    def test_invalid_yaml(self):
        """YAML syntax errors carry the file path."""
        path = Path("/work/.shwrap.yaml")
        with pytest.raises(ConfigParseError, match="/work/.shwrap.yaml") as exc_info:
            parse_document("commands: [unclosed", path)

        assert exc_info.value.path == path

    def test_top_level_not_mapping(self):
        """A list at top level is rejected."""
        with pytest.raises(ConfigParseError, match="must be a mapping"):
            parse_document("- node\n- python\n")

    def test_schema_error(self):
        """Wrong types are parse errors."""
        with pytest.raises(ConfigParseError):
            parse_document("commands:\n  node:\n    enabled: [1, 2]\n")


class TestConfigLoader:
    """Tests for config discovery."""

    def _environment(self, cwd: Path, home: Path | None = None, **variables):
        return Environment(home=home, cwd=cwd, variables=variables)

    def test_find_local_config_in_current_dir(self, temp_dir):
        """Finds .shwrap.yaml in the working directory."""
        config_path = temp_dir / ".shwrap.yaml"
        config_path.write_text("commands: {}")

        loader = ConfigLoader(self._environment(temp_dir))

        assert loader.find_local_config() == config_path

    def test_find_local_config_in_parent_dir(self, temp_dir):
        """Walks up to the nearest ancestor with a config."""
        config_path = temp_dir / ".shwrap.yaml"
        config_path.write_text("commands: {}")
        sub_dir = temp_dir / "a" / "b"
        sub_dir.mkdir(parents=True)

        loader = ConfigLoader(self._environment(sub_dir))

        assert loader.find_local_config() == config_path

    def test_nearest_config_wins(self, temp_dir):
        """A config closer to the working directory shadows the parent's."""
        (temp_dir / ".shwrap.yaml").write_text("commands: {}")
        sub_dir = temp_dir / "project"
        sub_dir.mkdir()
        nearest = sub_dir / ".shwrap.yaml"
        nearest.write_text("commands: {}")

        loader = ConfigLoader(self._environment(sub_dir))

        assert loader.find_config() == nearest

    def test_user_config_fallback(self, temp_dir):
        """Falls back to ~/.config/shwrap/default.yaml."""
        home = temp_dir / "home"
        user_config = home / ".config" / "shwrap" / "default.yaml"
        user_config.parent.mkdir(parents=True)
        user_config.write_text("commands: {}")
        work = temp_dir / "work"
        work.mkdir()

        loader = ConfigLoader(self._environment(work, home=home))

        assert loader.find_config() == user_config

    def test_user_config_honours_xdg(self, temp_dir):
        """XDG_CONFIG_HOME replaces ~/.config."""
        xdg = temp_dir / "xdg"
        user_config = xdg / "shwrap" / "default.yaml"
        user_config.parent.mkdir(parents=True)
        user_config.write_text("commands: {}")
        work = temp_dir / "work"
        work.mkdir()

        loader = ConfigLoader(
            self._environment(work, home=temp_dir, XDG_CONFIG_HOME=str(xdg))
        )

        assert loader.find_user_config() == user_config

    def test_nothing_found(self, temp_dir):
        """No config anywhere returns None and require_config raises."""
        loader = ConfigLoader(self._environment(temp_dir, home=temp_dir))

        assert loader.find_config() is None
        with pytest.raises(ConfigNotFoundError):
            loader.require_config()

    def test_explicit_path(self, temp_dir):
        """An explicit path skips discovery, relative to the working dir."""
        (temp_dir / ".shwrap.yaml").write_text("commands: {}")
        custom = temp_dir / "custom.yaml"
        custom.write_text("commands: {}")

        loader = ConfigLoader(self._environment(temp_dir), Path("custom.yaml"))

        assert loader.find_config() == custom

    def test_explicit_path_missing(self, temp_dir):
        """A missing explicit path is not silently replaced by discovery."""
        (temp_dir / ".shwrap.yaml").write_text("commands: {}")

        loader = ConfigLoader(self._environment(temp_dir), temp_dir / "missing.yaml")

        with pytest.raises(ConfigNotFoundError, match="missing.yaml"):
            loader.find_config()

    def test_load(self, temp_dir):
        """load returns the path and the parsed document."""
        config_path = temp_dir / ".shwrap.yaml"
        config_path.write_text("commands:\n  node:\n    enabled: false\n")

        path, document = ConfigLoader(self._environment(temp_dir)).load()

        assert path == config_path
        assert document.get_command("node").enabled is False

    def test_from_file_unreadable(self, temp_dir):
        """Read failures are parse errors carrying the path."""
        with pytest.raises(ConfigParseError) as exc_info:
            ConfigLoader.from_file(temp_dir / "absent.yaml")

        assert exc_info.value.path == temp_dir / "absent.yaml"
