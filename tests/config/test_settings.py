"""Tests for the settings configuration module."""

import json
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from scriptlayout.config import reset_settings
from scriptlayout.config.settings import (
    ScriptLayoutSettings,
    discover_config_files,
    get_settings,
    get_settings_for_cli,
    set_settings,
)
from scriptlayout.exceptions import ConfigurationError, GeometryError
from scriptlayout.formatter.models import LineKind


@pytest.fixture
def yaml_config(tmp_path):
    """Write a YAML config file and return its path."""

    def _write(data, name="layout.yaml"):
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path

    return _write


class TestDefaults:
    """Test default settings values."""

    def test_default_values(self):
        """Test defaults describe a US letter screenplay page."""
        settings = ScriptLayoutSettings()
        assert settings.debug is False
        assert settings.log_level == "WARNING"
        assert settings.log_format == "console"
        assert settings.log_file is None
        assert settings.page_width_inches == 8.5
        assert settings.page_height_inches == 11.0
        assert settings.margin_inches == 1.0
        assert settings.line_height_inches == 0.2
        assert settings.chars_per_inch == 10.0
        assert settings.indent_character == 2.5
        assert settings.html_theme == "hollywood"

    def test_to_geometry(self):
        """Test settings produce the matching page geometry."""
        geometry = ScriptLayoutSettings().to_geometry()
        assert geometry.usable_height == pytest.approx(9.0)
        assert geometry.indent_for(LineKind.DIALOGUE) == 1.5
        assert geometry.indent_for(LineKind.TRANSITION) == 5.5
        assert set(geometry.indents) == set(LineKind)


class TestValidation:
    """Test field validation and normalization."""

    @pytest.mark.parametrize(
        "field",
        [
            "page_height_inches",
            "margin_inches",
            "line_height_inches",
            "chars_per_inch",
        ],
    )
    def test_rejects_non_positive(self, field):
        """Test geometry values must be positive."""
        with pytest.raises(ValidationError):
            ScriptLayoutSettings(**{field: 0})

    def test_rejects_negative_indent(self):
        """Test indents may be zero but not negative."""
        assert ScriptLayoutSettings(indent_character=0).indent_character == 0
        with pytest.raises(ValidationError):
            ScriptLayoutSettings(indent_character=-1)

    def test_log_level_case_insensitive(self):
        """Test log levels are normalized to upper case."""
        assert ScriptLayoutSettings(log_level="debug").log_level == "DEBUG"

    def test_theme_case_insensitive(self):
        """Test themes are normalized to lower case."""
        assert ScriptLayoutSettings(html_theme="BBC").html_theme == "bbc"

    def test_unknown_theme(self):
        """Test unknown themes are refused."""
        with pytest.raises(ValidationError):
            ScriptLayoutSettings(html_theme="noir")

    def test_log_file_expanded(self, tmp_path, monkeypatch):
        """Test log file paths expand environment variables."""
        monkeypatch.setenv("LOG_DIR", str(tmp_path))
        settings = ScriptLayoutSettings(log_file="$LOG_DIR/layout.log")
        assert settings.log_file == (tmp_path / "layout.log").resolve()

    def test_unusable_geometry(self):
        """Test settings that pass field checks can still fail as a geometry."""
        settings = ScriptLayoutSettings(margin_inches=5.5)
        with pytest.raises(GeometryError):
            settings.to_geometry()


class TestEnvironment:
    """Test environment variable loading."""

    def test_env_override(self, monkeypatch):
        """Test prefixed environment variables override defaults."""
        monkeypatch.setenv("SCRIPTLAYOUT_MARGIN_INCHES", "1.25")
        monkeypatch.setenv("SCRIPTLAYOUT_HTML_THEME", "short")
        settings = ScriptLayoutSettings.from_env()
        assert settings.margin_inches == 1.25
        assert settings.html_theme == "short"

    def test_env_file(self, tmp_path):
        """Test values are read from an explicit .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("SCRIPTLAYOUT_CHARS_PER_INCH=12\n", encoding="utf-8")
        settings = ScriptLayoutSettings.from_multiple_sources(env_file=env_file)
        assert settings.chars_per_inch == 12.0


class TestConfigFiles:
    """Test loading settings from files."""

    def test_yaml(self, yaml_config):
        """Test YAML config files."""
        path = yaml_config({"margin_inches": 0.75, "html_theme": "bbc"})
        settings = ScriptLayoutSettings.from_file(path)
        assert settings.margin_inches == 0.75
        assert settings.html_theme == "bbc"

    def test_toml(self, tmp_path):
        """Test TOML config files."""
        path = tmp_path / "layout.toml"
        path.write_text("page_height_inches = 14.0\n", encoding="utf-8")
        assert ScriptLayoutSettings.from_file(path).page_height_inches == 14.0

    def test_json(self, tmp_path):
        """Test JSON config files."""
        path = tmp_path / "layout.json"
        path.write_text(json.dumps({"line_height_inches": 0.25}), encoding="utf-8")
        assert ScriptLayoutSettings.from_file(path).line_height_inches == 0.25

    def test_empty_yaml(self, tmp_path):
        """Test an empty YAML file yields defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert ScriptLayoutSettings.from_file(path).margin_inches == 1.0

    def test_unsupported_format(self, tmp_path):
        """Test unknown file extensions raise a configuration error."""
        path = tmp_path / "layout.ini"
        path.write_text("[layout]\n", encoding="utf-8")
        with pytest.raises(ConfigurationError) as exc_info:
            ScriptLayoutSettings.from_file(path)
        assert exc_info.value.details["detected_format"] == ".ini"

    def test_non_mapping(self, tmp_path):
        """Test a file holding a list is refused."""
        path = tmp_path / "layout.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            ScriptLayoutSettings.from_file(path)

    def test_misspelled_key(self, yaml_config):
        """Test common key mistakes get a correcting hint."""
        path = yaml_config({"margin": 1.5})
        with pytest.raises(ConfigurationError) as exc_info:
            ScriptLayoutSettings.from_file(path)
        assert "margin_inches" in exc_info.value.hint

    def test_missing_file(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            ScriptLayoutSettings.from_file(tmp_path / "missing.yaml")


class TestPrecedence:
    """Test merging of settings sources."""

    def test_file_beats_environment(self, yaml_config, monkeypatch):
        """Test config files override environment variables."""
        monkeypatch.setenv("SCRIPTLAYOUT_MARGIN_INCHES", "1.5")
        path = yaml_config({"margin_inches": 0.5})
        settings = ScriptLayoutSettings.from_multiple_sources(config_files=[path])
        assert settings.margin_inches == 0.5

    def test_later_file_wins(self, yaml_config):
        """Test later files override earlier ones."""
        first = yaml_config({"margin_inches": 0.5, "chars_per_inch": 12}, "a.yaml")
        second = yaml_config({"margin_inches": 0.75}, "b.yaml")
        settings = ScriptLayoutSettings.from_multiple_sources(
            config_files=[first, second]
        )
        assert settings.margin_inches == 0.75
        assert settings.chars_per_inch == 12

    def test_environment_does_not_mask_earlier_file(self, yaml_config, monkeypatch):
        """Test env values never override a file that set the same key."""
        monkeypatch.setenv("SCRIPTLAYOUT_MARGIN_INCHES", "1.5")
        first = yaml_config({"margin_inches": 0.5}, "a.yaml")
        second = yaml_config({"chars_per_inch": 12}, "b.yaml")
        settings = ScriptLayoutSettings.from_multiple_sources(
            config_files=[first, second]
        )
        assert settings.margin_inches == 0.5

    def test_cli_beats_file(self, yaml_config):
        """Test CLI arguments override files, ignoring None values."""
        path = yaml_config({"html_theme": "bbc", "margin_inches": 0.5})
        settings = ScriptLayoutSettings.from_multiple_sources(
            config_files=[path],
            cli_args={"html_theme": "short", "margin_inches": None},
        )
        assert settings.html_theme == "short"
        assert settings.margin_inches == 0.5

    def test_missing_file_skipped(self, tmp_path):
        """Test missing files in the list fall back to defaults."""
        settings = ScriptLayoutSettings.from_multiple_sources(
            config_files=[tmp_path / "missing.yaml"]
        )
        assert settings.margin_inches == 1.0


class TestDiscovery:
    """Test locating config files in the user and project directories."""

    def test_finds_user_then_project(self, tmp_path):
        """Test user files come before project files."""
        home = tmp_path / "home"
        project = tmp_path / "project"
        user_config = home / ".config" / "scriptlayout" / "config.yaml"
        user_config.parent.mkdir(parents=True)
        user_config.write_text("margin_inches: 0.5\n", encoding="utf-8")
        project.mkdir()
        project_config = project / "scriptlayout.toml"
        project_config.write_text("margin_inches = 0.75\n", encoding="utf-8")

        found = discover_config_files(home=home, cwd=project)
        assert found == [user_config, project_config]
        settings = ScriptLayoutSettings.from_multiple_sources(config_files=found)
        assert settings.margin_inches == 0.75

    def test_nothing_found(self, tmp_path):
        """Test empty directories yield no files."""
        assert discover_config_files(home=tmp_path, cwd=tmp_path) == []


class TestGlobalSettings:
    """Test the cached global settings instance."""

    def test_cached(self):
        """Test get_settings returns the same instance until reset."""
        first = get_settings()
        assert get_settings() is first
        reset_settings()
        assert get_settings() is not first

    def test_set_settings(self):
        """Test an explicit instance replaces the global one."""
        custom = ScriptLayoutSettings(html_theme="bbc")
        set_settings(custom)
        assert get_settings() is custom


class TestSettingsForCli:
    """Test settings resolution for CLI commands."""

    def test_overrides(self):
        """Test CLI overrides apply on top of the global settings."""
        settings = get_settings_for_cli(cli_overrides={"html_theme": "short"})
        assert settings.html_theme == "short"

    def test_none_overrides_ignored(self):
        """Test None overrides leave settings untouched."""
        assert get_settings_for_cli(cli_overrides={"html_theme": None}) is (
            get_settings()
        )

    def test_config_file(self, yaml_config):
        """Test an explicit config file is loaded."""
        path = yaml_config({"page_height_inches": 14.0})
        settings = get_settings_for_cli(config_file=path)
        assert settings.page_height_inches == 14.0

    def test_missing_config_file(self, tmp_path):
        """Test a missing explicit config file is an error."""
        with pytest.raises(FileNotFoundError):
            get_settings_for_cli(config_file=Path(tmp_path / "missing.yaml"))
