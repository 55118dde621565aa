"""scriptlayout configuration settings."""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scriptlayout.exceptions import ConfigurationError, check_config_keys

if TYPE_CHECKING:
    from scriptlayout.formatter.models import PageGeometry


def _load_yaml(path: Path) -> Any:
    with path.open(encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _load_toml(path: Path) -> Any:
    with path.open("rb") as f:
        return tomllib.load(f)


def _load_json(path: Path) -> Any:
    with path.open(encoding="utf-8") as f:
        return json.load(f)


CONFIG_LOADERS: dict[str, Callable[[Path], Any]] = {
    ".yaml": _load_yaml,
    ".yml": _load_yaml,
    ".toml": _load_toml,
    ".json": _load_json,
}

# Searched in order; values in later files win
CONFIG_SEARCH_PATHS: tuple[tuple[str, str], ...] = (
    ("home", ".config/scriptlayout/config.yaml"),
    ("home", ".config/scriptlayout/config.toml"),
    ("home", ".config/scriptlayout/config.json"),
    ("cwd", "scriptlayout.yaml"),
    ("cwd", "scriptlayout.toml"),
    ("cwd", "scriptlayout.json"),
)


class ScriptLayoutSettings(BaseSettings):
    """scriptlayout configuration settings.

    Sources, highest precedence first:

    1. CLI flags such as ``--theme``
    2. Config files (YAML, TOML or JSON), later files overriding earlier ones
    3. ``SCRIPTLAYOUT_``-prefixed environment variables,
       e.g. ``SCRIPTLAYOUT_MARGIN_INCHES=1.25``
    4. A ``.env`` file
    5. The defaults below, which describe a US letter page set in Courier 12pt
    """

    model_config = SettingsConfigDict(
        env_prefix="SCRIPTLAYOUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="console",
        description="Log output format (console, json, structured)",
        pattern="^(console|json|structured)$",
    )
    log_file: Path | None = Field(default=None, description="Optional log file")

    page_width_inches: float = Field(default=8.5, gt=0)
    page_height_inches: float = Field(default=11.0, gt=0)
    margin_inches: float = Field(
        default=1.0, gt=0, description="Margin applied to every page edge"
    )
    line_height_inches: float = Field(
        default=0.2, gt=0, description="Height of one text row"
    )
    chars_per_inch: float = Field(
        default=10.0, gt=0, description="Monospace characters per inch for wrapping"
    )

    # Indents are measured from the left margin
    indent_scene_heading: float = Field(default=0.0, ge=0)
    indent_action: float = Field(default=0.0, ge=0)
    indent_character: float = Field(default=2.5, ge=0)
    indent_parenthetical: float = Field(default=2.0, ge=0)
    indent_dialogue: float = Field(default=1.5, ge=0)
    indent_transition: float = Field(default=5.5, ge=0)
    indent_empty: float = Field(default=0.0, ge=0)

    html_theme: str = Field(
        default="hollywood",
        description="HTML theme (hollywood, cinematic, bbc, short)",
        pattern="^(hollywood|cinematic|bbc|short)$",
    )

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_log_file(cls, v: Any) -> Path | None:
        """Expand ``~`` and environment variables in the log file path."""
        if v is None:
            return None
        if isinstance(v, Path):
            return v.resolve()
        if isinstance(v, str):
            return Path(os.path.expandvars(v)).expanduser().resolve()
        raise ValueError(f"log_file must be a string or Path, got {type(v).__name__}")

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_case_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @field_validator("log_format", "html_theme", mode="before")
    @classmethod
    def lower_case_choice(cls, v: Any) -> Any:
        return v.lower() if isinstance(v, str) else v

    def to_geometry(self) -> PageGeometry:
        """Build the page geometry described by these settings.

        Raises:
            GeometryError: If the values pass field checks but cannot hold a
                layout, e.g. margins larger than half the page.
        """
        from scriptlayout.formatter.models import LineKind, PageGeometry

        return PageGeometry(
            margin_inches=self.margin_inches,
            page_height_inches=self.page_height_inches,
            line_height_inches=self.line_height_inches,
            indents={
                kind: getattr(self, f"indent_{kind.name.lower()}")
                for kind in LineKind
            },
            page_width_inches=self.page_width_inches,
            chars_per_inch=self.chars_per_inch,
        )

    @classmethod
    def from_env(cls) -> ScriptLayoutSettings:
        """Settings from the environment, the .env file and defaults only."""
        return cls()

    @staticmethod
    def read_config_file(config_path: Path | str) -> dict[str, Any]:
        """Return the settings written in a config file, unvalidated.

        Raises:
            ConfigurationError: If the format is unsupported, the file does not
                hold a mapping, or a key is a known misspelling.
            FileNotFoundError: If the file does not exist.
        """
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        loader = CONFIG_LOADERS.get(path.suffix.lower())
        if loader is None:
            raise ConfigurationError(
                message=f"Unsupported configuration file format: {path.suffix}",
                hint="Use a .yaml, .yml, .toml or .json file",
                details={
                    "file": str(path),
                    "detected_format": path.suffix.lower(),
                    "supported_formats": sorted(CONFIG_LOADERS),
                },
            )

        data = loader(path)
        if not isinstance(data, dict):
            raise ConfigurationError(
                message="Configuration file must contain a mapping of settings",
                hint="Write one 'key: value' pair per setting",
                details={"file": str(path), "found": type(data).__name__},
            )
        check_config_keys(data)
        return data

    @classmethod
    def from_file(cls, config_path: Path | str) -> ScriptLayoutSettings:
        """Settings from one config file layered over the environment."""
        return cls(**cls.read_config_file(config_path))

    @classmethod
    def from_multiple_sources(
        cls,
        config_files: list[Path] | None = None,
        env_file: Path | str | None = None,
        cli_args: dict[str, Any] | None = None,
    ) -> ScriptLayoutSettings:
        """Merge every settings source in precedence order.

        Missing config files are skipped with a warning. ``None`` values in
        ``cli_args`` mean "flag not given" and are ignored.
        """
        file_values: dict[str, Any] = {}
        for config_file in config_files or []:
            try:
                file_values.update(cls.read_config_file(config_file))
            except FileNotFoundError:
                from scriptlayout.config.logging import get_logger

                get_logger(__name__).warning(
                    "Configuration file not found, skipping",
                    config_file=str(config_file),
                )

        overrides = {k: v for k, v in (cli_args or {}).items() if v is not None}
        values = {**file_values, **overrides}
        if env_file is not None:
            return cls(_env_file=env_file, **values)  # type: ignore[call-arg]
        return cls(**values)


def discover_config_files(
    home: Path | None = None, cwd: Path | None = None
) -> list[Path]:
    """Config files present in the user and project locations."""
    roots = {"home": home or Path.home(), "cwd": cwd or Path.cwd()}
    found = []
    for root, relative in CONFIG_SEARCH_PATHS:
        candidate = roots[root] / relative
        if candidate.is_file():
            found.append(candidate)
    return found


_settings: ScriptLayoutSettings | None = None


def get_settings() -> ScriptLayoutSettings:
    """Process-wide settings, loaded on first use and cached."""
    global _settings
    if _settings is None:
        _settings = ScriptLayoutSettings.from_multiple_sources(
            config_files=discover_config_files()
        )
    return _settings


def set_settings(settings: ScriptLayoutSettings) -> None:
    """Replace the process-wide settings."""
    global _settings
    _settings = settings


def clear_settings_cache() -> None:
    """Make the next get_settings() call reload every source."""
    global _settings
    _settings = None


def get_settings_for_cli(
    config_file: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> ScriptLayoutSettings:
    """Settings for one CLI command.

    Args:
        config_file: Explicit ``--config`` file; replaces the discovered files.
        cli_overrides: Flag values keyed by setting name; ``None`` means unset.

    Raises:
        FileNotFoundError: If ``config_file`` does not exist.
    """
    if config_file is not None:
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
        return ScriptLayoutSettings.from_multiple_sources(
            config_files=[config_file], cli_args=cli_overrides
        )

    settings = get_settings()
    overrides = {k: v for k, v in (cli_overrides or {}).items() if v is not None}
    if not overrides:
        return settings
    return ScriptLayoutSettings(**{**settings.model_dump(), **overrides})
