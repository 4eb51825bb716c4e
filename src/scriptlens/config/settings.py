"""scriptlens configuration settings."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any, cast

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scriptlens.exceptions import (
    ConfigurationError,
    ScriptLensFileNotFoundError,
    check_config_keys,
)


class ScriptLensSettings(BaseSettings):
    """scriptlens configuration settings.

    Settings are loaded with the following precedence (highest to lowest):
    1. CLI arguments (when provided via command flags)
       Example: scriptlens save draft.fountain --store ./archive

    2. Config file values (YAML, TOML, or JSON)
       Example: scriptlens scenes draft.fountain --config myconfig.yaml
       Multiple files: Later files override earlier ones

    3. Environment variables (prefixed with SCRIPTLENS_)
       Example: export SCRIPTLENS_LOG_LEVEL=DEBUG

    4. .env file (in current directory or specified path)

    5. Default values (defined in field declarations below)
    """

    model_config = SettingsConfigDict(
        env_prefix="SCRIPTLENS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage settings
    storage_path: Path = Field(
        default_factory=lambda: Path.cwd() / ".scriptlens",
        description="Directory holding the JSON scene and character stores",
    )

    # Output settings
    output_format: str = Field(
        default="table",
        description="Default CLI output format (table, json, csv, markdown)",
        pattern="^(?i)(table|json|csv|markdown)$",
    )

    # Debug settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    # Logging settings
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        pattern="^(?i)(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="console",
        description="Log output format (console, json, structured)",
        pattern="^(?i)(console|json|structured)$",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file path",
    )

    @field_validator("storage_path", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Path | None:
        """Expand environment variables and ``~`` and resolve the path."""
        if v is None:
            return None
        if isinstance(v, str):
            expanded = os.path.expandvars(v)
            return Path(expanded).expanduser().resolve()
        if isinstance(v, Path):
            return v.expanduser().resolve()
        if isinstance(v, (dict, list, set, tuple)):  # noqa: UP038
            raise ValueError(
                f"Path fields cannot accept {type(v).__name__} types. "
                f"Expected str or Path, got: {v!r}"
            )
        return Path(str(v)).resolve()

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Normalize log level to uppercase for case-insensitive handling."""
        if isinstance(v, str):
            return v.upper()
        raise ValueError(f"log_level must be a string, got {type(v).__name__}")

    @field_validator("log_format", "output_format", mode="before")
    @classmethod
    def normalize_lowercase(cls, v: Any) -> str:
        """Normalize format names to lowercase."""
        if isinstance(v, str):
            return v.lower()
        raise ValueError(f"format must be a string, got {type(v).__name__}")

    @classmethod
    def from_env(cls) -> ScriptLensSettings:
        """Create settings from environment variables."""
        return cls()

    @classmethod
    def from_file(cls, config_path: Path | str) -> ScriptLensSettings:
        """Load settings from a configuration file.

        Args:
            config_path: Path to configuration file (YAML, TOML, or JSON).

        Returns:
            Settings loaded from the file.

        Raises:
            ConfigurationError: If file format is not supported.
            FileNotFoundError: If config file doesn't exist.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        suffix = config_path.suffix.lower()

        if suffix in {".yml", ".yaml"}:
            with config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        elif suffix == ".toml":
            with config_path.open("rb") as f:
                data = tomllib.load(f)
        elif suffix == ".json":
            with config_path.open(encoding="utf-8") as f:
                data = json.load(f)
        else:
            raise ConfigurationError(
                message=f"Unsupported configuration file format: {suffix}",
                hint="Use one of the supported formats: .yml, .yaml, .toml, or .json",
                details={
                    "file": str(config_path),
                    "detected_format": suffix,
                    "supported_formats": [".yml", ".yaml", ".toml", ".json"],
                },
            )

        check_config_keys(data)

        return cls(**data)

    @classmethod
    def from_multiple_sources(
        cls,
        config_files: list[Path | str] | None = None,
        env_file: Path | str | None = None,
        cli_args: dict[str, Any] | None = None,
    ) -> ScriptLensSettings:
        """Load settings with proper precedence from multiple sources.

        Precedence (highest to lowest): CLI arguments, config files (last file
        wins), environment variables, .env file, defaults.

        Args:
            config_files: List of config files to load (later files override earlier).
            env_file: Path to .env file (default: .env in current directory).
            cli_args: Dictionary of CLI arguments.

        Returns:
            Merged settings from all sources.
        """
        data: dict[str, Any] = {}

        for config_file in config_files or []:
            try:
                file_settings = cls.from_file(config_file)
            except FileNotFoundError:
                # Imported here to avoid a cycle with the logging module
                from scriptlens.config.logging import get_logger as _get_logger

                _get_logger("scriptlens.config.settings").warning(
                    "Configuration file not found, using defaults",
                    config_file=str(config_file),
                )
                continue
            data.update(file_settings.model_dump(exclude_unset=True))

        if env_file:
            settings = cast(
                "ScriptLensSettings", cast(Any, cls)(_env_file=env_file, **data)
            )
        else:
            settings = cls(**data)

        if cli_args:
            cli_data = {k: v for k, v in cli_args.items() if v is not None}
            if cli_data:
                updated_data = settings.model_dump()
                updated_data.update(cli_data)
                settings = cls(**updated_data)

        return settings


# Global settings instance
_settings: ScriptLensSettings | None = None


def _get_config_paths() -> list[Path | str]:
    """Get existing config file paths in priority order (later overrides)."""
    potential_paths = [
        Path.home() / ".config" / "scriptlens" / "config.yaml",
        Path.home() / ".config" / "scriptlens" / "config.toml",
        Path.home() / ".config" / "scriptlens" / "config.json",
        Path.cwd() / "scriptlens.yaml",
        Path.cwd() / "scriptlens.toml",
        Path.cwd() / "scriptlens.json",
    ]

    existing_paths: list[Path | str] = []
    for path in potential_paths:
        try:
            if path.is_file():
                existing_paths.append(path)
        except OSError:
            continue
    return existing_paths


def get_settings() -> ScriptLensSettings:
    """Get the global settings instance.

    Returns:
        Global ScriptLensSettings instance, loaded on first access from the
        standard config locations and the environment.
    """
    global _settings
    if _settings is None:
        config_paths = _get_config_paths()
        if config_paths:
            _settings = ScriptLensSettings.from_multiple_sources(
                config_files=config_paths
            )
        else:
            _settings = ScriptLensSettings.from_env()
    return _settings


def set_settings(settings: ScriptLensSettings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Forget the global settings so the next access re-reads all sources."""
    global _settings
    _settings = None


def get_settings_for_cli(
    config_file: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> ScriptLensSettings:
    """Get settings for CLI commands with consistent precedence.

    Args:
        config_file: Optional specific config file to load. If not provided,
                    uses standard config locations.
        cli_overrides: Dictionary of CLI argument overrides (e.g., storage_path).
                      Only non-None values are applied.

    Returns:
        ScriptLensSettings instance with all sources merged.

    Raises:
        ScriptLensFileNotFoundError: If config_file is specified but does not
            exist.
    """
    if config_file:
        if not config_file.exists():
            raise ScriptLensFileNotFoundError(
                message=f"Config file not found: {config_file}",
                hint="Check the path passed to --config",
                details={"path": str(config_file)},
            )
        return ScriptLensSettings.from_multiple_sources(
            config_files=[config_file],
            cli_args=cli_overrides,
        )

    settings = get_settings()
    filtered = {k: v for k, v in (cli_overrides or {}).items() if v is not None}
    if filtered:
        data = settings.model_dump()
        data.update(filtered)
        settings = ScriptLensSettings(**data)
    return settings
