"""Runtime settings for the envdiff command-line tools.

Settings are resolved in layers, each overriding the previous one:
1. Default values from the settings model
2. ``ENVDIFF_*`` environment variables
3. Settings file (YAML), given explicitly or discovered
4. Explicit overrides, typically command-line flags

Example settings file (``.envdiff.yaml``):

    show_values: false
    strict: true
    output_format: json
    placeholder: CHANGE_ME
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import SettingsFileError, SettingsValidationError
from .models import LogLevel, OutputFormat

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = ".envdiff.yaml"


class EnvdiffSettings(BaseSettings):
    """Defaults for the compare and template commands.

    Environment variables:
    - ENVDIFF_SHOW_VALUES: Show real values instead of masked ones (default: false)
    - ENVDIFF_STRICT: Treat any difference as a failure (default: false)
    - ENVDIFF_OUTPUT_FORMAT: text, json or visual (default: text)
    - ENVDIFF_USE_COLOR: Emit ANSI colors in text output (default: true)
    - ENVDIFF_LOG_LEVEL: Logging level (default: WARNING)
    - ENVDIFF_PLACEHOLDER: Placeholder used for every templated value
    - ENVDIFF_PRESERVE_COMMENTS: Keep comments in templates (default: true)
    """

    show_values: bool = Field(
        default=False, description="Show real values instead of masked ones"
    )
    strict: bool = Field(
        default=False, description="Exit with a failure status on any difference"
    )
    output_format: OutputFormat = Field(
        default=OutputFormat.TEXT, description="Rendering used for comparisons"
    )
    use_color: bool = Field(
        default=True, description="Emit ANSI color codes in text output"
    )
    log_level: LogLevel = Field(default=LogLevel.WARNING, description="Logging level")
    placeholder: str | None = Field(
        default=None,
        description="Explicit placeholder for every value in generated templates",
    )
    preserve_comments: bool = Field(
        default=True, description="Copy comment lines into generated templates"
    )

    model_config = SettingsConfigDict(
        env_prefix="ENVDIFF_",
        case_sensitive=False,
        extra="ignore",
    )


def find_settings_file(filename: str = SETTINGS_FILENAME) -> Path | None:
    """Find a settings file in standard locations.

    Search order:
    1. Current working directory
    2. ENVDIFF_CONFIG_PATH environment variable (file or directory)
    3. ~/.config/envdiff/

    Args:
        filename: Settings filename to search for

    Returns:
        Path to the first settings file found, or None
    """
    search_paths = [Path.cwd() / filename]

    env_path_str = os.getenv("ENVDIFF_CONFIG_PATH")
    if env_path_str:
        env_path = Path(env_path_str)
        if env_path.is_file():
            search_paths.append(env_path)
        else:
            search_paths.append(env_path / filename)

    search_paths.append(Path.home() / ".config" / "envdiff" / filename)

    for path in search_paths:
        if path.is_file():
            return path

    return None


def read_settings_file(config_path: str | Path) -> dict[str, Any]:
    """Read a YAML settings file into a dictionary.

    Raises:
        SettingsFileError: If the file is missing, unreadable, or not a mapping
    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise SettingsFileError(f"Settings file not found: {config_path}", config_path)

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SettingsFileError(
            f"Failed to parse YAML settings: {e}", config_path
        ) from e
    except OSError as e:
        raise SettingsFileError(
            f"Failed to read settings file: {e}", config_path
        ) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise SettingsFileError(
            f"Settings file must contain a mapping at the root level: {config_path}",
            config_path,
        )

    return data


def load_settings(
    config_path: str | Path | None = None,
    auto_discover: bool = True,
    **overrides: Any,
) -> EnvdiffSettings:
    """Resolve settings from defaults, environment, settings file and overrides.

    Args:
        config_path: Explicit settings file path
        auto_discover: Search standard locations when no path is given
        **overrides: Values that win over every other source; None is ignored

    Returns:
        Resolved settings

    Raises:
        SettingsFileError: If the settings file cannot be read or parsed
        SettingsValidationError: If any value is invalid
    """
    if config_path is None and auto_discover:
        config_path = find_settings_file()

    file_data: dict[str, Any] = {}
    if config_path is not None:
        file_data = read_settings_file(config_path)
        logger.debug(f"Loaded settings file {config_path}")

    explicit = {name: value for name, value in overrides.items() if value is not None}

    try:
        settings = EnvdiffSettings(**{**file_data, **explicit})
    except ValidationError as e:
        raise SettingsValidationError(
            f"Invalid settings: {e}", validation_errors=e.errors()
        ) from e

    return settings


def configure_logging(level: LogLevel | str) -> None:
    """Configure root logging for command-line use.

    Log records go to stderr so that command output on stdout stays clean.
    """
    level_name = level.value if isinstance(level, LogLevel) else str(level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
