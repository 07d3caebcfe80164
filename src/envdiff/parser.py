"""Parsing of ``.env`` style files into ordered, read-only mappings.

Each non-blank, non-comment line is split on its first ``=``. Lines without
an ``=`` are ignored. One layer of matching single or double quotes is
removed from values. When a key repeats, the last occurrence wins.
"""

import logging
from pathlib import Path
from types import MappingProxyType

from .exceptions import EnvFileError, EnvFileNotFoundError
from .models import ConfigMap

logger = logging.getLogger(__name__)

_QUOTES = ('"', "'")


def strip_quotes(value: str) -> str:
    """Remove one layer of matching quotes wrapping a value.

    Args:
        value: Trimmed raw value

    Returns:
        The unquoted value, or the value unchanged if it is not wrapped
    """
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        return value[1:-1]
    return value


def parse_env_text(content: str) -> ConfigMap:
    """Parse env file content into a ConfigMap.

    Args:
        content: Full text of an env file

    Returns:
        Read-only mapping of key to value in first-seen key order
    """
    variables: dict[str, str] = {}

    for line_number, raw_line in enumerate(content.split("\n"), start=1):
        line = raw_line.strip()

        if not line or line.startswith("#"):
            continue

        key, sep, value = line.partition("=")
        if not sep:
            logger.debug(f"Skipping line {line_number}: no '=' found")
            continue

        key = key.strip()
        if not key:
            logger.debug(f"Skipping line {line_number}: empty key")
            continue

        if key in variables:
            logger.debug(f"Line {line_number} overrides earlier value of {key}")

        variables[key] = strip_quotes(value.strip())

    return MappingProxyType(variables)


def parse_env_file(file_path: str | Path) -> ConfigMap:
    """Read and parse an env file.

    Args:
        file_path: Path to the env file

    Returns:
        Read-only mapping of key to value in first-seen key order

    Raises:
        EnvFileNotFoundError: If the file does not exist
        EnvFileError: If the file cannot be read or is not valid UTF-8
    """
    file_path = Path(file_path)

    if not file_path.is_file():
        raise EnvFileNotFoundError(f"File not found: {file_path}", file_path)

    try:
        content = file_path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise EnvFileError(
            f"File is not valid UTF-8: {file_path}", file_path, {"reason": str(e)}
        ) from e
    except OSError as e:
        raise EnvFileError(f"Failed to read {file_path}: {e}", file_path) from e

    variables = parse_env_text(content)
    logger.debug(f"Parsed {len(variables)} variables from {file_path}")
    return variables
