"""Comparison of two parsed env files."""

import logging
from pathlib import Path

from .models import ConfigMap, DiffResult, EnvComparison
from .parser import parse_env_file

logger = logging.getLogger(__name__)


def compare_env_maps(first: ConfigMap, second: ConfigMap) -> DiffResult:
    """Classify the keys of two ConfigMaps.

    Values are compared as exact strings. Each output sequence keeps the
    iteration order of the map it was taken from.

    Args:
        first: Baseline mapping
        second: Mapping compared against the baseline

    Returns:
        DiffResult with keys missing from ``second``, extra in ``second``,
        and present in both with different values
    """
    missing: list[str] = []
    different: list[str] = []
    extra: list[str] = []

    for key, value in first.items():
        if key not in second:
            missing.append(key)
        elif second[key] != value:
            different.append(key)

    for key in second:
        if key not in first:
            extra.append(key)

    return DiffResult(
        missing=tuple(missing), extra=tuple(extra), different=tuple(different)
    )


def compare_env_files(
    first_path: str | Path, second_path: str | Path
) -> EnvComparison:
    """Parse two env files and compare them.

    Raises:
        EnvFileNotFoundError: If either file does not exist
        EnvFileError: If either file cannot be read
    """
    first = parse_env_file(first_path)
    second = parse_env_file(second_path)

    comparison = EnvComparison(
        first_path=str(first_path),
        second_path=str(second_path),
        first=first,
        second=second,
        diff=compare_env_maps(first, second),
    )
    logger.info(f"Compared env files: {comparison.summary()}")
    return comparison
