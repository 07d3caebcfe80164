"""Data models shared by the parser, comparator, template generator and formatter.

- ConfigMap: read-only ordered mapping of variable name to string value
- DiffResult: missing/extra/different classification of two ConfigMaps
- EnvComparison: a DiffResult bundled with the maps and paths it came from
- TemplateLine: classification of a single template source line
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

ConfigMap = Mapping[str, str]


class LogLevel(str, Enum):
    """Supported logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class OutputFormat(str, Enum):
    """Renderings available for a comparison."""

    TEXT = "text"
    JSON = "json"
    VISUAL = "visual"


class DiffCategory(str, Enum):
    """Categories a key can fall into when two env files are compared."""

    MISSING = "missing"
    EXTRA = "extra"
    DIFFERENT = "different"


class LineKind(Enum):
    """Kinds of lines found in a template source file."""

    BLANK = "blank"
    COMMENT = "comment"
    ASSIGNMENT = "assignment"
    OTHER = "other"


@dataclass(frozen=True)
class DiffResult:
    """Key-level differences between two env files.

    Only key names are held; values are looked up in the source maps by
    whoever needs them.
    """

    missing: tuple[str, ...] = ()
    extra: tuple[str, ...] = ()
    different: tuple[str, ...] = ()

    @property
    def has_differences(self) -> bool:
        return bool(self.missing or self.extra or self.different)

    @property
    def total(self) -> int:
        return len(self.missing) + len(self.extra) + len(self.different)

    def keys_for(self, category: DiffCategory) -> tuple[str, ...]:
        """Return the keys recorded under a category."""
        return getattr(self, category.value)  # type: ignore[no-any-return]

    def to_dict(self) -> dict[str, list[str]]:
        """Return the JSON-serializable form of the result."""
        return {
            "missing": list(self.missing),
            "extra": list(self.extra),
            "different": list(self.different),
        }


@dataclass(frozen=True)
class EnvComparison:
    """A comparison of two env files with the data needed to render it."""

    first_path: str
    second_path: str
    first: ConfigMap
    second: ConfigMap
    diff: DiffResult

    def summary(self) -> dict[str, Any]:
        """Get counts per category for logging."""
        return {
            "first": self.first_path,
            "second": self.second_path,
            "missing": len(self.diff.missing),
            "extra": len(self.diff.extra),
            "different": len(self.diff.different),
        }


@dataclass(frozen=True)
class TemplateLine:
    """A single classified line of a template source file."""

    kind: LineKind
    raw: str
    key: str = ""
    value: str = ""
