"""Compare .env files and scaffold new ones from templates.

This package provides:
- Parsing of ``KEY=value`` env files into ordered, read-only mappings
- Comparison of two env files into missing, extra and different keys
- Template generation that swaps real values for safe placeholders
- JSON, text and visual rendering of comparisons

Example usage:
    from envdiff import compare_env_files, format_diff

    comparison = compare_env_files(".env.example", ".env")
    print(format_diff(comparison))
"""

from .compare import compare_env_files, compare_env_maps
from .exceptions import (
    EnvdiffError,
    EnvFileError,
    EnvFileNotFoundError,
    SettingsError,
    SettingsFileError,
    SettingsValidationError,
    TemplateError,
    TemplateSourceNotFoundError,
    TemplateTargetExistsError,
)
from .formatter import format_diff, format_json, format_text, format_visual, mask_value
from .models import (
    ConfigMap,
    DiffCategory,
    DiffResult,
    EnvComparison,
    LineKind,
    LogLevel,
    OutputFormat,
    TemplateLine,
)
from .parser import parse_env_file, parse_env_text
from .settings import EnvdiffSettings, load_settings
from .template import (
    classify_line,
    generate_from_template,
    is_placeholder,
    render_template,
    suggest_placeholder,
)

__all__ = [
    # Models
    "ConfigMap",
    "DiffCategory",
    "DiffResult",
    "EnvComparison",
    # Exceptions
    "EnvFileError",
    "EnvFileNotFoundError",
    "EnvdiffError",
    # Settings
    "EnvdiffSettings",
    "LineKind",
    "LogLevel",
    "OutputFormat",
    "SettingsError",
    "SettingsFileError",
    "SettingsValidationError",
    "TemplateError",
    "TemplateLine",
    "TemplateSourceNotFoundError",
    "TemplateTargetExistsError",
    # Operations
    "classify_line",
    "compare_env_files",
    "compare_env_maps",
    "format_diff",
    "format_json",
    "format_text",
    "format_visual",
    "generate_from_template",
    "is_placeholder",
    "load_settings",
    "mask_value",
    "parse_env_file",
    "parse_env_text",
    "render_template",
    "suggest_placeholder",
]
