"""Rendering of env file comparisons as JSON, plain text or a visual report."""

import json

from .models import ConfigMap, DiffCategory, DiffResult, EnvComparison, OutputFormat

RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
CYAN = "\x1b[36m"
GRAY = "\x1b[90m"
BOLD = "\x1b[1m"
RESET = "\x1b[0m"

RULE_WIDTH = 60

TEXT_HEADINGS = {
    DiffCategory.MISSING: "Missing variables (in first file but not second):",
    DiffCategory.EXTRA: "Extra variables (in second file but not first):",
    DiffCategory.DIFFERENT: "Different values:",
}


def mask_value(value: str) -> str:
    """Mask a value for safe display.

    Values of four characters or fewer become ``***``; longer values keep
    their first and last two characters.
    """
    if len(value) <= 4:
        return "***"
    return value[:2] + "***" + value[-2:]


def format_json(diff: DiffResult) -> str:
    """Render a DiffResult as a JSON document."""
    return json.dumps(diff.to_dict(), indent=2, ensure_ascii=False)


def _display(values: ConfigMap, key: str, show_values: bool) -> str:
    value = values.get(key, "")
    return value if show_values else mask_value(value)


def format_text(
    comparison: EnvComparison, show_values: bool = False, use_color: bool = True
) -> str:
    """Render a comparison as a compact text listing grouped by category.

    Args:
        comparison: Comparison to render
        show_values: Print real values instead of key names or masked values
        use_color: Wrap headings and entries in ANSI color codes

    Returns:
        Report text
    """

    def c(color: str, text: str) -> str:
        return f"{color}{text}{RESET}" if use_color else text

    diff = comparison.diff
    lines: list[str] = []

    single_sided = (
        (DiffCategory.MISSING, RED, "-", comparison.first),
        (DiffCategory.EXTRA, YELLOW, "+", comparison.second),
    )
    for category, color, marker, values in single_sided:
        keys = diff.keys_for(category)
        if not keys:
            continue
        lines.append(c(color, TEXT_HEADINGS[category]))
        for key in keys:
            if show_values:
                value = values.get(key, "")
                lines.append(f"  {c(color, f'{marker} {key}={value}')}")
            else:
                lines.append(f"  {c(color, f'{marker} {key}')}")
        lines.append("")

    if diff.different:
        lines.append(c(BLUE, TEXT_HEADINGS[DiffCategory.DIFFERENT]))
        for key in diff.different:
            if show_values:
                lines.append(f"  {c(BLUE, f'~ {key}')}")
                lines.append(f"    < {comparison.first.get(key, '')}")
                lines.append(f"    > {comparison.second.get(key, '')}")
            else:
                old = mask_value(comparison.first.get(key, ""))
                new = mask_value(comparison.second.get(key, ""))
                lines.append(f"  {c(BLUE, f'~ {key} ({old} vs {new})')}")
        lines.append("")

    if not diff.has_differences:
        lines.append("No differences found.")

    return "\n".join(lines)


def format_visual(comparison: EnvComparison, show_values: bool = False) -> str:
    """Render a comparison as a boxed, colored side-by-side report."""
    diff = comparison.diff
    rule = f"{GRAY}{'─' * RULE_WIDTH}{RESET}"
    lines: list[str] = [
        "",
        f"{BOLD}{CYAN}╔{'═' * RULE_WIDTH}╗{RESET}",
        f"{BOLD}{CYAN}║{RESET}  {BOLD}{'Environment File Diff':<{RULE_WIDTH - 2}}{RESET}"
        f"{CYAN}║{RESET}",
        f"{BOLD}{CYAN}╚{'═' * RULE_WIDTH}╝{RESET}",
        "",
        f"{GRAY}Comparing:{RESET}",
        f"  {CYAN}◀{RESET} {comparison.first_path}",
        f"  {CYAN}▶{RESET} {comparison.second_path}",
        "",
    ]

    if not diff.has_differences:
        lines.append(f"{GREEN}{BOLD}✓ No differences found{RESET}")
        lines.append("")
        return "\n".join(lines)

    lines.append(f"{BOLD}Summary:{RESET}")
    if diff.missing:
        lines.append(f"  {RED}⊖ {len(diff.missing)} missing{RESET} (in ◀ but not ▶)")
    if diff.extra:
        lines.append(f"  {GREEN}⊕ {len(diff.extra)} extra{RESET} (in ▶ but not ◀)")
    if diff.different:
        lines.append(
            f"  {YELLOW}≠ {len(diff.different)} different{RESET} (different values)"
        )
    lines.append("")

    if diff.missing:
        lines.append(
            f"{RED}{BOLD}⊖ Missing Variables{RESET} {GRAY}(in ◀ but not ▶){RESET}"
        )
        lines.append(rule)
        for key in diff.missing:
            value = _display(comparison.first, key, show_values)
            lines.append(
                f"  {RED}✗{RESET} {BOLD}{key}{RESET} {GRAY}={RESET} {RED}{value}{RESET}"
            )
        lines.append("")

    if diff.extra:
        lines.append(
            f"{GREEN}{BOLD}⊕ Extra Variables{RESET} {GRAY}(in ▶ but not ◀){RESET}"
        )
        lines.append(rule)
        for key in diff.extra:
            value = _display(comparison.second, key, show_values)
            lines.append(
                f"  {GREEN}✓{RESET} {BOLD}{key}{RESET} {GRAY}={RESET} "
                f"{GREEN}{value}{RESET}"
            )
        lines.append("")

    if diff.different:
        lines.append(f"{YELLOW}{BOLD}≠ Different Values{RESET}")
        lines.append(rule)
        for key in diff.different:
            old = _display(comparison.first, key, show_values)
            new = _display(comparison.second, key, show_values)
            lines.append(f"  {YELLOW}~{RESET} {BOLD}{key}{RESET}")
            lines.append(f"    {CYAN}◀{RESET} {RED}{old}{RESET}")
            lines.append(f"    {CYAN}▶{RESET} {GREEN}{new}{RESET}")
            lines.append("")

    return "\n".join(lines)


def format_diff(
    comparison: EnvComparison,
    output_format: OutputFormat = OutputFormat.TEXT,
    show_values: bool = False,
    use_color: bool = True,
) -> str:
    """Render a comparison in the requested output format."""
    if output_format is OutputFormat.JSON:
        return format_json(comparison.diff)
    if output_format is OutputFormat.VISUAL:
        return format_visual(comparison, show_values)
    return format_text(comparison, show_values, use_color)
