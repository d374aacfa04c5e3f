"""Human-readable summary rendering for $GITHUB_STEP_SUMMARY."""

from __future__ import annotations

from .models import NormalizedOptions


def _format(value: object) -> str:
    if value is None:
        return "(unset)"
    if isinstance(value, bool):
        return str(value).lower()
    return f"`{value}`"


def render_summary(normalized: NormalizedOptions) -> str:
    """Return a Markdown table of the resolved options and where each came from."""
    lines = []
    lines.append("# npm-publish-config Summary")
    lines.append("")
    lines.append(f"Registry: {normalized.registry}")
    lines.append("")
    lines.append("| Option | Value | Source |")
    lines.append("| --- | --- | --- |")

    for name, config_value in normalized.config_values().items():
        source = "default" if config_value.is_default else "input"
        lines.append(f"| {name} | {_format(config_value.value)} | {source} |")

    return "\n".join(lines) + "\n"
