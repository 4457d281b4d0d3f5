# Area: Shared
"""Error formatting for structured startup error blocks."""

from __future__ import annotations
import json
from typing import Any, Dict, List, Optional

USAGE = "fair-rps <move1> <move2> ... <moveN>"
USAGE_EXAMPLE = "fair-rps rock paper scissors lizard spock"


def format_error_block(
    title: str,
    error_type: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    usage_lines: Optional[List[str]] = None,
) -> str:
    """Format a structured error block for stderr."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        f" {title}",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Reason:       {message}",
    ]

    if details:
        lines.append("")
        lines.append(" ── DETAILS " + "─" * 52)
        lines.append(indent_json(details))

    if usage_lines:
        lines.append("")
        lines.append(" ── USAGE " + "─" * 54)
        for line in usage_lines:
            lines.append(f" {line}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def usage_lines() -> List[str]:
    """Usage hint shown under invalid-argument errors."""
    return [
        f"Usage:   {USAGE}",
        "         N must be odd, at least 3, and every move must be unique.",
        f"Example: {USAGE_EXAMPLE}",
    ]


def indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error blocks."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
