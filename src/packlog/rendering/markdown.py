# topmark:header:start
#
#   project      : PackLog
#   file         : markdown.py
#   file_relpath : src/packlog/rendering/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markdown utilities for PackLog."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def escape_cell(text: str) -> str:
    """Escape characters that would break a Markdown table cell."""
    return text.replace("\\", "\\\\").replace("|", "\\|").replace("\n", " ")


def render_markdown_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    align: Mapping[int, str] | None = None,
) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Args:
        headers: Column headers.
        rows: A sequence of row sequences (each row same length as ``headers``).
            Cells are inserted verbatim; escape them with `escape_cell`.
        align: Optional mapping of column index to alignment:
            ``"left"`` (default), ``"right"``, or ``"center"``.

    Returns:
        The Markdown table as a single string (ending with a newline).

    Raises:
        ValueError: If any row length differs from the number of headers.
    """
    if not headers:
        return ""
    ncols: int = len(headers)
    for r in rows:
        if len(r) != ncols:
            raise ValueError("All rows must have the same number of columns as headers")

    widths: list[int] = [max(3, len(str(h))) for h in headers]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(str(cell)))

    def _pad(text: str, w: int) -> str:
        return f"{text:<{w}}"

    def _sep_for(i: int) -> str:
        style: str = (align or {}).get(i, "left").lower()
        w: int = widths[i]
        if style == "right":
            return "-" * (w - 1) + ":"
        if style == "center":
            return ":" + "-" * (w - 2) + ":"
        return "-" * w

    lines: list[str] = [
        "| " + " | ".join(_pad(str(headers[i]), widths[i]) for i in range(ncols)) + " |",
        "| " + " | ".join(_sep_for(i) for i in range(ncols)) + " |",
    ]
    lines.extend(
        "| " + " | ".join(_pad(str(r[i]), widths[i]) for i in range(ncols)) + " |" for r in rows
    )
    return "\n".join(lines) + "\n"
