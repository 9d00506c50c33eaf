"""
Turn collected commit fragments into text.

:func:`finalize` produces the exact text handed to ``git commit``.
:func:`render_preview` draws the same text inside a box for display;
wrapping happens only in the box, never in the committed text.
"""

from __future__ import annotations

import textwrap
from typing import List, Union

from vc_commit_wizard.commit.fragments import CommitFragments


MAX_HEADER_LEN = 72
PREVIEW_PADDING = 3


def finalize(fragments: CommitFragments) -> str:
    """Join message, body and footer with one blank line between them.

    Empty or missing fragments are dropped and the result is stripped of
    surrounding whitespace.
    """
    parts = [fragments.message, fragments.body or "", fragments.footer or ""]
    return "\n\n".join(part for part in parts if part).strip()


def _wrap(line: str, width: int) -> List[str]:
    if not line.strip():
        return [""]
    return textwrap.wrap(line, width=width) or [""]


def render_preview(
    text: Union[str, CommitFragments],
    width: int = MAX_HEADER_LEN,
    padding: int = PREVIEW_PADDING,
) -> str:
    """Render ``text`` in a rounded box exactly ``width`` columns wide.

    Parameters
    ----------
    text : str or CommitFragments
        Finalized commit text, or fragments to finalize first.
    width : int
        Total width of the box including its borders.
    padding : int
        Blank columns between the border and the content on each side.
    """
    if isinstance(text, CommitFragments):
        text = finalize(text)
    inner = width - 2 - 2 * padding
    if inner < 1:
        raise ValueError(f"Preview width {width} is too small for padding {padding}")

    rows = [""]
    for line in text.splitlines():
        rows.extend(_wrap(line, inner))
    rows.append("")

    pad = " " * padding
    out = ["╭" + "─" * (width - 2) + "╮"]
    out.extend(f"│{pad}{row.ljust(inner)}{pad}│" for row in rows)
    out.append("╰" + "─" * (width - 2) + "╯")
    return "\n".join(out)
