"""
Ticket reference inference from branch names.

Branches are expected to start with the ticket id, e.g.
``DAZ-1234-fix-thing``. The match is only a suggestion for the ticket
prompt and is never checked against an issue tracker.
"""

from __future__ import annotations

import re
from typing import Union


DEFAULT_TICKET_PATTERN = r"^(?P<ticket>[a-zA-Z0-9]+-\d+)"


def compile_ticket_pattern(pattern: str) -> re.Pattern[str]:
    """Compile ``pattern`` with line anchors enabled."""
    return re.compile(pattern, re.MULTILINE)


def infer_ticket(branch: str, pattern: Union[str, re.Pattern[str]] = DEFAULT_TICKET_PATTERN) -> str:
    """Return the ticket id found at the start of ``branch``, or ``""``.

    If the pattern defines a ``ticket`` group its text is returned,
    otherwise the whole match.

    >>> infer_ticket("ABC-42-my-fix")
    'ABC-42'
    >>> infer_ticket("abc42")
    ''
    """
    if isinstance(pattern, str):
        pattern = compile_ticket_pattern(pattern)
    match = pattern.search(branch)
    if match is None:
        return ""
    if "ticket" in pattern.groupindex:
        return match.group("ticket") or ""
    return match.group(0)
