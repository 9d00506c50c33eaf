"""
Data model for the commit message being assembled by the wizard.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


BREAKING_CHANGE_PREFIX = "BREAKING CHANGE: "


@dataclass
class CommitFragments:
    """The pieces of a commit message collected so far.

    Attributes
    ----------
    message : str
        The header line: ``"<type>:"``, optionally followed by
        ``" [<ticket>]"`` and finally by ``" <header>"``.
    body : Optional[str]
        Longer free-form description. ``None`` means no body.
    footer : Optional[str]
        ``"BREAKING CHANGE: <description>"`` or ``None``.
    """

    message: str = ""
    body: Optional[str] = None
    footer: Optional[str] = None

    def __str__(self) -> str:
        from vc_commit_wizard.commit.formatter import finalize

        return finalize(self)
