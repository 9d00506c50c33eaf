"""
Catalogue of commit types offered by the wizard.

The order of :data:`COMMIT_TYPES` is the order in which the types are
displayed and numbered in the type picker.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class CommitType:
    """A commit type tag and its human readable description."""

    tag: str
    description: str

    def __str__(self) -> str:
        return f"{self.tag + ':':<10} {self.description}"


COMMIT_TYPES: Tuple[CommitType, ...] = (
    CommitType("feat", "A new feature"),
    CommitType("fix", "A bug fix"),
    CommitType("docs", "Documentation only changes"),
    CommitType(
        "style",
        "Changes that do not affect the meaning of the code "
        "(white-space, formatting, missing semi-colons, etc)",
    ),
    CommitType("refactor", "A code change that neither fixes a bug nor adds a feature"),
    CommitType("revert", "Reverts a previous commit"),
    CommitType("perf", "A code change that improves performance"),
    CommitType("test", "Adding missing or correcting existing tests"),
    CommitType(
        "chore",
        "Changes to the build process or auxiliary tools and libraries "
        "such as documentation generation",
    ),
)
