"""
Git client implementation for vc_commit_wizard.

This module wraps the three Git operations the wizard needs: listing
staged files, reading the current branch name, and recording the commit.
All calls go through :mod:`vc_commit_wizard.shell` so that unit tests can
mock them easily.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from vc_commit_wizard import shell


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class GitClient:
    """Client for interacting with a Git repository."""

    def __init__(self, repo_root: Optional[Path] = None, program: str = "git") -> None:
        self.repo_root = repo_root
        self.program = program

    def _run(self, args: List[str]) -> List[str]:
        return shell.run_capturing(self.program, args, cwd=self.repo_root)

    # ------------------------------------------------------------------
    # Staged changes
    # ------------------------------------------------------------------
    def staged_files(self) -> List[str]:
        """Return the paths of all files staged for the next commit."""
        lines = self._run(["diff", "--cached", "--no-ext-diff", "--name-only"])
        return [line for line in lines if line.strip()]

    def has_staged_changes(self) -> bool:
        """Return True if anything is staged for the next commit."""
        return bool(self.staged_files())

    # ------------------------------------------------------------------
    # Branch operations
    # ------------------------------------------------------------------
    def current_branch(self) -> str:
        """Get the name of the current branch.

        Returns an empty string on a detached HEAD.

        Raises
        ------
        ProcessError
            If Git fails to report the branch.
        DecodeError
            If the branch name is not valid UTF-8.
        """
        lines = self._run(["branch", "--show-current"])
        return lines[0].strip() if lines else ""

    # ------------------------------------------------------------------
    # Committing
    # ------------------------------------------------------------------
    def commit(self, message: str) -> None:
        """Create a commit with exactly ``message`` as its text.

        Git's own output is streamed straight to the terminal. A non-zero
        exit raises :class:`~vc_commit_wizard.errors.ProcessError`.
        """
        logger.debug("Committing with message:\n%s", message)
        shell.run_interactive(self.program, ["commit", "-m", message], cwd=self.repo_root)
