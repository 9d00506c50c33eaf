"""
Version control system (VCS) integrations.

Exposes :class:`GitClient`, the repository backend used by the wizard to
check for staged changes, read the current branch, and commit.
"""

from .git_client import GitClient  # noqa: F401
