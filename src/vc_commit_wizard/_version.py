"""
Dynamic version generation for vc_commit_wizard.

The version is composed of:
- Major version: Manually set in __init__.py (e.g., "0")
- Minor version: Highest minor number among ``v{major}.{minor}`` tags
- Local part: Git commit short SHA

Format: {major}.{minor}.dev0+g{commit_sha}
Example: 0.5.dev0+ga1b2c3d
"""

from pathlib import Path
from typing import List, Optional

from vc_commit_wizard.errors import DecodeError, ProcessError
from vc_commit_wizard.shell import run_capturing


def _git(args: List[str], repo_path: Optional[Path]) -> List[str]:
    if repo_path:
        args = ["-C", str(repo_path)] + args
    return run_capturing("git", args)


def get_git_commit_sha(repo_path: Optional[Path] = None) -> str:
    """
    Get the short commit SHA of the current HEAD.

    Returns:
        Short commit SHA (7 characters) or 'unknown' if not in a git repo.
    """
    try:
        lines = _git(["rev-parse", "--short=7", "HEAD"], repo_path)
    except (ProcessError, DecodeError):
        return "unknown"
    return lines[0].strip() if lines else "unknown"


def get_minor_version_from_tags(repo_path: Optional[Path] = None) -> int:
    """
    Get the minor version from release tags such as v0.1, v0.2.

    Returns:
        The highest minor version number found (0 if no tags found).
    """
    try:
        tags = _git(["tag", "-l", "v*"], repo_path)
    except (ProcessError, DecodeError):
        return 0

    minor_versions = []
    for tag in tags:
        tag = tag.strip()
        if not tag.startswith("v"):
            continue
        parts = tag[1:].split(".")
        if len(parts) < 2:
            continue
        try:
            minor_versions.append(int(parts[1]))
        except ValueError:
            continue

    return max(minor_versions) if minor_versions else 0


def generate_version(base_version: str, repo_path: Optional[Path] = None) -> str:
    """
    Generate the full version string in PEP 440 compliant format.
    """
    minor = get_minor_version_from_tags(repo_path)
    commit_sha = get_git_commit_sha(repo_path)

    if commit_sha == "unknown":
        return f"{base_version}.{minor}.dev0"
    return f"{base_version}.{minor}.dev0+g{commit_sha}"
