"""
Top-level package for vc_commit_wizard.

This package exposes the main CLI entry point via the
``vc_commit_wizard.cli`` module.
"""

__all__ = ["__version__", "__base_version__"]

# Major version - controlled manually by the programmer
__base_version__ = "0"

# Full version - major.minor.dev0+g{commit_sha}, minor from git tags
try:
    from vc_commit_wizard._version import generate_version
    __version__ = generate_version(__base_version__)
except Exception:
    # Fallback if version generation fails
    __version__ = f"{__base_version__}.0.dev0"
