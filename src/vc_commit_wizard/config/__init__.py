"""
Configuration loading for vc_commit_wizard.

See :mod:`vc_commit_wizard.config.loader` for the file format.
"""

from .loader import WizardConfig, load_config  # noqa: F401
