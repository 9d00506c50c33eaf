"""
Configuration loader for vc_commit_wizard.

Settings are read from a JSON file, by default ``config.json`` inside
``~/.vc_commit_wizard/``. Every key is optional; a missing default file
simply yields the defaults. If an explicitly requested file is missing,
or a file is malformed or holds values of the wrong type, a
:class:`ConfigError` is raised.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from vc_commit_wizard.commit.ticket import DEFAULT_TICKET_PATTERN
from vc_commit_wizard.errors import ConfigError
from vc_commit_wizard.prompts import PromptStyle


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


CONFIG_FILENAME = "config.json"

_BOOL_KEYS = ("skip_ticket", "require_ticket", "bold_prompts", "color")
_STR_KEYS = ("ticket_pattern", "ticket_label")


@dataclass(frozen=True)
class WizardConfig:
    """Settings the wizard is constructed with.

    Attributes
    ----------
    skip_ticket : bool
        Bypass the ticket step entirely.
    require_ticket : bool
        Reject an empty answer when the ticket step runs.
    ticket_pattern : str
        Regex used to suggest a ticket from the current branch name.
    ticket_label : str
        Text of the ticket prompt.
    style : PromptStyle
        How prompts are rendered.
    """

    skip_ticket: bool = False
    require_ticket: bool = True
    ticket_pattern: str = DEFAULT_TICKET_PATTERN
    ticket_label: str = "Enter JIRA issue (DAZ-12345):"
    style: PromptStyle = field(default_factory=PromptStyle)


def _get_config_directory() -> Path:
    """Return the user-specific configuration directory."""
    return Path.home() / ".vc_commit_wizard"


def _validate(data: Dict[str, Any], source: Path) -> None:
    for key in _BOOL_KEYS:
        if key in data and not isinstance(data[key], bool):
            raise ConfigError(f"'{key}' must be a boolean in {source}")
    for key in _STR_KEYS:
        if key in data and not isinstance(data[key], str):
            raise ConfigError(f"'{key}' must be a string in {source}")
    if "ticket_pattern" in data:
        try:
            re.compile(data["ticket_pattern"])
        except re.error as exc:
            raise ConfigError(f"'ticket_pattern' is not a valid regular expression: {exc}") from exc

    unknown = sorted(set(data) - set(_BOOL_KEYS) - set(_STR_KEYS))
    if unknown:
        logger.debug("Ignoring unknown configuration keys: %s", unknown)


def load_config(path: Optional[Path] = None) -> WizardConfig:
    """Load the wizard configuration and return it.

    Parameters
    ----------
    path : Optional[Path]
        Explicit configuration file. When ``None`` the default location
        is used and its absence is not an error.

    Raises
    ------
    ConfigError
        If the file is unreadable, not a JSON object, or invalid.
    """
    explicit = path is not None
    config_path = path if explicit else _get_config_directory() / CONFIG_FILENAME

    if not config_path.exists():
        if explicit:
            logger.error("Configuration file '%s' does not exist", config_path)
            raise ConfigError(f"Missing configuration file: {config_path}")
        logger.debug("No configuration file at %s, using defaults", config_path)
        return WizardConfig()

    try:
        content = config_path.read_text(encoding="utf-8")
        data = json.loads(content)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read or parse configuration file: %s", exc)
        raise ConfigError(f"Invalid JSON in {config_path.name}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path.name} must contain a JSON object")

    _validate(data, config_path)

    defaults = WizardConfig()
    config = WizardConfig(
        skip_ticket=data.get("skip_ticket", defaults.skip_ticket),
        require_ticket=data.get("require_ticket", defaults.require_ticket),
        ticket_pattern=data.get("ticket_pattern", defaults.ticket_pattern),
        ticket_label=data.get("ticket_label", defaults.ticket_label),
        style=PromptStyle(
            bold=data.get("bold_prompts", defaults.style.bold),
            color=data.get("color", defaults.style.color),
        ),
    )
    logger.debug("Loaded configuration from: %s", config_path)
    logger.debug("Configuration data: %s", config)
    return config
