"""
Error model for vc_commit_wizard.

Every failure that can reach the user is a :class:`WizardError`. The
``kind`` attribute places it in a closed taxonomy so callers (and tests)
can branch on the kind of failure instead of matching message text:

- ``PROMPT``: the input stream closed or the user interrupted a prompt.
- ``DECODE``: a child process produced output that is not valid text.
- ``PROCESS``: a child process could not be started or exited non-zero.
- ``DOMAIN``: an explicit condition such as "nothing staged".
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence


class ErrorKind(Enum):
    """Closed set of failure kinds."""

    PROMPT = "prompt"
    DECODE = "decode"
    PROCESS = "process"
    DOMAIN = "domain"


class WizardError(Exception):
    """Base class for all user-facing failures."""

    kind: ErrorKind = ErrorKind.DOMAIN

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class PromptError(WizardError):
    """Raised when a prompt is interrupted or its input stream is closed."""

    kind = ErrorKind.PROMPT


class DecodeError(WizardError):
    """Raised when child process output is not valid UTF-8."""

    kind = ErrorKind.DECODE

    def __init__(self, message: str, stream: str = "stdout") -> None:
        super().__init__(message)
        self.stream = stream


class ProcessError(WizardError):
    """Raised when a child process fails to start or exits non-zero.

    Attributes
    ----------
    command : List[str]
        The full command line that was executed.
    returncode : Optional[int]
        Exit status of the child, ``None`` if it never started.
    stderr : str
        Raw standard error text of the child, empty when not captured.
    """

    kind = ErrorKind.PROCESS

    def __init__(
        self,
        message: str,
        command: Sequence[str] = (),
        returncode: Optional[int] = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr


class DomainError(WizardError):
    """Raised for explicit, expected failure conditions."""

    kind = ErrorKind.DOMAIN


class NothingStagedError(DomainError):
    """Raised when there are no staged changes to commit."""

    pass


class CommitDeclinedError(DomainError):
    """Raised when the user declines the final confirmation."""

    pass


class ConfigError(DomainError):
    """Raised when the configuration file is missing or invalid."""

    pass


class WizardStateError(RuntimeError):
    """Raised when a wizard step is invoked out of order."""

    pass
