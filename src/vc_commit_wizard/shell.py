"""
Command runner for vc_commit_wizard.

Wraps :mod:`subprocess` so that every external program is executed the
same way: synchronously, with a debug log line, and with failures
converted into the errors of :mod:`vc_commit_wizard.errors`. Unit tests
patch ``subprocess.run`` in this module.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Iterable, List, Optional

from vc_commit_wizard.errors import DecodeError, ProcessError


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


def _decode(data: bytes, stream: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.error("Invalid UTF-8 on %s: %s", stream, exc)
        raise DecodeError(f"UTF8 error: {exc}", stream=stream) from exc


class Command:
    """A single invocation of an external program.

    A command is built fresh for every call and is not meant to be
    reused once it has been run.
    """

    def __init__(
        self,
        program: str,
        args: Optional[Iterable[str]] = None,
        cwd: Optional[Path] = None,
    ) -> None:
        self.program = program
        self.args: List[str] = list(args or [])
        self.cwd = cwd

    def arg(self, value: str) -> "Command":
        self.args.append(value)
        return self

    def option_arg(self, value: Optional[str]) -> "Command":
        """Append ``value`` only when it is not ``None``."""
        if value is not None:
            self.args.append(value)
        return self

    @property
    def argv(self) -> List[str]:
        return [self.program] + self.args

    def _launch(self, **kwargs) -> subprocess.CompletedProcess:
        try:
            return subprocess.run(self.argv, cwd=self.cwd, **kwargs)
        except OSError as exc:
            logger.error("Failed to execute %s: %s", self.program, exc)
            raise ProcessError(
                f"Failed to execute {self.program}: {exc}", command=self.argv
            ) from exc

    def run_capturing(self) -> List[str]:
        """Run the command and return its standard output as lines.

        Raises
        ------
        ProcessError
            If the program cannot be started or exits with a non-zero
            status. The message is the child's standard error text.
        DecodeError
            If the captured output is not valid UTF-8.
        """
        logger.debug("Executing %s with args %s in %s", self.program, self.args, self.cwd or "cwd")
        result = self._launch(stdout=subprocess.PIPE, stderr=subprocess.PIPE)

        if result.returncode != 0:
            stderr = _decode(result.stderr, "stderr")
            logger.debug(
                "Command failed with status %s: %s\nSTDERR: %s",
                result.returncode,
                " ".join(self.argv),
                stderr,
            )
            raise ProcessError(
                stderr.strip() or f"{self.program} exited with status {result.returncode}",
                command=self.argv,
                returncode=result.returncode,
                stderr=stderr,
            )

        return _decode(result.stdout, "stdout").splitlines()

    def run_interactive(self) -> None:
        """Run the command attached to the parent's terminal streams.

        The child may prompt or print progress itself. Failure is detected
        from the exit status only.
        """
        logger.debug("Spawning %s with args %s in %s", self.program, self.args, self.cwd or "cwd")
        result = self._launch()

        if result.returncode != 0:
            raise ProcessError(
                f"{' '.join(self.argv[:2])} exited with status {result.returncode}",
                command=self.argv,
                returncode=result.returncode,
            )


def run_capturing(program: str, args: Iterable[str], cwd: Optional[Path] = None) -> List[str]:
    """Run ``program`` with ``args`` and return its output lines."""
    return Command(program, args, cwd=cwd).run_capturing()


def run_interactive(program: str, args: Iterable[str], cwd: Optional[Path] = None) -> None:
    """Run ``program`` with ``args`` using inherited I/O streams."""
    Command(program, args, cwd=cwd).run_interactive()
