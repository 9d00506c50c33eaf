"""
Terminal prompts used by the commit wizard.

:class:`Prompter` is a thin layer over :func:`click.prompt` and
:func:`click.confirm`. It applies a :class:`PromptStyle` chosen at
construction time and converts an interrupted prompt (Ctrl-C, closed
input) into a :class:`~vc_commit_wizard.errors.PromptError`.

Validation failures are not errors: click reports the validator message
and asks again until the answer is acceptable.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Sequence, TypeVar

import click

from vc_commit_wizard.errors import PromptError


T = TypeVar("T")
Validator = Callable[[str], None]

SKIP_TOKEN = "."


@dataclass(frozen=True)
class PromptStyle:
    """Rendering options for prompt labels."""

    bold: bool = True
    color: bool = True


def min_length(length: int, message: str) -> Validator:
    """Reject answers shorter than ``length`` characters."""

    def validate(value: str) -> None:
        if len(value) < length:
            raise click.BadParameter(message)

    return validate


def max_length(length: int, message: str) -> Validator:
    """Reject answers longer than ``length`` characters."""

    def validate(value: str) -> None:
        if len(value) > length:
            raise click.BadParameter(message)

    return validate


def _chain(validators: Sequence[Validator]) -> Callable[[str], str]:
    def value_proc(value: str) -> str:
        for validate in validators:
            validate(value)
        return value

    return value_proc


@contextmanager
def _interruptible() -> Iterator[None]:
    try:
        yield
    except click.Abort as exc:
        raise PromptError("Operation was interrupted by the user") from exc


class Prompter:
    """Ask the user questions on the terminal."""

    def __init__(self, style: Optional[PromptStyle] = None) -> None:
        self.style = style or PromptStyle()

    def label(self, message: str) -> str:
        if self.style.color and self.style.bold:
            return click.style(message, bold=True)
        return message

    def select(
        self,
        message: str,
        options: Sequence[T],
        key: Optional[Callable[[T], str]] = None,
        default: int = 1,
    ) -> T:
        """Show a numbered list and return the chosen option.

        The answer may be the option's number or, when ``key`` is given,
        the option's key.
        """
        if not options:
            raise ValueError("select() needs at least one option")

        click.echo(self.label(message))
        for idx, option in enumerate(options, start=1):
            click.echo(f"  {idx:>2}) {option}")

        def choose(value: object) -> T:
            answer = str(value).strip()
            if answer.isdigit() and 1 <= int(answer) <= len(options):
                return options[int(answer) - 1]
            if key is not None:
                for option in options:
                    if key(option) == answer:
                        return option
            raise click.BadParameter(f"Choose a number between 1 and {len(options)}")

        with _interruptible():
            return click.prompt("Choice", default=str(default), value_proc=choose)

    def text(
        self,
        message: str,
        default: Optional[str] = None,
        validators: Sequence[Validator] = (),
        suffix: str = ": ",
    ) -> str:
        """Prompt for a line of text that passes every validator.

        With ``default`` set, an empty answer takes the default (which is
        still validated).
        """
        with _interruptible():
            return click.prompt(
                self.label(message),
                default=default,
                show_default=bool(default),
                value_proc=_chain(validators),
                prompt_suffix=suffix,
            )

    def text_skippable(self, message: str) -> Optional[str]:
        """Prompt for optional text.

        Returns ``None`` when the user enters the skip token on its own,
        otherwise the answer verbatim, including an empty string.
        """
        with _interruptible():
            value = click.prompt(
                self.label(f"{message} (enter '{SKIP_TOKEN}' to skip)"),
                default="",
                show_default=False,
            )
        if value.strip() == SKIP_TOKEN:
            return None
        return value

    def confirm(self, message: str, default: bool = False) -> bool:
        with _interruptible():
            return click.confirm(self.label(message), default=default)
