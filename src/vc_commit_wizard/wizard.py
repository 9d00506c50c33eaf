"""
The commit wizard state machine.

:class:`CommitWizard` walks the user through a fixed sequence of steps,
each of which validates one answer and records it in a
:class:`~vc_commit_wizard.commit.fragments.CommitFragments`::

    START -> TYPE_SELECTED -> TICKET_RESOLVED -> HEADER_SET
          -> BODY_SET -> BREAKING_CHANGE_RESOLVED -> CONFIRMED

The ticket step is the only one that can be bypassed, and only through
configuration. The wizard never moves backwards. A failing step reports
the failure to the console sink and re-raises it, which aborts the
remaining steps; nothing is committed by the wizard itself.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from enum import Enum
from typing import Callable, Iterator, List, Optional

import click

from vc_commit_wizard.commit.formatter import MAX_HEADER_LEN, finalize, render_preview
from vc_commit_wizard.commit.fragments import BREAKING_CHANGE_PREFIX, CommitFragments
from vc_commit_wizard.commit.ticket import compile_ticket_pattern, infer_ticket
from vc_commit_wizard.commit.types import COMMIT_TYPES, CommitType
from vc_commit_wizard.config.loader import WizardConfig
from vc_commit_wizard.console import print_error
from vc_commit_wizard.errors import (
    CommitDeclinedError,
    DecodeError,
    ProcessError,
    WizardError,
    WizardStateError,
)
from vc_commit_wizard.prompts import Prompter, max_length, min_length


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


HEADER_RULER = "[" + "-" * MAX_HEADER_LEN + "]"


class WizardState(Enum):
    START = "start"
    TYPE_SELECTED = "type_selected"
    TICKET_RESOLVED = "ticket_resolved"
    HEADER_SET = "header_set"
    BODY_SET = "body_set"
    BREAKING_CHANGE_RESOLVED = "breaking_change_resolved"
    CONFIRMED = "confirmed"


_TRANSITIONS = {
    WizardState.START: WizardState.TYPE_SELECTED,
    WizardState.TYPE_SELECTED: WizardState.TICKET_RESOLVED,
    WizardState.TICKET_RESOLVED: WizardState.HEADER_SET,
    WizardState.HEADER_SET: WizardState.BODY_SET,
    WizardState.BODY_SET: WizardState.BREAKING_CHANGE_RESOLVED,
    WizardState.BREAKING_CHANGE_RESOLVED: WizardState.CONFIRMED,
}


def next_state(state: WizardState, skip_ticket: bool = False) -> Optional[WizardState]:
    """Return the state following ``state``, or ``None`` after CONFIRMED."""
    following = _TRANSITIONS.get(state)
    if skip_ticket and following is WizardState.TICKET_RESOLVED:
        following = _TRANSITIONS[following]
    return following


def state_sequence(skip_ticket: bool = False) -> List[WizardState]:
    """Return every state the wizard passes through, in order."""
    states = [WizardState.START]
    while True:
        following = next_state(states[-1], skip_ticket)
        if following is None:
            return states
        states.append(following)


class CommitWizard:
    """Interactive builder for a structured commit message.

    Parameters
    ----------
    backend : GitClient
        Repository backend, used to read the current branch name.
    prompter : Prompter, optional
        Prompt surface. Defaults to one styled per ``config.style``.
    config : WizardConfig, optional
        Wizard settings.
    report : callable, optional
        Sink for failures, called before an error propagates.
    """

    def __init__(
        self,
        backend,
        prompter: Optional[Prompter] = None,
        config: Optional[WizardConfig] = None,
        report: Callable[[object], None] = print_error,
    ) -> None:
        self.backend = backend
        self.config = config or WizardConfig()
        self.prompter = prompter or Prompter(self.config.style)
        self.report = report
        self.fragments = CommitFragments()
        self.state = WizardState.START
        self._ticket_pattern = compile_ticket_pattern(self.config.ticket_pattern)

    # ------------------------------------------------------------------
    # Bookkeeping
    # ------------------------------------------------------------------
    def _expect(self, target: WizardState) -> None:
        if next_state(self.state, self.config.skip_ticket) is not target:
            raise WizardStateError(
                f"Cannot move to {target.value} from {self.state.value}"
            )

    @contextmanager
    def _step(self, target: WizardState) -> Iterator[None]:
        self._expect(target)
        try:
            yield
        except WizardError as exc:
            self.report(exc)
            raise
        self.state = target
        logger.debug("Wizard state: %s, message: %r", target.value, self.fragments.message)

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------
    def select_type(self) -> CommitType:
        with self._step(WizardState.TYPE_SELECTED):
            commit_type = self.prompter.select(
                "Select the type of change you're committing:",
                COMMIT_TYPES,
                key=lambda option: option.tag,
            )
            self.fragments.message = f"{commit_type.tag}:"
        return commit_type

    def default_ticket(self) -> str:
        """Suggest a ticket from the current branch, ``""`` if none.

        A failing branch lookup is reported and treated as no suggestion.
        """
        try:
            branch = self.backend.current_branch()
        except (ProcessError, DecodeError) as exc:
            self.report(exc)
            logger.warning("Could not determine current branch: %s", exc)
            return ""
        return infer_ticket(branch, self._ticket_pattern)

    def resolve_ticket(self) -> str:
        with self._step(WizardState.TICKET_RESOLVED):
            validators = []
            if self.config.require_ticket:
                validators.append(min_length(1, "You must enter a ticket reference"))
            # leave room for " [" + "]" and at least one header character
            room = MAX_HEADER_LEN - len(self.fragments.message) - 4
            validators.append(max_length(room, f"The ticket reference must be at most {room} characters"))

            ticket = self.prompter.text(
                self.config.ticket_label,
                default=self.default_ticket(),
                validators=validators,
            )
            if ticket:
                self.fragments.message = f"{self.fragments.message} [{ticket}]"
        return ticket

    def header_limit(self) -> int:
        """Longest header the current message leaves room for."""
        return MAX_HEADER_LEN - len(self.fragments.message)

    def set_header(self) -> str:
        with self._step(WizardState.HEADER_SET):
            prompt = "\n".join(
                [
                    "Write a short, imperative tense description of the change:",
                    HEADER_RULER,
                    self.fragments.message,
                ]
            )
            header = self.prompter.text(
                prompt,
                validators=[
                    min_length(1, "You must have a commit message"),
                    max_length(
                        self.header_limit(),
                        f"Your commit message should be less than {MAX_HEADER_LEN} characters",
                    ),
                ],
                suffix=" ",
            )
            self.fragments.message = f"{self.fragments.message} {header}"
        return header

    def set_body(self) -> Optional[str]:
        with self._step(WizardState.BODY_SET):
            self.fragments.body = self.prompter.text_skippable(
                "Provide a longer description of the change:"
            )
        return self.fragments.body

    def resolve_breaking_change(self) -> Optional[str]:
        with self._step(WizardState.BREAKING_CHANGE_RESOLVED):
            if self.prompter.confirm("Are there any breaking changes?", default=False):
                description = self.prompter.text(
                    "Describe the breaking changes:",
                    validators=[min_length(1, "You must describe the breaking changes")],
                )
                self.fragments.footer = f"{BREAKING_CHANGE_PREFIX}{description}"
        return self.fragments.footer

    def show_preview(self) -> None:
        click.echo("Commit Preview:\n")
        preview = render_preview(finalize(self.fragments))
        if self.config.style.color:
            preview = click.style(preview, fg="green")
        click.echo(preview + "\n")

    def confirm(self) -> CommitFragments:
        """Show the preview and ask for final confirmation.

        Raises
        ------
        CommitDeclinedError
            If the user answers no.
        """
        with self._step(WizardState.CONFIRMED):
            self.show_preview()
            if not self.prompter.confirm("Are you sure that you want to commit?", default=True):
                raise CommitDeclinedError("Commit aborted by user")
        return self.fragments

    def run(self) -> CommitFragments:
        """Run every remaining step and return the collected fragments."""
        steps = {
            WizardState.TYPE_SELECTED: self.select_type,
            WizardState.TICKET_RESOLVED: self.resolve_ticket,
            WizardState.HEADER_SET: self.set_header,
            WizardState.BODY_SET: self.set_body,
            WizardState.BREAKING_CHANGE_RESOLVED: self.resolve_breaking_change,
            WizardState.CONFIRMED: self.confirm,
        }
        while True:
            following = next_state(self.state, self.config.skip_ticket)
            if following is None:
                return self.fragments
            steps[following]()
