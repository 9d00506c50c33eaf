"""
Command line interface for the vc_commit_wizard tool.

This module defines the ``main`` function used as the entry point of the
``commitwiz`` command. It loads the configuration, makes sure something
is staged, runs the commit wizard, and then either prints the finished
message (``--dry-run``) or hands it to ``git commit``.
"""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Optional

import click

from vc_commit_wizard import __version__
from vc_commit_wizard.commit.formatter import finalize
from vc_commit_wizard.config.loader import load_config
from vc_commit_wizard.console import print_error, print_info, print_success
from vc_commit_wizard.errors import (
    CommitDeclinedError,
    ConfigError,
    DecodeError,
    NothingStagedError,
    ProcessError,
    PromptError,
    WizardError,
)
from vc_commit_wizard.prompts import Prompter
from vc_commit_wizard.vcs.git_client import GitClient
from vc_commit_wizard.wizard import CommitWizard


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_GENERIC_ERROR = 1
EXIT_NO_CHANGES = 4
EXIT_CONFIG_ERROR = 5
EXIT_VCS_FAILURE = 6
EXIT_PROMPT_ABORTED = 7
EXIT_DECLINED = 8


def exit_code_for(exc: WizardError) -> int:
    """Map a wizard failure to the process exit status."""
    if isinstance(exc, NothingStagedError):
        return EXIT_NO_CHANGES
    if isinstance(exc, ConfigError):
        return EXIT_CONFIG_ERROR
    if isinstance(exc, CommitDeclinedError):
        return EXIT_DECLINED
    if isinstance(exc, (ProcessError, DecodeError)):
        return EXIT_VCS_FAILURE
    if isinstance(exc, PromptError):
        return EXIT_PROMPT_ABORTED
    return EXIT_GENERIC_ERROR


@click.command()
@click.option("--debug", is_flag=True, hidden=True, help="Turn debugging information on.")
@click.option("--dry-run", "dry_run", is_flag=True, help="Build the commit message, but do not commit the staged changes.")
@click.option("--skip-jira", "skip_jira", is_flag=True, help="Skip the ticket reference step.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to a JSON configuration file.",
)
@click.version_option(version=__version__, prog_name="commitwiz")
def main(debug: bool, dry_run: bool, skip_jira: bool, config_path: Optional[Path]) -> None:
    """Write a structured commit message for the staged changes and commit it."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.ERROR,
        format="%(levelname)s: %(message)s",
        force=True,
    )

    # wizard steps report their own failures; everything else is reported here
    in_wizard = False
    try:
        config = load_config(config_path)
        if skip_jira:
            config = dataclasses.replace(config, skip_ticket=True)

        client = GitClient()
        staged = client.staged_files()
        if not staged:
            raise NothingStagedError("No files added to staging! Did you forget to run git add?")
        print_info(f"{len(staged)} staged file{'s' if len(staged) != 1 else ''}")
        logger.debug("Staged files: %s", staged)

        wizard = CommitWizard(client, Prompter(config.style), config)
        in_wizard = True
        message = finalize(wizard.run())
        in_wizard = False

        if dry_run:
            click.echo(message)
        else:
            client.commit(message)
            print_success("Changes committed")

    except WizardError as exc:
        if not in_wizard:
            print_error(exc)
        logger.error("%s", exc)
        raise click.exceptions.Exit(exit_code_for(exc))
    except click.exceptions.Exit:
        raise
    except Exception as exc:
        logging.exception("Unhandled error: %s", exc)
        print_error(f"Unexpected error: {exc}")
        raise click.exceptions.Exit(EXIT_GENERIC_ERROR)

    raise click.exceptions.Exit(EXIT_SUCCESS)
