#!/usr/bin/env python
"""
Thin wrapper script to invoke the vc_commit_wizard CLI.

Running ``python commitwiz.py`` is equivalent to running the
``commitwiz`` console script installed via ``pyproject.toml``.
"""

from vc_commit_wizard.cli import main


if __name__ == "__main__":
    main(prog_name="commitwiz")
