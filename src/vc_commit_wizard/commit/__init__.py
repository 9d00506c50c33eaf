"""
Commit message model and formatting.

See :mod:`vc_commit_wizard.commit.fragments` for the data model,
:mod:`vc_commit_wizard.commit.formatter` for rendering, and
:mod:`vc_commit_wizard.commit.ticket` for ticket inference.
"""

from .formatter import MAX_HEADER_LEN, finalize, render_preview  # noqa: F401
from .fragments import CommitFragments  # noqa: F401
from .ticket import infer_ticket  # noqa: F401
from .types import COMMIT_TYPES, CommitType  # noqa: F401
