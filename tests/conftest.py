from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolate_home_config(tmp_path, monkeypatch):
    """Point the default configuration directory at an empty temp dir.

    Tests must not pick up a real ``~/.vc_commit_wizard/config.json``.
    """
    config_dir = Path(tmp_path) / ".vc_commit_wizard"
    monkeypatch.setattr(
        "vc_commit_wizard.config.loader._get_config_directory", lambda: config_dir
    )
    yield config_dir
