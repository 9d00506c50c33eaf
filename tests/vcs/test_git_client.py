import unittest
from pathlib import Path
from unittest.mock import patch

from vc_commit_wizard.errors import ProcessError
from vc_commit_wizard.vcs.git_client import GitClient


class TestGitClient(unittest.TestCase):
    @patch("vc_commit_wizard.shell.run_capturing")
    def test_staged_files(self, mock_run) -> None:
        mock_run.return_value = ["a.py", "", "docs/readme.md"]
        client = GitClient(Path("/repo"))
        self.assertEqual(client.staged_files(), ["a.py", "docs/readme.md"])
        mock_run.assert_called_once_with(
            "git", ["diff", "--cached", "--no-ext-diff", "--name-only"], cwd=Path("/repo")
        )

    @patch("vc_commit_wizard.shell.run_capturing")
    def test_has_staged_changes(self, mock_run) -> None:
        client = GitClient()
        mock_run.return_value = ["a.py"]
        self.assertTrue(client.has_staged_changes())
        mock_run.return_value = []
        self.assertFalse(client.has_staged_changes())

    @patch("vc_commit_wizard.shell.run_capturing")
    def test_current_branch(self, mock_run) -> None:
        mock_run.return_value = ["DAZ-1234-fix-thing"]
        self.assertEqual(GitClient().current_branch(), "DAZ-1234-fix-thing")
        mock_run.assert_called_once_with("git", ["branch", "--show-current"], cwd=None)

    @patch("vc_commit_wizard.shell.run_capturing")
    def test_current_branch_detached_head(self, mock_run) -> None:
        mock_run.return_value = []
        self.assertEqual(GitClient().current_branch(), "")

    @patch("vc_commit_wizard.shell.run_capturing")
    def test_current_branch_propagates_failure(self, mock_run) -> None:
        mock_run.side_effect = ProcessError("fatal: not a git repository")
        with self.assertRaises(ProcessError):
            GitClient().current_branch()

    @patch("vc_commit_wizard.shell.run_interactive")
    def test_commit_passes_exact_message(self, mock_run) -> None:
        message = "feat: [DAZ-1] add retry\n\nBody text."
        GitClient(program="git").commit(message)
        mock_run.assert_called_once_with("git", ["commit", "-m", message], cwd=None)

    @patch("vc_commit_wizard.shell.run_interactive")
    def test_commit_failure(self, mock_run) -> None:
        mock_run.side_effect = ProcessError("git commit exited with status 1", returncode=1)
        with self.assertRaises(ProcessError):
            GitClient().commit("fix: x")


if __name__ == "__main__":
    unittest.main()
