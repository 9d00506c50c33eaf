import unittest
from unittest.mock import patch

import click
from click.testing import CliRunner

from vc_commit_wizard.commit.types import COMMIT_TYPES
from vc_commit_wizard.errors import PromptError
from vc_commit_wizard.prompts import PromptStyle, Prompter, max_length, min_length


def run_prompt(func, input_text):
    """Invoke ``func`` inside a click command fed with ``input_text``."""

    @click.command()
    def cmd():
        click.echo(f"RESULT={func()!r}")

    return CliRunner().invoke(cmd, [], input=input_text)


class TestValidators(unittest.TestCase):
    def test_min_length(self) -> None:
        validate = min_length(1, "required")
        validate("a")
        with self.assertRaises(click.BadParameter):
            validate("")

    def test_max_length(self) -> None:
        validate = max_length(3, "too long")
        validate("abc")
        with self.assertRaises(click.BadParameter):
            validate("abcd")


class TestPrompter(unittest.TestCase):
    def setUp(self) -> None:
        self.prompter = Prompter(PromptStyle(bold=False, color=False))

    def test_select_by_number(self) -> None:
        result = run_prompt(lambda: self.prompter.select("Type:", COMMIT_TYPES).tag, "2\n")
        self.assertIn("RESULT='fix'", result.output)
        self.assertIn(" 1) feat:", result.output)

    def test_select_by_key(self) -> None:
        result = run_prompt(
            lambda: self.prompter.select("Type:", COMMIT_TYPES, key=lambda t: t.tag).tag, "docs\n"
        )
        self.assertIn("RESULT='docs'", result.output)

    def test_select_default(self) -> None:
        result = run_prompt(lambda: self.prompter.select("Type:", COMMIT_TYPES).tag, "\n")
        self.assertIn("RESULT='feat'", result.output)

    def test_select_reprompts_on_invalid(self) -> None:
        result = run_prompt(lambda: self.prompter.select("Type:", COMMIT_TYPES).tag, "99\n3\n")
        self.assertIn("Choose a number between 1 and 9", result.output)
        self.assertIn("RESULT='docs'", result.output)

    def test_select_requires_options(self) -> None:
        with self.assertRaises(ValueError):
            self.prompter.select("Type:", [])

    def test_text_reprompts_until_valid(self) -> None:
        result = run_prompt(
            lambda: self.prompter.text("Header", validators=[max_length(3, "too long")]),
            "abcdef\nab\n",
        )
        self.assertIn("too long", result.output)
        self.assertIn("RESULT='ab'", result.output)

    def test_text_default(self) -> None:
        result = run_prompt(lambda: self.prompter.text("Ticket", default="DAZ-1"), "\n")
        self.assertIn("[DAZ-1]", result.output)
        self.assertIn("RESULT='DAZ-1'", result.output)

    def test_text_empty_default_is_validated(self) -> None:
        result = run_prompt(
            lambda: self.prompter.text("Ticket", default="", validators=[min_length(1, "You must enter it")]),
            "\nABC-1\n",
        )
        self.assertIn("You must enter it", result.output)
        self.assertIn("RESULT='ABC-1'", result.output)

    def test_text_skippable(self) -> None:
        cases = {".\n": "None", "\n": "''", "Some text\n": "'Some text'"}
        for answer, expected in cases.items():
            with self.subTest(answer=answer):
                result = run_prompt(lambda: self.prompter.text_skippable("Body"), answer)
                self.assertIn(f"RESULT={expected}", result.output)

    def test_confirm(self) -> None:
        self.assertIn("RESULT=True", run_prompt(lambda: self.prompter.confirm("Sure?"), "y\n").output)
        self.assertIn("RESULT=False", run_prompt(lambda: self.prompter.confirm("Sure?"), "\n").output)
        self.assertIn(
            "RESULT=True", run_prompt(lambda: self.prompter.confirm("Sure?", default=True), "\n").output
        )

    @patch("vc_commit_wizard.prompts.click.prompt", side_effect=click.Abort())
    def test_abort_becomes_prompt_error(self, _mock_prompt) -> None:
        with self.assertRaises(PromptError):
            self.prompter.text("Header")
        with self.assertRaises(PromptError):
            self.prompter.text_skippable("Body")

    @patch("vc_commit_wizard.prompts.click.confirm", side_effect=click.Abort())
    def test_abort_in_confirm(self, _mock_confirm) -> None:
        with self.assertRaises(PromptError):
            self.prompter.confirm("Sure?")

    def test_label_styling(self) -> None:
        self.assertEqual(self.prompter.label("x"), "x")
        styled = Prompter(PromptStyle(bold=True, color=True)).label("x")
        self.assertIn("x", styled)
        self.assertNotEqual(styled, "x")


if __name__ == "__main__":
    unittest.main()
