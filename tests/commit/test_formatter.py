import unittest

from vc_commit_wizard.commit.formatter import MAX_HEADER_LEN, finalize, render_preview
from vc_commit_wizard.commit.fragments import CommitFragments


class TestFinalize(unittest.TestCase):
    def test_all_presence_combinations(self) -> None:
        cases = {
            (None, None): "feat: something new",
            ("Something new.", None): "feat: something new\n\nSomething new.",
            (None, "BREAKING CHANGE: x"): "feat: something new\n\nBREAKING CHANGE: x",
            ("Something new.", "BREAKING CHANGE: x"): (
                "feat: something new\n\nSomething new.\n\nBREAKING CHANGE: x"
            ),
        }
        for (body, footer), expected in cases.items():
            with self.subTest(body=body, footer=footer):
                text = finalize(CommitFragments("feat: something new", body, footer))
                self.assertEqual(text, expected)
                self.assertNotIn("\n\n\n", text)

    def test_empty_body_is_elided(self) -> None:
        text = finalize(CommitFragments("fix: x", "", "BREAKING CHANGE: y"))
        self.assertEqual(text, "fix: x\n\nBREAKING CHANGE: y")

    def test_surrounding_whitespace_trimmed(self) -> None:
        text = finalize(CommitFragments("fix: x", "body\n\n", None))
        self.assertEqual(text, "fix: x\n\nbody")

    def test_idempotent(self) -> None:
        once = finalize(CommitFragments("feat: a", "b", "BREAKING CHANGE: c"))
        self.assertEqual(finalize(CommitFragments(once)), once)

    def test_str_uses_finalize(self) -> None:
        fragments = CommitFragments("docs: readme", "More.", None)
        self.assertEqual(str(fragments), "docs: readme\n\nMore.")


class TestRenderPreview(unittest.TestCase):
    def test_box_is_fixed_width(self) -> None:
        preview = render_preview("feat: add thing\n\n" + "word " * 40)
        lines = preview.splitlines()
        self.assertTrue(lines[0].startswith("╭") and lines[0].endswith("╮"))
        self.assertTrue(lines[-1].startswith("╰") and lines[-1].endswith("╯"))
        for line in lines:
            self.assertEqual(len(line), MAX_HEADER_LEN)

    def test_content_preserved(self) -> None:
        text = "feat: [DAZ-1] add retry policy\n\nAdds exponential backoff."
        preview = render_preview(text)
        self.assertIn("feat: [DAZ-1] add retry policy", preview)
        self.assertIn("Adds exponential backoff.", preview)

    def test_long_line_wrapped_only_in_box(self) -> None:
        body = " ".join(["backoff"] * 20)
        fragments = CommitFragments("fix: x", body, None)
        preview = render_preview(fragments)
        self.assertGreater(len(preview.splitlines()), 6)
        self.assertEqual(finalize(fragments), f"fix: x\n\n{body}")

    def test_blank_rows_around_content(self) -> None:
        lines = render_preview("fix: x").splitlines()
        self.assertEqual(len(lines), 5)
        self.assertEqual(lines[1].strip("│ "), "")
        self.assertEqual(lines[3].strip("│ "), "")

    def test_too_narrow(self) -> None:
        with self.assertRaises(ValueError):
            render_preview("fix: x", width=8)


if __name__ == "__main__":
    unittest.main()
