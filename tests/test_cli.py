import io
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from crossword_sat.cli import build_parser, main


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmpdir = tempfile.TemporaryDirectory()
        self.wordlist = Path(self._tmpdir.name) / "words.txt"
        self.wordlist.write_text("chiz\nhe\nasia\ncha\nhes\nzoa\n", encoding="utf-8")

    def tearDown(self) -> None:
        self._tmpdir.cleanup()

    def run_cli(self, *argv: str):
        out = io.StringIO()
        with redirect_stdout(out), redirect_stderr(io.StringIO()):
            code = main(list(argv))
        return code, out.getvalue()

    def test_defaults(self) -> None:
        args = build_parser().parse_args(["..", "--wordlist", "words.txt"])
        self.assertEqual(args.solver, "cadical")
        self.assertEqual(args.count, 1)
        self.assertFalse(args.pretty)

    def test_prints_solution(self) -> None:
        code, output = self.run_cli("....\n..#.\nA...", "-w", str(self.wordlist))
        self.assertEqual(code, 0)
        self.assertEqual(output, "CHIZ\nHE#O\nASIA\n")

    def test_escaped_newlines_and_exhaustion(self) -> None:
        code, output = self.run_cli(
            "....\\n..#.\\nA...", "-w", str(self.wordlist), "-s", "cpsat", "-c", "2"
        )
        self.assertEqual(code, 0)
        self.assertEqual(output, "CHIZ\nHE#O\nASIA\nNo more solution.\n")

    def test_no_solution(self) -> None:
        code, output = self.run_cli("Q...", "-w", str(self.wordlist))
        self.assertEqual(code, 0)
        self.assertEqual(output, "No solution found.\n")

    def test_pretty_output(self) -> None:
        code, output = self.run_cli("....\n..#.\nA...", "-w", str(self.wordlist), "--pretty")
        self.assertEqual(code, 0)
        self.assertIn("Solution #1", output)
        self.assertIn(" 1 |  H  E  X  O", output)

    def test_bad_inputs_exit_with_usage_error(self) -> None:
        for argv in (
            ["AB\nCDE", "-w", str(self.wordlist)],
            ["..", "-w", str(self.wordlist), "-s", "splr"],
            ["..", "-w", str(Path(self._tmpdir.name) / "missing.txt")],
            ["..", "-w", str(self.wordlist), "-c", "0"],
        ):
            with self.subTest(argv=argv):
                with self.assertRaises(SystemExit) as ctx:
                    self.run_cli(*argv)
                self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
