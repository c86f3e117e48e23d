"""
Tests for the lox command line driver.

Author: xwest
"""

import io
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.cli import EX_DATAERR, EX_NOINPUT, EX_OK, EX_USAGE, Lox, main


class TestCommandLine(unittest.TestCase):
    """Test cases for running scripts from the command line."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp.cleanup()

    def _write(self, source: str) -> str:
        path = os.path.join(self.tmp.name, "script.lox")
        with open(path, 'w', encoding='utf-8') as f:
            f.write(source)
        return path

    def _main(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_prints_tokens(self):
        code, out, _ = self._main([self._write('print 1 + x;\n')])

        self.assertEqual(code, EX_OK)
        self.assertEqual(out.splitlines(), [
            "print print", "1 1", "+ +", "x x", "; ;", "\\d ",
        ])

    def test_lexical_error_exit_code(self):
        code, out, _ = self._main([self._write('a @ b\n"open')])

        self.assertEqual(code, EX_DATAERR)
        lines = out.splitlines()
        self.assertIn("[line 1] Error: Unexpected character.", lines)
        self.assertIn("[line 2] Error: Unterminated string.", lines)
        self.assertEqual(lines[-1], "\\d ")

    def test_diagnostics_only(self):
        code, out, _ = self._main(["--diagnostics-only", self._write("1 $")])

        self.assertEqual(code, EX_DATAERR)
        self.assertEqual(out.splitlines(), ["[line 1] Error: Unexpected character."])

    def test_repr_output(self):
        code, out, _ = self._main(["--repr", self._write("nil")])

        self.assertEqual(code, EX_OK)
        self.assertEqual(out.splitlines(), [
            "Token(NIL, 'nil', None, 1)",
            "Token(EOF, '', None, 1)",
        ])

    def test_too_many_arguments(self):
        code, out, _ = self._main(["a.lox", "b.lox"])

        self.assertEqual(code, EX_USAGE)
        self.assertEqual(out.strip(), "Usage: lox [script]")

    def test_missing_file(self):
        code, out, err = self._main([os.path.join(self.tmp.name, "missing.lox")])

        self.assertEqual(code, EX_NOINPUT)
        self.assertEqual(out, "")
        self.assertIn("cannot read", err)


class TestPrompt(unittest.TestCase):
    """Test cases for the interactive prompt."""

    def _run_prompt(self, text: str):
        lox = Lox()
        out = io.StringIO()
        with redirect_stdout(out):
            code = lox.run_prompt(io.StringIO(text))
        return lox, code, out.getvalue()

    def test_each_line_scanned_separately(self):
        lox, code, out = self._run_prompt("1\n+\n\n")

        self.assertEqual(code, EX_OK)
        self.assertEqual(out, "> 1 1\n\\d \n> + +\n\\d \n> ")

    def test_error_state_reset_per_line(self):
        lox, code, out = self._run_prompt("@\n1\n")

        self.assertEqual(code, EX_OK)
        self.assertIn("[line 1] Error: Unexpected character.", out)
        self.assertFalse(lox.had_error)

    def test_end_of_input_stops(self):
        lox, code, out = self._run_prompt("print")

        self.assertEqual(code, EX_OK)
        self.assertEqual(out, "> print print\n\\d \n> ")

    def test_whitespace_line_stops(self):
        lox, code, out = self._run_prompt("   \n1\n")

        self.assertEqual(out, "> ")

    def test_line_ending_counted(self):
        """The newline read with each prompt line advances the EOF token's line."""
        lox = Lox(use_repr=True)
        out = io.StringIO()
        with redirect_stdout(out):
            lox.run("1\n")

        self.assertEqual(out.getvalue().splitlines()[-1], "Token(EOF, '', None, 2)")


if __name__ == '__main__':
    unittest.main()
