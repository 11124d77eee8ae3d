"""
Tests for the ember command-line front end.

Author: xwest
"""

import io
import unittest
import sys
import os
import tempfile
from contextlib import redirect_stdout, redirect_stderr

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from ember.cli import main, LOG, EXIT_OK, EXIT_ERROR, EXIT_USAGE


class TestCli(unittest.TestCase):

    def _main(self, argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            code = main(argv)
        return code, stdout.getvalue(), stderr.getvalue()

    def test_tokens_inline(self):
        code, out, _ = self._main(["tokens", "-e", "let x = 1"])
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(len(out.splitlines()), 4)
        self.assertIn("INTEGER(1)", out)

    def test_tokens_lexical_error(self):
        code, out, _ = self._main(["tokens", "-e", "let 'oops"])
        self.assertEqual(code, EXIT_ERROR)
        self.assertIn("ERROR[L002]", out)

    def test_run_inline(self):
        code, out, _ = self._main(["run", "-e", 'let x = 10; println("hi")'])
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(out, "hi\n")

    def test_run_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "hello.em")
            with open(path, "w", encoding="utf-8") as f:
                f.write("# hello\nprintln('héllo')\nprintln(-7);\n")
            code, out, _ = self._main(["run", path])
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(out, "héllo\n-7\n")

    def test_run_execution_error(self):
        code, _, err = self._main(["run", "-e", "return 1"])
        self.assertEqual(code, EXIT_ERROR)
        self.assertIn("Unexpected token", err)

    def test_run_lexical_error(self):
        code, out, err = self._main(["run", "-e", "println(2147483648)"])
        self.assertEqual(code, EXIT_ERROR)
        self.assertEqual(out, "")
        self.assertIn("ERROR[L007]", err)

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            code, _, _ = self._main(["run", os.path.join(tmp, "missing.em")])
        self.assertEqual(code, EXIT_USAGE)

    def test_logger_lives_under_package_namespace(self):
        self.assertEqual(LOG.name, "ember.cli")

    def test_file_or_source_required(self):
        with self.assertRaises(SystemExit):
            self._main(["run"])


if __name__ == '__main__':
    unittest.main()
