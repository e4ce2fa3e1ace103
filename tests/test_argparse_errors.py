import io
import unittest
from contextlib import redirect_stdout, redirect_stderr
from pulse.__main__ import main


class TestArgparseErrors(unittest.TestCase):
    def run_invalid(self, *argv):
        out = io.StringIO()
        err = io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            with self.assertRaises(SystemExit) as cm:
                main(list(argv))
        return cm.exception.code, err.getvalue()

    def test_invalid_log_level(self):
        # invalid choice should print error to stderr and exit 2
        code, err = self.run_invalid("--log-level", "VERBOSE", "cwd")
        self.assertEqual(code, 2)
        self.assertIn("invalid choice", err)

    def test_invalid_format(self):
        code, err = self.run_invalid("home", "--format", "yaml")
        self.assertEqual(code, 2)
        self.assertIn("invalid choice", err)

    def test_path_requires_argument(self):
        code, err = self.run_invalid("path")
        self.assertEqual(code, 2)
        self.assertIn("PATH", err)
