import os
import subprocess
import sys
import unittest


class TestErrorMapping(unittest.TestCase):
    def test_missing_home_is_mapped_to_exit_code_and_message(self):
        env = os.environ.copy()
        env.pop("HOME", None)
        env.pop("USERPROFILE", None)

        proc = subprocess.run(
            [sys.executable, "-m", "pulse", "home"],
            check=False,
            capture_output=True,
            text=True,
            env=env,
        )

        self.assertEqual(proc.returncode, 4)
        self.assertIn("NotFound: Could not get home directory.", proc.stderr)
        self.assertEqual(proc.stdout, "")

    def test_home_from_environment(self):
        env = os.environ.copy()
        env["HOME"] = "/home/alice"
        env.pop("PULSE_FORMAT", None)

        proc = subprocess.run(
            [sys.executable, "-m", "pulse", "home"],
            check=False,
            capture_output=True,
            text=True,
            env=env,
        )

        self.assertEqual(proc.returncode, 0)
        self.assertEqual(proc.stdout, "/home/alice\n")


if __name__ == "__main__":
    unittest.main()
