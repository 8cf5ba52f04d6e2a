"""Tests for the command built by run_tests.py."""

import sys
import unittest
from pathlib import Path
from unittest import mock

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import run_tests


class TestRunner(unittest.TestCase):
    """Test the pytest command line assembled by the runner."""

    def run_main(self, *argv):
        with mock.patch.object(sys, "argv", ["run_tests.py", *argv]), \
                mock.patch("run_tests.subprocess.run") as run:
            run.return_value.returncode = 0
            self.assertEqual(run_tests.main(), 0)
        return run.call_args[0][0]

    def test_slow_tests_skipped_by_default(self):
        """Test that the default run deselects slow tests."""
        cmd = self.run_main()
        self.assertEqual(cmd[1:3], ["-m", "pytest"])
        self.assertEqual(cmd[-2:], ["-m", "not slow"])

    def test_all_includes_slow_tests(self):
        """Test that --all drops the marker filter."""
        self.assertNotIn("not slow", self.run_main("--all"))

    def test_extra_arguments_passed_through(self):
        """Test that unknown arguments reach pytest."""
        cmd = self.run_main("-k", "codec")
        self.assertIn("-k", cmd)
        self.assertIn("codec", cmd)
        self.assertNotIn("--all", cmd)


if __name__ == "__main__":
    unittest.main()
