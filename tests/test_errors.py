import pickle
import unittest

from pulse.errors import (
    EXIT_NOT_FOUND,
    EXIT_RUNTIME,
    NOT_FOUND,
    PulseError,
    Result,
    not_found,
)


class TestPulseError(unittest.TestCase):
    def test_display_string(self):
        err = PulseError("NotFound", "Could not get home directory.")
        self.assertEqual(str(err), "NotFound: Could not get home directory.")
        self.assertEqual(err.display(), "NotFound: Could not get home directory.")

    def test_fields(self):
        err = PulseError("NotFound", "gone")
        self.assertEqual(err.kind, "NotFound")
        self.assertEqual(err.message, "gone")
        self.assertEqual(err.code, EXIT_RUNTIME)

    def test_empty_kind_rejected(self):
        with self.assertRaises(ValueError):
            PulseError("", "no kind")

    def test_empty_message_allowed(self):
        self.assertEqual(str(PulseError("Odd", "")), "Odd: ")

    def test_immutable(self):
        err = PulseError("NotFound", "gone")
        with self.assertRaises(AttributeError):
            err.kind = "Other"
        with self.assertRaises(AttributeError):
            err.message = "changed"
        self.assertEqual(str(err), "NotFound: gone")

    def test_can_be_raised_and_caught(self):
        with self.assertRaises(PulseError) as cm:
            raise not_found("missing")
        self.assertEqual(cm.exception.kind, NOT_FOUND)
        self.assertEqual(cm.exception.code, EXIT_NOT_FOUND)
        self.assertIsNotNone(cm.exception.__traceback__)

    def test_pickle_keeps_fields(self):
        err = pickle.loads(pickle.dumps(not_found("missing")))
        self.assertEqual(err, not_found("missing"))
        self.assertEqual(err.code, EXIT_NOT_FOUND)


class TestResult(unittest.TestCase):
    def test_success(self):
        r = Result.success("/tmp")
        self.assertTrue(r.ok)
        self.assertEqual(r.unwrap(), "/tmp")
        self.assertIsNone(r.error)

    def test_failure_unwrap_raises(self):
        r = Result.failure(not_found("nope"))
        self.assertFalse(r.ok)
        with self.assertRaises(PulseError) as cm:
            r.unwrap()
        self.assertEqual(str(cm.exception), "NotFound: nope")

    def test_needs_exactly_one_side(self):
        with self.assertRaises(ValueError):
            Result()
        with self.assertRaises(ValueError):
            Result(value="/x", error=not_found("y"))


if __name__ == "__main__":
    unittest.main()
