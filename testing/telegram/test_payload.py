"""Tests for the request payload."""

import unittest

from parse_mode_setter.telegram.payload import Payload


class TestPayloadCopy(unittest.TestCase):
    """Tests for Payload.copy method."""

    def test_copy_has_independent_params(self) -> None:
        """Test that writing to the copy's params leaves the original alone."""
        payload = Payload(params={"text": "hi"})

        copied = payload.copy()
        copied.params["parse_mode"] = "HTML"

        self.assertEqual(payload.params, {"text": "hi"})
        self.assertEqual(copied.params, {"text": "hi", "parse_mode": "HTML"})

    def test_copy_is_shallow(self) -> None:
        """Test that nested values and files are shared, not copied."""
        media = [{"caption": "a"}]
        files = {"photo": b"data"}
        payload = Payload(params={"media": media}, files=files)

        copied = payload.copy()

        self.assertIs(copied.params["media"], media)
        self.assertIs(copied.files, files)

    def test_defaults_are_not_shared(self) -> None:
        """Test that default params are a fresh dict per payload."""
        first = Payload()
        second = Payload()

        first.params["text"] = "hi"

        self.assertEqual(second.params, {})
        self.assertEqual(second.files, {})


if __name__ == "__main__":
    unittest.main()
