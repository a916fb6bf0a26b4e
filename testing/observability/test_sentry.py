"""Tests for Sentry setup."""

import os
import unittest
from unittest.mock import MagicMock, patch

from parse_mode_setter.observability.sentry import init_sentry


class TestInitSentry(unittest.TestCase):
    """Tests for init_sentry function."""

    @patch("parse_mode_setter.observability.sentry.sentry_sdk.init")
    def test_no_dsn_is_a_no_op(self, mock_init: MagicMock) -> None:
        """Test that Sentry is not initialised without SENTRY_DSN."""
        with patch.dict(os.environ, {}, clear=True):
            init_sentry()

        mock_init.assert_not_called()

    @patch("parse_mode_setter.observability.sentry.sentry_sdk.init")
    def test_dsn_initialises_sentry(self, mock_init: MagicMock) -> None:
        """Test that Sentry is initialised with the DSN and environment."""
        env = {"SENTRY_DSN": "https://key@sentry.example.com/1", "APP_ENV": "prod"}
        with patch.dict(os.environ, env, clear=True):
            init_sentry()

        mock_init.assert_called_once()
        call_kwargs = mock_init.call_args.kwargs
        self.assertEqual(call_kwargs["dsn"], env["SENTRY_DSN"])
        self.assertEqual(call_kwargs["environment"], "prod")
        self.assertFalse(call_kwargs["send_default_pii"])


if __name__ == "__main__":
    unittest.main()
