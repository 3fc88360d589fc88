import os
import unittest
from datetime import datetime, timezone
from unittest.mock import patch

from app_utils import format_timestamp, format_volume, get_env
from newsdesk.settings import DEFAULT_MARKETS_URL, load_settings


class SettingsTests(unittest.TestCase):
    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        settings = load_settings()
        self.assertEqual(settings.markets_url, DEFAULT_MARKETS_URL)
        self.assertEqual(settings.market_limit, 20)
        self.assertEqual(settings.articles_per_refresh, 15)
        self.assertEqual(settings.refresh_cron, "0 * * * *")
        self.assertFalse(settings.use_ai)

    @patch.dict(
        os.environ,
        {
            "ANTHROPIC_API_KEY": "sk-ant-abc",
            "NEWSDESK_ARTICLE_LIMIT": "5",
            "NEWSDESK_MARKET_LIMIT": "not-a-number",
            "NEWSDESK_GENERATION_WORKERS": "-3",
        },
        clear=True,
    )
    def test_env_overrides_and_invalid_values(self):
        with self.assertLogs("utils.config", level="WARNING"):
            settings = load_settings()
        self.assertTrue(settings.use_ai)
        self.assertEqual(settings.articles_per_refresh, 5)
        self.assertEqual(settings.market_limit, 20)
        self.assertEqual(settings.generation_workers, 8)


class GetEnvTests(unittest.TestCase):
    @patch.dict(os.environ, {"HOST": "  ", "DEBUG": " true "}, clear=True)
    def test_blank_values_fall_back_and_values_are_stripped(self):
        self.assertEqual(get_env("HOST", "0.0.0.0"), "0.0.0.0")
        self.assertEqual(get_env("DEBUG", "False"), "true")
        self.assertEqual(get_env("MISSING", "fallback"), "fallback")


class FormattingTests(unittest.TestCase):
    def test_format_volume(self):
        self.assertEqual(format_volume(0), "$0")
        self.assertEqual(format_volume(None), "$0")
        self.assertEqual(format_volume(950), "$950")
        self.assertEqual(format_volume(1_250_000), "$1.2M")
        self.assertEqual(format_volume(48_300), "$48.3K")

    def test_format_timestamp(self):
        moment = datetime(2024, 3, 5, 14, 30, tzinfo=timezone.utc)
        self.assertEqual(format_timestamp(moment), "Mar 05, 2024 14:30 UTC")
        self.assertEqual(format_timestamp(None), "")


if __name__ == "__main__":
    unittest.main()
