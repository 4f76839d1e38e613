import os
import unittest
from unittest import mock

import lotto_api.config as config_module


class SettingsTests(unittest.TestCase):
    def setUp(self) -> None:
        config_module.load_settings.cache_clear()

    def tearDown(self) -> None:
        config_module.load_settings.cache_clear()

    @mock.patch("lotto_api.config.load_dotenv")
    def test_debug_off_by_default(self, _load_dotenv) -> None:
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop("FLASK_DEBUG", None)
            settings = config_module.load_settings()
        self.assertFalse(settings.flask.debug)

    @mock.patch("lotto_api.config.load_dotenv")
    def test_debug_enabled_explicitly(self, _load_dotenv) -> None:
        with mock.patch.dict(os.environ, {"FLASK_DEBUG": "1"}):
            settings = config_module.load_settings()
        self.assertTrue(settings.flask.debug)

    @mock.patch("lotto_api.config.load_dotenv")
    def test_invalid_timezone_rejected(self, _load_dotenv) -> None:
        with mock.patch.dict(os.environ, {"DRAW_TIMEZONE": "Not/AZone"}):
            with self.assertRaises(RuntimeError):
                config_module.load_settings()


if __name__ == "__main__":
    unittest.main()
