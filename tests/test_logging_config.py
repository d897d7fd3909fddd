import logging
import unittest

from config.logging_config import NOISY_LOGGERS, setup_logging


class TestSetupLogging(unittest.TestCase):
    def setUp(self):
        self.saved = {name: logging.getLogger(name).level for name in NOISY_LOGGERS}

    def tearDown(self):
        for name, level in self.saved.items():
            logging.getLogger(name).setLevel(level)

    def test_http_client_loggers_are_quiet_at_info(self):
        setup_logging("INFO")
        for name in NOISY_LOGGERS:
            self.assertEqual(logging.getLogger(name).level, logging.WARNING)

    def test_http_client_loggers_follow_debug(self):
        setup_logging("debug")
        for name in NOISY_LOGGERS:
            self.assertEqual(logging.getLogger(name).level, logging.DEBUG)

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("verbose", quiet_loggers=["ollama_translator.test"])
        self.assertEqual(
            logging.getLogger("ollama_translator.test").level, logging.WARNING
        )


if __name__ == "__main__":
    unittest.main()
