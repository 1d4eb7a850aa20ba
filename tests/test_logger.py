import logging

from config import settings
from topic_sentiment.logger import setup_logging


def test_setup_logging_defaults_to_configured_level():
    setup_logging()

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == logging.getLevelName(settings.LOG_LEVEL)


def test_setup_logging_accepts_explicit_level():
    setup_logging("DEBUG")

    assert logging.getLogger().level == logging.DEBUG
