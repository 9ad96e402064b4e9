"""Tests for the logging setup helper."""

import logging

from rich.logging import RichHandler

from aletheia.util import setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_installs_rich_handler(self):
        """Test the package logger gets a rich handler and the level."""
        logger = setup_logging(logging.DEBUG)

        assert logger.name == "aletheia"
        assert logger.level == logging.DEBUG
        assert any(isinstance(h, RichHandler) for h in logger.handlers)

    def test_repeated_calls_do_not_stack_handlers(self):
        """Test calling twice leaves a single rich handler."""
        setup_logging()
        logger = setup_logging(logging.WARNING)

        rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
        assert logger.level == logging.WARNING

    def test_child_loggers_propagate(self):
        """Test module loggers inherit the package level."""
        setup_logging(logging.ERROR)

        child = logging.getLogger("aletheia.client")
        assert child.getEffectiveLevel() == logging.ERROR
