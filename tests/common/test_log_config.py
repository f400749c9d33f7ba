"""Tests for shopify_csv/common/log_config.py"""

import io
import logging
import sys

from shopify_csv.common.constants import LOGGER_NAME
from shopify_csv.common.log_config import setup_logging


class TestSetupLogging:
    def teardown_method(self):
        """Reset logger between tests."""
        logger = logging.getLogger(LOGGER_NAME)
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)

    def test_default_level_is_info(self):
        setup_logging()
        logger = logging.getLogger(LOGGER_NAME)
        assert logger.level == logging.INFO

    def test_verbose_sets_debug(self):
        setup_logging(verbose=True)
        logger = logging.getLogger(LOGGER_NAME)
        assert logger.level == logging.DEBUG

    def test_quiet_sets_warning(self):
        setup_logging(quiet=True)
        logger = logging.getLogger(LOGGER_NAME)
        assert logger.level == logging.WARNING

    def test_handler_outputs_to_stderr(self):
        setup_logging()
        logger = logging.getLogger(LOGGER_NAME)
        assert len(logger.handlers) == 1
        handler = logger.handlers[0]
        assert handler.stream is sys.stderr

    def test_repeated_setup_keeps_one_handler(self):
        setup_logging()
        setup_logging(verbose=True)
        assert len(logging.getLogger(LOGGER_NAME).handlers) == 1

    def test_module_loggers_are_children(self):
        setup_logging(quiet=True)
        child = logging.getLogger("shopify_csv.shopify.csv_parser")
        assert child.getEffectiveLevel() == logging.WARNING

    def test_verbose_wins_over_quiet(self):
        assert setup_logging(verbose=True, quiet=True).level == logging.DEBUG

    def test_custom_stream(self):
        stream = io.StringIO()
        setup_logging(stream=stream)
        logging.getLogger("shopify_csv.operations.inventory").info("Updated %d SKUs", 2)
        assert stream.getvalue() == "INFO     shopify_csv.operations.inventory: Updated 2 SKUs\n"
