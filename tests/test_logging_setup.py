import io
import logging

from durationfmt.logging_setup import ROOT_LOGGER, configure_logging, get_logger


def test_configure_logging_formats_records():
    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers.clear()
    stream = io.StringIO()

    configure_logging(logging.INFO, stream=stream)
    get_logger("io_document").info("saved config")

    line = stream.getvalue().strip()
    assert line.endswith("INFO> saved config")
    assert line.startswith("[")
    logger.handlers.clear()


def test_configure_logging_reuses_handler():
    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers.clear()
    first = configure_logging()
    handlers = list(first.handlers)
    second = configure_logging(logging.DEBUG)
    assert second.handlers == handlers
    assert second.level == logging.DEBUG
    logger.handlers.clear()


def test_get_logger_names_are_namespaced():
    assert get_logger().name == ROOT_LOGGER
    assert get_logger("main").name == f"{ROOT_LOGGER}.main"
    assert get_logger(f"{ROOT_LOGGER}.fields").name == f"{ROOT_LOGGER}.fields"
