import logging, sys

LOG_FORMAT = "[%(asctime)s] %(levelname)s> %(message)s"
DATE_FORMAT = "%H:%M:%S"
ROOT_LOGGER = "durationfmt"


def configure_logging(level=logging.WARNING, stream=None) -> logging.Logger:
    """Attach a single stdout handler to the package logger."""
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(handler)
    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
