"""Package logger configuration."""
import logging

from .config import settings

LOGGER_NAME = "reactive_topology"
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# Silent until the embedding application configures logging
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def configure_logging(level: str = None, log_file: str = None) -> logging.Logger:
    """Attach output handlers to the package logger once. Child loggers propagate to it."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level or settings.effective_log_level)

    if not any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        sh = logging.StreamHandler()
        sh.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(sh)

        log_file = log_file or settings.LOG_FILE
        if log_file:
            fh = logging.FileHandler(log_file)
            fh.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(fh)

    return logger
