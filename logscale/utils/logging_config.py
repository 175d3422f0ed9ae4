import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - [%(levelname)s] - %(message)s'

def setup_logging(level=logging.INFO, stream=None):
    """
    Configures logging for the command line tool.

    Library code only creates loggers; handlers are installed here so that
    importing logscale never changes the host application's logging.

    Args:
        level: The logging level (e.g., logging.INFO, logging.DEBUG).
        stream: Output stream for log records, stdout by default.
    """
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        stream=stream or sys.stdout,
        force=True
    )

def get_logger(name: str) -> logging.Logger:
    """
    Retrieves a logger for a logscale module.

    Args:
        name (str): The name for the logger, typically __name__.
    """
    return logging.getLogger(name)
