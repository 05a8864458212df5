# logger.py - Centralized logging configuration
import os
import logging
from logging.handlers import RotatingFileHandler

FILE_FORMAT = "%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]"
CONSOLE_FORMAT = "%(name)s - %(levelname)s - %(message)s"
MAX_LOG_BYTES = 10240
LOG_BACKUPS = 10


def _file_handler(path, level):
    handler = RotatingFileHandler(path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    handler.setLevel(level)
    return handler


def _console_handler():
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handler.setLevel(logging.DEBUG)
    return handler


def setup_logger(name, log_file=None, level=logging.INFO):
    """
    Logger writing to LOG_DIR/<name>.log with rotation.
    Outside production the same records are echoed to the console.
    """
    log_dir = os.environ.get("LOG_DIR", "logs")
    os.makedirs(log_dir, exist_ok=True)

    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(level)
    logger.addHandler(_file_handler(log_file or os.path.join(log_dir, f"{name}.log"), level))
    if os.environ.get("FLASK_ENV") != "production":
        logger.addHandler(_console_handler())

    return logger


app_logger = setup_logger("app")
auth_logger = setup_logger("auth")
transactions_logger = setup_logger("transactions")
storage_logger = setup_logger("storage")
