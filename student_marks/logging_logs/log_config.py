"""
Logging configuration for the student marks service.
Centralizes all logging setup to follow DRY and SoC principles.
"""
import os
import time
import logging
from logging.handlers import RotatingFileHandler
from student_marks.config.settings import LogConfig

ROOT_LOGGER_NAME = "student_marks"

# Filter to prevent duplicate log messages
class DuplicateFilter(logging.Filter):
    def __init__(self, name=''):
        super().__init__(name)
        self.last_log = None
        self.last_time = 0

    def filter(self, record):
        current_log = (record.msg, record.args)
        current_time = time.time()

        # Same message within 0.1 seconds is dropped
        if current_log == self.last_log and current_time - self.last_time < 0.1:
            return False

        self.last_log = current_log
        self.last_time = current_time
        return True

def setup_logging(log_dir=None, level=None, console=True):
    """
    Set up logging for the student marks package.

    Args:
        log_dir: Directory for the rotating log file (defaults to LogConfig.LOG_DIR)
        level: Logging level name or number (defaults to LogConfig.LOG_LEVEL)
        console: Also log to stderr

    Returns:
        The package logger with file and console handlers
    """
    log_dir = log_dir or LogConfig.LOG_DIR
    level = level or LogConfig.LOG_LEVEL

    # Suppress MongoDB connection messages
    logging.getLogger('pymongo').setLevel(logging.WARNING)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Only configure if handlers haven't been added yet
    if logger.handlers:
        return logger

    logger.addFilter(DuplicateFilter())
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    try:
        os.makedirs(log_dir, exist_ok=True)
        # delay=True avoids opening the file until the first record
        file_handler = RotatingFileHandler(
            os.path.join(log_dir, LogConfig.LOG_FILE),
            maxBytes=LogConfig.MAX_LOG_SIZE,
            backupCount=LogConfig.BACKUP_COUNT,
            delay=True
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    except OSError as e:
        logging.getLogger(__name__).warning(f"Could not set up file logging: {e}")

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger

def get_logger(module_name=None):
    """Get a logger under the package namespace."""
    name = f"{ROOT_LOGGER_NAME}.{module_name}" if module_name else ROOT_LOGGER_NAME
    return logging.getLogger(name)
