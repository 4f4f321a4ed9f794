import logging
import os
from datetime import datetime
import glob

MAX_LOG_FILES = 10

_LOGGER_INSTANCE = None
_LOG_FILE_HANDLER = None
_CONSOLE_HANDLER = None
_LOG_FILE_PATH = None


def _level_from(config):
    """Resolve config.log_level to a logging level; 'ALL' means DEBUG."""
    log_level_str = getattr(config, 'log_level', 'INFO').upper()
    if log_level_str == 'ALL':
        log_level_str = 'DEBUG'
    return log_level_str, getattr(logging, log_level_str, logging.INFO)


def setup_logging(config):
    """
    Configure (or update) logging for platemap.
    - At most one log file per process, and only when config.log_dir is set.
    - Calling again only updates the console level.
    Args:
        config: object with log_level and optionally log_dir attributes.
    Returns:
        logging.Logger
    """
    global _LOGGER_INSTANCE, _LOG_FILE_HANDLER, _CONSOLE_HANDLER, _LOG_FILE_PATH
    logger = logging.getLogger('platemap')
    logger.propagate = False
    log_level_str, log_level = _level_from(config)
    if _LOGGER_INSTANCE is not None:
        if _CONSOLE_HANDLER:
            _CONSOLE_HANDLER.setLevel(log_level)
        logger.info(f"Log level updated to: {log_level_str}")
        return logger

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    # Remove existing handlers (if any, for safety)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    log_dir = getattr(config, 'log_dir', '')
    fh = None
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(log_dir, f"platemap_log_{timestamp}.log")
        _LOG_FILE_PATH = log_file
        fh = logging.FileHandler(log_file)
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    logger.setLevel(logging.DEBUG)
    if fh is not None:
        logger.info(f"Logging started. Log file: {_LOG_FILE_PATH}")
        clean_old_log_files(log_dir)
    _LOGGER_INSTANCE = logger
    _LOG_FILE_HANDLER = fh
    _CONSOLE_HANDLER = ch
    return logger


def clean_old_log_files(log_dir):
    """
    Delete old log files once there are more than MAX_LOG_FILES.
    """
    log_files = sorted(glob.glob(os.path.join(log_dir, "platemap_log_*.log")))
    if len(log_files) > MAX_LOG_FILES:
        for old_file in log_files[:-MAX_LOG_FILES]:
            try:
                os.remove(old_file)
                logging.getLogger('platemap').info(f"Deleted old log file: {old_file}")
            except OSError as e:
                logging.getLogger('platemap').warning(f"Could not delete old log file {old_file}: {e}")


def reset_logging():
    """Drop the handlers installed by setup_logging."""
    global _LOGGER_INSTANCE, _LOG_FILE_HANDLER, _CONSOLE_HANDLER, _LOG_FILE_PATH
    logger = logging.getLogger('platemap')
    for handler in (_LOG_FILE_HANDLER, _CONSOLE_HANDLER):
        if handler is not None:
            logger.removeHandler(handler)
            handler.close()
    logger.propagate = True
    _LOGGER_INSTANCE = None
    _LOG_FILE_HANDLER = None
    _CONSOLE_HANDLER = None
    _LOG_FILE_PATH = None
