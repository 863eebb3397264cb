import logging
import os


class Config:
    HAND_SIZE = 14
    MAX_COPIES = 4
    WHITESPACE = " \t\n"
    LOG_LEVEL = os.environ.get("RIICHI_HAND_NOTATION_LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    LOG_DATEFMT = '%Y-%m-%d-%H:%M:%S'


def setup_logging(level=None, log_file=None):
    """
    Configure root logging for scripts that use the library directly.

    level defaults to Config.LOG_LEVEL (a name like "DEBUG" or a logging int).
    log_file, when given, adds a FileHandler next to the console handler.
    """
    if level is None:
        level = Config.LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=level,
        format=Config.LOG_FORMAT,
        datefmt=Config.LOG_DATEFMT,
        handlers=handlers,
        force=True,
    )
    return logging.getLogger("riichi_hand_notation")
