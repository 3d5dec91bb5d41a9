import logging
from typing import Optional

from textual.logging import TextualHandler

from ..config import LazyPostConfig, get_config

LOGGER_NAME = "lazypost_tui"


def setup_logging(config: Optional[LazyPostConfig] = None) -> logging.Logger:
    """
    Set up logging (Textual devtools + optional file).

    All package loggers live below `lazypost_tui`, so configuring that one
    logger covers every module.
    """
    config = config or get_config()

    # Level from config (e.g. "debug" -> logging.DEBUG)
    target_level = getattr(logging, config.log_level.value.upper(), logging.INFO)

    # 1. Devtools console (only visible with `textual console`)
    textual_handler = TextualHandler()
    textual_handler.setLevel(target_level)
    textual_handler.setFormatter(logging.Formatter('%(name)s - %(message)s'))

    handlers_list = [textual_handler]

    # 2. File handler, when enabled
    if config.log_to_file:
        try:
            file_handler = logging.FileHandler(config.log_file_path, mode='a', encoding='utf-8')
            file_handler.setLevel(target_level)
            file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            file_handler.setFormatter(file_formatter)
            handlers_list.append(file_handler)
        except OSError as e:
            print(f"[LazyPost] Error setting up file logging: {e}")

    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers = handlers_list
    logger.propagate = False
    logger.setLevel(target_level)
    return logger
