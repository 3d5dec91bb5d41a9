from .app_logger import LOGGER_NAME, setup_logging

__all__ = ["LOGGER_NAME", "setup_logging"]
