__all__ = [
    "Logger",
    "get_logger",
    "logger",
]

from readme_bumper.utils.logging.default import Logger
from readme_bumper.utils.logging.base_logger import get_logger, logger
