"""
Logging setup for SEO Analyzer
"""
import os
import logging
from typing import Optional


def setup_logging(log_level: str = "INFO", log_dir: Optional[str] = None) -> logging.Logger:
    """Setup console logging, plus file handlers when log_dir is given"""

    # Create formatters
    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
    )
    simple_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s'
    )

    # Root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Clear existing handlers
    root_logger.handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(simple_formatter)
    root_logger.addHandler(console_handler)

    perf_logger = logging.getLogger('performance')
    perf_logger.handlers.clear()
    perf_logger.setLevel(logging.INFO)
    perf_logger.propagate = True

    if not log_dir:
        return root_logger

    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    # File handler for all logs
    file_handler = logging.FileHandler(
        os.path.join(log_dir, 'analyzer.log'),
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(detailed_formatter)
    root_logger.addHandler(file_handler)

    # Error log handler
    error_handler = logging.FileHandler(
        os.path.join(log_dir, 'errors.log'),
        encoding='utf-8'
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(detailed_formatter)
    root_logger.addHandler(error_handler)

    # Performance timings go to their own file only
    perf_handler = logging.FileHandler(
        os.path.join(log_dir, 'performance.log'),
        encoding='utf-8'
    )
    perf_handler.setLevel(logging.INFO)
    perf_handler.setFormatter(simple_formatter)
    perf_logger.addHandler(perf_handler)
    perf_logger.propagate = False

    return root_logger
