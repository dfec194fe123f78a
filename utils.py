"""
Utility functions for text handling and performance timing
"""
import re
import time
import logging

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(text) -> str:
    """Collapse whitespace runs to a single space and trim"""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", str(text)).strip()


def safe_extract_text(element, default: str = "") -> str:
    """Safely extract normalized text from a BeautifulSoup element"""
    if element is None:
        return default
    return normalize_whitespace(element.get_text())


def safe_extract_attribute(element, attribute: str, default: str = "") -> str:
    """Safely extract an attribute from a BeautifulSoup element.

    Multi-valued attributes (``rel``, ``class``) come back joined by spaces.
    """
    if element is None:
        return default
    value = element.get(attribute)
    if value is None:
        return default
    if isinstance(value, (list, tuple)):
        value = " ".join(value)
    return value


class PerformanceMonitor:
    """Monitor and log performance metrics"""

    def __init__(self):
        self.metrics = {}

    def start_timer(self, operation: str):
        """Start timing an operation"""
        self.metrics[operation] = {'start': time.time()}

    def end_timer(self, operation: str) -> float:
        """End timing and log results"""
        entry = self.metrics.get(operation)
        if not entry:
            return 0
        duration = time.time() - entry['start']
        entry['duration'] = duration
        logging.getLogger('performance').info(f"Operation '{operation}' completed in {duration:.2f} seconds")
        logger.debug(f"Operation '{operation}' completed in {duration:.2f} seconds")
        return duration

    def get_metrics(self) -> dict:
        """Get all recorded metrics"""
        return self.metrics.copy()
