"""
Activity logging and history.
"""

from .logger import ActivityLogger, LogResult
from .history import get_history_page, HistoryPage

__all__ = [
    "ActivityLogger",
    "LogResult",
    "get_history_page",
    "HistoryPage",
]
