"""
Scan history: the most recent decoded payloads, newest first.
"""
from thaiqr.history.store import HistoryItem, HistorySource, HistoryStore, MAX_HISTORY_ITEMS

__all__ = ["HistoryItem", "HistorySource", "HistoryStore", "MAX_HISTORY_ITEMS"]
