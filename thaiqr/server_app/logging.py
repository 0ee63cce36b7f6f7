"""
In-memory event log for the local service.

Events are kept in a bounded ring buffer and served at ``GET /logs``. Detail
keys that can identify a payer or a bill are masked when the event is stored,
so nothing sensitive reaches the buffer whichever module logged it.
"""
import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional

MASK = "***"

# Detail keys holding biller or payer identifiers, or whole payloads.
REDACTED_KEYS = frozenset({"biller_id", "reference1", "reference2", "payload", "qr_string", "raw_data"})


def redact(details: Optional[dict]) -> dict:
    """Return a copy of ``details`` with sensitive values replaced by ``MASK``."""
    if not details:
        return {}
    return {key: MASK if key in REDACTED_KEYS else value for key, value in details.items()}


class RingBufferHandler(logging.Handler):
    """Keeps the last ``max_entries`` records as plain event dicts."""

    def __init__(self, max_entries: int = 200):
        super().__init__()
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    @property
    def max_entries(self) -> int:
        return self._events.maxlen

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "logger": record.name,
            "ts": record.created,
            "details": redact(getattr(record, "details", None)),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self, event: Optional[str] = None) -> List[Dict]:
        """Oldest first; ``event`` keeps only events with that name."""
        with self._lock:
            events = list(self._events)
        if event is None:
            return events
        return [e for e in events if e["event"] == event]


def create_logger(name: str, ring_size: int, level: str = "INFO") -> logging.Logger:
    """
    Attach a ``RingBufferHandler`` to the ``name`` logger.

    Calling it again for the same logger returns it unchanged. Library modules
    log under child loggers (``thaiqr.parsing...``), so their events land in
    the same buffer.
    """
    logger = logging.getLogger(name)
    if ring_buffer(logger) is not None:
        return logger
    logger.setLevel(level.upper())
    handler = RingBufferHandler(max_entries=ring_size)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def ring_buffer(logger: logging.Logger) -> Optional[RingBufferHandler]:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None
