import logging
import threading
from collections import deque
from typing import Any, Deque, Dict, List, Optional

# Record attributes (passed through ``extra``) copied into each render event.
EVENT_FIELDS = ("segments", "bytes", "code_page", "field", "value")
# Rejected parameters whose values are print payloads; only ints (sizes) survive.
PAYLOAD_FIELDS = frozenset({"content", "data", "values"})


def json_safe(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return repr(value)


def redact(field: Optional[str], value: Any) -> Any:
    if field in PAYLOAD_FIELDS and not isinstance(value, int):
        return "***"
    return json_safe(value)


class RenderEventHandler(logging.Handler):
    """Keeps the most recent render events as flat dicts for ``/logs``."""

    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict[str, Any]] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event: Dict[str, Any] = {
            "event": record.getMessage(),
            "level": record.levelname,
            "ts": record.created,
        }
        for name in EVENT_FIELDS:
            if hasattr(record, name):
                event[name] = getattr(record, name)
        if "value" in event:
            event["value"] = redact(event.get("field"), event["value"])
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict[str, Any]]:
        with self._lock:
            return list(self._events)


def create_logger(name: str, ring_size: int) -> logging.Logger:
    logger = logging.getLogger(name)
    if ring_buffer(logger) is not None:
        return logger
    logger.setLevel(logging.INFO)
    logger.addHandler(RenderEventHandler(max_entries=ring_size))
    return logger


def ring_buffer(logger: logging.Logger) -> Optional[RenderEventHandler]:
    for handler in logger.handlers:
        if isinstance(handler, RenderEventHandler):
            return handler
    return None
