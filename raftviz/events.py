"""
Event Log - ordered record of every message the scenario emits.

One lock guards the whole sequence. Readers only ever get a snapshot,
so nobody observes a half-appended event.
"""

import threading
import time
from dataclasses import dataclass
from typing import List, Tuple


def now_ms() -> int:
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class Event:
    sender: str
    recipient: str
    message: str
    timestamp: int

    def to_dict(self) -> dict:
        """Wire shape used by GET /events."""
        return {
            "from": self.sender,
            "to": self.recipient,
            "msg": self.message,
            "at": self.timestamp,
        }


class EventLog:
    """Unbounded in-memory append log."""

    def __init__(self):
        self._events: List[Event] = []
        self._lock = threading.Lock()

    def append(self, event: Event):
        with self._lock:
            self._events.append(event)

    def record(self, sender: str, recipient: str, message: str) -> Event:
        """Stamp and append a message in one step."""
        with self._lock:
            at = now_ms()
            # wall clock can step backwards; keep the log ordered anyway
            if self._events and at < self._events[-1].timestamp:
                at = self._events[-1].timestamp
            event = Event(sender, recipient, message, at)
            self._events.append(event)
        return event

    def snapshot(self) -> Tuple[Event, ...]:
        with self._lock:
            return tuple(self._events)

    def clear(self):
        with self._lock:
            self._events = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
