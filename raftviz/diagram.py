"""Mermaid sequence diagram text for an event sequence."""

from typing import Iterable, List

from raftviz.events import Event

HEADER = "sequenceDiagram"


def participants(events: Iterable[Event]) -> List[str]:
    """Distinct ids in order of first appearance."""
    seen = {}
    for e in events:
        seen.setdefault(e.sender, None)
        seen.setdefault(e.recipient, None)
    return list(seen)


def render_sequence(events: Iterable[Event]) -> str:
    events = list(events)
    lines = [HEADER]
    lines.extend(f"participant {p}" for p in participants(events))
    lines.extend(f"{e.sender}->>{e.recipient}: {e.message}" for e in events)
    return "\n".join(lines) + "\n"
