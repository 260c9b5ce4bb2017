from raftviz.events import EventLog
from raftviz.nodes import NodeRegistry


class Cluster:
    """
    Aggregate of the node registry and the event log.

    Built once at startup and handed to the HTTP layer; there is no
    process-wide instance.
    """

    def __init__(self, size: int = 5):
        self.nodes = NodeRegistry(size)
        self.events = EventLog()

    def reset(self):
        """
        Nodes back to follower/term 0, then the log emptied.

        Each half is atomic under its own lock but the pair is not: the
        node locks and the log lock are never held together, so a reader
        can briefly see reset nodes next to a not yet cleared log.
        """
        self.nodes.reset_all()
        self.events.clear()
        print(f"🔄 Cluster reset ({len(self.nodes)} nodes back to follower/term 0)")

    def __len__(self) -> int:
        return len(self.nodes)
