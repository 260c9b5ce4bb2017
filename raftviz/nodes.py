"""
Node Registry - the fixed set of cluster members.

Locking:
- every Node carries its own lock, so touching N1 never blocks N2
- the registry lock covers whole-registry operations (reset, enumeration)
Neither lock is ever held while the event log lock is held.
"""

import threading
from enum import Enum
from typing import Dict, Iterator, List, Union


class Role(str, Enum):
    FOLLOWER = "follower"
    CANDIDATE = "candidate"
    LEADER = "leader"


class UnknownNodeError(KeyError):
    """Raised when a node id is not part of the registry."""


class Node:
    def __init__(self, node_id: str):
        self.id = node_id
        self.role = Role.FOLLOWER
        self.term = 0
        self.lock = threading.Lock()

    def snapshot(self) -> dict:
        with self.lock:
            return {"id": self.id, "role": self.role.value, "term": self.term}

    def __repr__(self):
        return f"Node({self.id!r}, role={self.role.value}, term={self.term})"


class NodeRegistry:
    """Nodes N1..Nn, created once; cardinality never changes."""

    def __init__(self, size: int = 5):
        if size < 0:
            raise ValueError(f"cluster size must be >= 0, got {size}")
        self._nodes: List[Node] = [Node(f"N{i + 1}") for i in range(size)]
        self._by_id: Dict[str, Node] = {n.id: n for n in self._nodes}
        self._lock = threading.Lock()

    def get(self, node_id: str) -> Node:
        try:
            return self._by_id[node_id]
        except KeyError:
            raise UnknownNodeError(node_id) from None

    def set_role(self, node_id: str, role: Union[Role, str]):
        node = self.get(node_id)
        role = Role(role)
        with node.lock:
            node.role = role

    def set_term(self, node_id: str, term: int, force: bool = False):
        """
        Set a node's term. Terms only move forward unless force is set,
        which the scripted election uses to pin the candidate's term.
        """
        node = self.get(node_id)
        if term < 0:
            raise ValueError(f"term must be >= 0, got {term}")
        with node.lock:
            if term < node.term and not force:
                raise ValueError(
                    f"term for {node_id} cannot go backwards ({node.term} -> {term})"
                )
            node.term = term

    def reset_all(self):
        """Every node back to follower / term 0."""
        with self._lock:
            for node in self._nodes:
                with node.lock:
                    node.role = Role.FOLLOWER
                    node.term = 0

    def snapshot(self) -> List[dict]:
        with self._lock:
            return [node.snapshot() for node in self._nodes]

    def ids(self) -> List[str]:
        return [n.id for n in self._nodes]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __getitem__(self, index: int) -> Node:
        return self._nodes[index]
