"""
raftviz - a scripted Raft-style election rendered as a sequence diagram.

The "simulation" is a mock: node N1 always wins and every heartbeat lands.
"""

from raftviz.cluster import Cluster
from raftviz.diagram import render_sequence
from raftviz.events import Event, EventLog
from raftviz.nodes import Node, NodeRegistry, Role, UnknownNodeError
from raftviz.scenario import ScenarioConfig, ScenarioRunner

__all__ = [
    "Cluster",
    "Event",
    "EventLog",
    "Node",
    "NodeRegistry",
    "Role",
    "ScenarioConfig",
    "ScenarioRunner",
    "UnknownNodeError",
    "render_sequence",
]
