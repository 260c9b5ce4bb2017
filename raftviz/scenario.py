"""
Scenario Runner - the scripted "simulation".

This is a mock. There is no vote counting and no term comparison:
the first node always becomes candidate, every peer always grants its
vote, and the leader then sends a few rounds of heartbeats.
"""

import time
from dataclasses import dataclass
from typing import Optional

from raftviz.cluster import Cluster
from raftviz.nodes import Role


@dataclass
class ScenarioConfig:
    term: int = 1
    heartbeat_rounds: int = 3
    heartbeat_interval: float = 0.05  # seconds between rounds, 0 disables


class ScenarioRunner:
    def __init__(self, cluster: Cluster, config: Optional[ScenarioConfig] = None):
        self.cluster = cluster
        self.config = config or ScenarioConfig()

    def run(self) -> int:
        """Run the election + heartbeat script once. Returns events recorded."""
        nodes = self.cluster.nodes
        log = self.cluster.events
        if len(nodes) == 0:
            return 0

        term = self.config.term
        candidate = nodes[0]
        peers = list(nodes)[1:]
        recorded = 0

        # Election: forced to the configured term, not incremented per run
        nodes.set_role(candidate.id, Role.CANDIDATE)
        nodes.set_term(candidate.id, term, force=True)

        for peer in peers:
            log.record(candidate.id, peer.id, f"RequestVote(term={term})")
            log.record(peer.id, candidate.id, "VoteGranted")
            recorded += 2

        nodes.set_role(candidate.id, Role.LEADER)
        print(f"[{candidate.id}] 👑 Elected LEADER for term {term}")

        for _ in range(self.config.heartbeat_rounds):
            for peer in peers:
                log.record(candidate.id, peer.id, f"AppendEntries(term={term}, heartbeat)")
                recorded += 1
            if self.config.heartbeat_interval > 0:
                time.sleep(self.config.heartbeat_interval)

        return recorded
