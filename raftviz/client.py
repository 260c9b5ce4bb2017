"""
Raft Simulation (Mock) - terminal client

Drive a running server and watch the cluster from the terminal.

Usage:
    python -m raftviz.client simulate
    python -m raftviz.client events
    python -m raftviz.client watch --refresh 1
"""

import argparse
import os
import sys
import time
from typing import List, Optional

import requests

DEFAULT_URL = os.environ.get("RAFTVIZ_URL", "http://localhost:8088")

ROLE_BADGES = {
    "leader": "LEADER 👑",
    "candidate": "CANDIDATE ✍️",
    "follower": "FOLLOWER",
}


class RaftVizClient:
    """Thin wrapper over the server's HTTP routes."""

    def __init__(self, base_url: str = DEFAULT_URL, timeout: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _get(self, path: str) -> requests.Response:
        resp = requests.get(f"{self.base_url}{path}", timeout=self.timeout)
        resp.raise_for_status()
        return resp

    def _post(self, path: str) -> dict:
        resp = requests.post(f"{self.base_url}{path}", timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def simulate(self) -> dict:
        return self._post("/simulate")

    def reset(self) -> dict:
        return self._post("/reset")

    def events(self) -> List[dict]:
        return self._get("/events").json()

    def sequence(self) -> str:
        return self._get("/sequence").text

    def nodes(self) -> List[dict]:
        return self._get("/nodes").json()


def format_event(event: dict) -> str:
    return f"{event['at']}  {event['from']} -> {event['to']}: {event['msg']}"


def format_nodes(nodes: List[dict]) -> str:
    lines = ["Node | Term | Role", "-" * 30]
    for n in nodes:
        badge = ROLE_BADGES.get(n["role"], n["role"])
        lines.append(f" {n['id']:<3} | {n['term']:>4} | {badge}")
    return "\n".join(lines)


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def watch(client: RaftVizClient, refresh: float):
    while True:
        nodes = client.nodes()
        events = client.events()
        clear_screen()
        print("        👑  RAFT SIMULATION (MOCK)  👑")
        print("=" * 40)
        print(format_nodes(nodes))
        print("-" * 40)
        print(f"Events: {len(events)}")
        if events:
            print(f"Last:   {format_event(events[-1])}")
        print("\nPress Ctrl+C to stop.")
        time.sleep(refresh)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Raft Simulation (Mock) - client")
    parser.add_argument("--url", default=DEFAULT_URL, help="Server URL")
    parser.add_argument("--refresh", type=float, default=1.0, help="Refresh interval for watch")
    parser.add_argument("command", choices=["simulate", "reset", "events", "sequence", "nodes", "watch"])
    args = parser.parse_args(argv)

    client = RaftVizClient(args.url)
    try:
        if args.command == "simulate":
            print(client.simulate())
        elif args.command == "reset":
            print(client.reset())
        elif args.command == "events":
            for event in client.events():
                print(format_event(event))
        elif args.command == "sequence":
            print(client.sequence(), end="")
        elif args.command == "nodes":
            print(format_nodes(client.nodes()))
        else:
            watch(client, args.refresh)
    except requests.RequestException as e:
        print(f"❌ Request to {args.url} failed: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nStopped.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
