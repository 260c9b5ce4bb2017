"""
Server configuration.

Every flag falls back to a RAFTVIZ_* environment variable, then to the
built-in default.
"""

import argparse
import os
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8088
    nodes: int = 5
    rounds: int = 3
    interval: float = 0.05
    initial_run: bool = True
    log_level: str = "info"


def build_parser() -> argparse.ArgumentParser:
    env = os.environ
    defaults = ServerConfig()
    parser = argparse.ArgumentParser(description="Raft Simulation (Mock) - Sequence Diagram server")
    parser.add_argument("--host", type=str, default=env.get("RAFTVIZ_HOST", defaults.host))
    parser.add_argument("--port", type=int, default=int(env.get("RAFTVIZ_PORT", defaults.port)))
    parser.add_argument("--nodes", type=int, default=int(env.get("RAFTVIZ_NODES", defaults.nodes)),
                        help="Number of nodes in the cluster")
    parser.add_argument("--rounds", type=int, default=int(env.get("RAFTVIZ_ROUNDS", defaults.rounds)),
                        help="Heartbeat rounds per scenario run")
    parser.add_argument("--interval", type=float,
                        default=float(env.get("RAFTVIZ_INTERVAL", defaults.interval)),
                        help="Pause between heartbeat rounds in seconds")
    parser.add_argument("--no-initial-run", dest="initial_run", action="store_false",
                        help="Start with an empty event log")
    parser.add_argument("--log-level", type=str, default=env.get("RAFTVIZ_LOG_LEVEL", defaults.log_level),
                        choices=["critical", "error", "warning", "info", "debug"])
    return parser


def parse_args(argv: Optional[List[str]] = None) -> ServerConfig:
    args = build_parser().parse_args(argv)
    if args.nodes < 0:
        raise SystemExit("--nodes must be >= 0")
    if args.rounds < 0:
        raise SystemExit("--rounds must be >= 0")
    if args.interval < 0:
        raise SystemExit("--interval must be >= 0")
    return ServerConfig(
        host=args.host,
        port=args.port,
        nodes=args.nodes,
        rounds=args.rounds,
        interval=args.interval,
        initial_run=args.initial_run,
        log_level=args.log_level,
    )
