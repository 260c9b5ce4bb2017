"""
Raft Simulation (Mock) - HTTP server

Serves the scripted election as JSON (/events), as Mermaid text
(/sequence) and as a small HTML viewer (/).

Usage:
    python -m raftviz.server --port 8088
    # Then open http://localhost:8088/ in a browser
"""

import logging
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field

from raftviz.cluster import Cluster
from raftviz.config import ServerConfig, parse_args
from raftviz.diagram import render_sequence
from raftviz.nodes import UnknownNodeError
from raftviz.page import INDEX_HTML
from raftviz.scenario import ScenarioConfig, ScenarioRunner

# ========================
# Logging Configuration
# ========================

POLLED_ENDPOINTS = ["GET /events", "GET /sequence", "GET /health"]


class PollingFilter(logging.Filter):
    """Filter to suppress access logs for routes the viewer page polls."""
    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        return not any(endpoint in msg for endpoint in POLLED_ENDPOINTS)


# Apply filter to uvicorn access logger
logging.getLogger("uvicorn.access").addFilter(PollingFilter())

# ========================
# Pydantic Models
# ========================

class EventOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sender: str = Field(alias="from")
    recipient: str = Field(alias="to")
    msg: str
    at: int


class NodeOut(BaseModel):
    id: str
    role: str
    term: int


class OkReply(BaseModel):
    ok: bool = True


class HealthReply(BaseModel):
    status: str
    nodes: int
    events: int

# ========================
# FastAPI App
# ========================

def create_app(cluster: Cluster, runner: Optional[ScenarioRunner] = None) -> FastAPI:
    """Build the app around an already constructed cluster."""
    app = FastAPI(title="Raft Simulation (Mock)")
    app.state.cluster = cluster
    app.state.runner = runner or ScenarioRunner(cluster)

    def get_cluster(request: Request) -> Cluster:
        return request.app.state.cluster

    @app.get("/", response_class=HTMLResponse)
    def index():
        return HTMLResponse(content=INDEX_HTML)

    @app.get("/events", response_model=List[EventOut])
    def events(request: Request):
        """Full event log as {from, to, msg, at} objects."""
        return [e.to_dict() for e in get_cluster(request).events.snapshot()]

    @app.get("/sequence", response_class=PlainTextResponse)
    def sequence(request: Request):
        return PlainTextResponse(render_sequence(get_cluster(request).events.snapshot()))

    # Sync handler: the heartbeat pause runs in the threadpool, other
    # requests keep being served while a scenario is in progress.
    @app.post("/simulate", response_model=OkReply)
    def simulate(request: Request):
        """Run one election + heartbeat scenario."""
        request.app.state.runner.run()
        return OkReply()

    @app.post("/reset", response_model=OkReply)
    def reset(request: Request):
        """Clear the event log and return every node to follower/term 0."""
        get_cluster(request).reset()
        return OkReply()

    @app.get("/nodes", response_model=List[NodeOut])
    def nodes(request: Request):
        return get_cluster(request).nodes.snapshot()

    @app.get("/nodes/{node_id}", response_model=NodeOut)
    def node(node_id: str, request: Request):
        try:
            return get_cluster(request).nodes.get(node_id).snapshot()
        except UnknownNodeError:
            raise HTTPException(status_code=404, detail=f"Unknown node '{node_id}'")

    @app.get("/health", response_model=HealthReply)
    def health(request: Request):
        cluster = get_cluster(request)
        return HealthReply(status="ok", nodes=len(cluster.nodes), events=len(cluster.events))

    return app


def build(config: ServerConfig) -> FastAPI:
    cluster = Cluster(config.nodes)
    runner = ScenarioRunner(cluster, ScenarioConfig(
        heartbeat_rounds=config.rounds,
        heartbeat_interval=config.interval,
    ))
    if config.initial_run:
        runner.run()
    return create_app(cluster, runner)

# ========================
# Main Entry Point
# ========================

def main(argv: Optional[List[str]] = None):
    config = parse_args(argv)
    app = build(config)

    print(f"📈 Raft Simulation (Mock) running on http://localhost:{config.port}")
    print(f"   Nodes: {config.nodes}, heartbeat rounds: {config.rounds}, interval: {config.interval}s")

    # uvicorn exits non-zero if the port cannot be bound
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level)


if __name__ == "__main__":
    main()
