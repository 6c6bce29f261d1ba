"""
main.py — Graph Algorithm Trace Engine Flask App
==================================================
JSON API in front of the trace engine.  Rendering is the client's job;
every route answers with plain data.

Routes:
  GET  /api/algorithms         – registry listing
  GET  /api/graph              – current graph
  POST /api/graph/generate     – generate a random graph
  POST /api/graph/import       – import an adjacency matrix or edge list
  POST /api/run                – run an algorithm, return trace + metrics
  POST /api/step/next          – advance one step
  POST /api/step/prev          – rewind one step
  POST /api/step/goto          – jump to step N
  POST /api/compare            – run two algorithms on the same graph

State management:
  Each user's Flask session holds:
    • graph        – serialised Graph
    • run          – algorithm / start / end / heuristic of the last run
    • current_step – cursor position
  Traces are NOT stored: they are deterministic, so step routes rebuild
  the trace from the run parameters and seek to the requested index.
"""

import logging
import secrets
from typing import Any, Dict, Optional, Tuple

from flask import Flask, request, jsonify, session

import config
from graph import Graph
from graph.heuristics import assign_heuristics
from algorithms import get_algorithm, list_algorithms
from engine import Stepper, Recorder, compare

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = config.SECRET_KEY or secrets.token_hex(32)


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_graph() -> Graph:
    """Deserialise graph from session, or create default."""
    if "graph" not in session:
        session["graph"] = Graph.generate_random(seed=42).to_dict()
    return Graph.from_dict(session["graph"])


def save_graph(graph: Graph) -> None:
    session["graph"] = graph.to_dict()
    # a new graph invalidates the last run
    session.pop("run", None)
    session.pop("current_step", None)


def get_payload() -> Dict[str, Any]:
    """Request JSON body; anything that is not a JSON object counts as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def prepare_run(
    graph: Graph,
    algorithm: str,
    end_id: Optional[str],
    heuristic: str,
) -> None:
    """Fill A* heuristics on the working copy of the graph."""
    if algorithm == "a-star" and end_id is not None:
        assign_heuristics(graph, end_id, heuristic)


def record_run(params: Dict[str, Any]) -> Tuple[Recorder, Graph]:
    """
    Validate run parameters and record the run on the session graph.

    Raises:
        ValueError / KeyError on bad parameters (mapped to 400 by callers).
    """
    algorithm = params.get("algorithm", "bfs")
    start_id  = params.get("start")
    end_id    = params.get("end") or None
    heuristic = params.get("heuristic", config.DEFAULT_HEURISTIC)

    info = get_algorithm(algorithm)
    if info is None:
        raise ValueError(f"Unknown algorithm: {algorithm}")

    graph = get_graph()
    if info.uses_start and not graph.has_node(start_id):
        raise ValueError(f"Unknown start node: {start_id}")
    if end_id is not None and not graph.has_node(end_id):
        raise ValueError(f"Unknown end node: {end_id}")

    prepare_run(graph, algorithm, end_id, heuristic)
    rec = Recorder()
    rec.record(graph, algorithm, start_id, end_id)
    return rec, graph


def replay() -> Optional[Stepper]:
    """Rebuild the cursor for the session's last run at its saved position."""
    params = session.get("run")
    if params is None:
        return None
    rec, _ = record_run(params)
    stepper = rec.stepper()
    stepper.goto_step(session.get("current_step", 0))
    return stepper


def step_payload(stepper: Stepper) -> Dict[str, Any]:
    nodes, edges = stepper.current_statuses()
    step = stepper.current_step
    return {
        "current_step": stepper.current_idx,
        "total_steps":  stepper.total_steps,
        "finished":     stepper.is_finished,
        "step":         step.to_dict() if step else None,
        "nodes":        {nid: s.value for nid, s in nodes.items()},
        "edges":        {eid: s.value for eid, s in edges.items()},
    }


def error(message: str, status: int = 400):
    return jsonify({"error": message}), status


# ---------------------------------------------------------------------------
# API: Algorithms & Graph
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    return jsonify({"algorithms": [a.to_dict() for a in list_algorithms()]})


@app.route("/api/graph")
def api_graph():
    return jsonify(get_graph().to_dict())


@app.route("/api/graph/generate", methods=["POST"])
def api_graph_generate():
    data = get_payload()
    try:
        g = Graph.generate_random(
            num_nodes=int(data.get("nodes", config.DEFAULT_NODE_COUNT)),
            edge_probability=float(data.get("prob", config.DEFAULT_EDGE_PROBABILITY)),
            weighted=bool(data.get("weighted", True)),
            seed=data.get("seed"),
            directed=bool(data.get("directed", False)),
        )
    except (TypeError, ValueError) as e:
        return error(str(e))

    save_graph(g)
    return jsonify(g.to_dict())


@app.route("/api/graph/import", methods=["POST"])
def api_graph_import():
    data     = get_payload()
    fmt      = data.get("format", "adj-matrix")
    directed = bool(data.get("directed", False))

    try:
        if fmt == "adj-matrix":
            g = Graph.from_adjacency_matrix(data["matrix"], directed=directed)
        elif fmt == "edge-list":
            g = Graph.from_edge_list(int(data["nodes"]), data["edges"], directed=directed)
        else:
            return error("Unknown format")
    except KeyError as e:
        return error(f"Missing field: {e.args[0]}")
    except (TypeError, ValueError, IndexError) as e:
        return error(str(e))

    save_graph(g)
    return jsonify(g.to_dict())


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    data = get_payload()
    params = {
        "algorithm": data.get("algorithm", "bfs"),
        "start":     data.get("start"),
        "end":       data.get("end") or None,
        "heuristic": data.get("heuristic", config.DEFAULT_HEURISTIC),
    }

    try:
        rec, _ = record_run(params)
    except KeyError as e:
        return error(f"Unknown heuristic: {e.args[0]}")
    except ValueError as e:
        return error(str(e))

    session["run"] = params
    session["current_step"] = 0

    export = rec.export()
    return jsonify({
        "algorithm":   params["algorithm"],
        "steps":       export["steps"],
        "metrics":     export["metrics"],
        "total_steps": len(rec.steps),
    })


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    stepper = replay()
    if stepper is None:
        return error("Run an algorithm first")
    if not stepper.next_step():
        return error("Already at last step")
    session["current_step"] = stepper.current_idx
    return jsonify(step_payload(stepper))


@app.route("/api/step/prev", methods=["POST"])
def api_step_prev():
    stepper = replay()
    if stepper is None:
        return error("Run an algorithm first")
    if not stepper.prev_step():
        return error("Already at first step")
    session["current_step"] = stepper.current_idx
    return jsonify(step_payload(stepper))


@app.route("/api/step/goto", methods=["POST"])
def api_step_goto():
    stepper = replay()
    if stepper is None:
        return error("Run an algorithm first")

    try:
        idx = int(get_payload().get("index", 0))
    except (TypeError, ValueError):
        return error("Invalid step index")

    if not stepper.goto_step(idx):
        return error("Invalid step index")
    session["current_step"] = idx
    return jsonify(step_payload(stepper))


# ---------------------------------------------------------------------------
# API: Comparison Mode
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    data = get_payload()
    try:
        left, _  = record_run(data.get("left") or {})
        right, _ = record_run(data.get("right") or {})
    except KeyError as e:
        return error(f"Unknown heuristic: {e.args[0]}")
    except ValueError as e:
        return error(str(e))
    return jsonify(compare(left, right).to_dict())


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Graph Algorithm Trace Engine on http://%s:%d", config.HOST, config.PORT)
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)
