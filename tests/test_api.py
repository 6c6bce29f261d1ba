"""Tests for the Flask JSON API."""

import pytest

from main import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


@pytest.fixture
def cycle_client(client):
    """Client whose session graph is the undirected 4-cycle."""
    resp = client.post(
        "/api/graph/import",
        json={"format": "edge-list", "nodes": 4, "edges": [[0, 1], [1, 2], [2, 3], [3, 0]]},
    )
    assert resp.status_code == 200
    return client


class TestAlgorithms:

    def test_listing(self, client):
        data = client.get("/api/algorithms").get_json()
        assert [a["key"] for a in data["algorithms"]] == [
            "bfs", "dfs", "dijkstra", "a-star", "bellman-ford", "floyd-warshall",
        ]


class TestGraph:

    def test_default_graph(self, client):
        data = client.get("/api/graph").get_json()
        assert len(data["nodes"]) == 8

    def test_generate_is_seeded(self, client):
        body = {"nodes": 6, "prob": 0.5, "seed": 3}
        first = client.post("/api/graph/generate", json=body).get_json()
        second = client.post("/api/graph/generate", json=body).get_json()
        assert first == second
        assert len(first["nodes"]) == 6

    def test_generate_bad_number(self, client):
        resp = client.post("/api/graph/generate", json={"nodes": "many"})
        assert resp.status_code == 400

    def test_import_matrix(self, client):
        resp = client.post(
            "/api/graph/import",
            json={"format": "adj-matrix", "matrix": [[0, 1], [1, 0]]},
        )
        data = resp.get_json()
        assert resp.status_code == 200
        assert [e["id"] for e in data["edges"]] == ["e0-1"]
        assert client.get("/api/graph").get_json() == data

    def test_import_unknown_format(self, client):
        resp = client.post("/api/graph/import", json={"format": "dot"})
        assert resp.status_code == 400

    def test_import_missing_field(self, client):
        resp = client.post("/api/graph/import", json={"format": "adj-matrix"})
        assert resp.status_code == 400
        assert "matrix" in resp.get_json()["error"]

    def test_import_rejects_non_numeric_weight(self, client):
        resp = client.post(
            "/api/graph/import",
            json={"format": "edge-list", "nodes": 2, "edges": [[0, 1, "x"]]},
        )
        assert resp.status_code == 400
        assert "weight" in resp.get_json()["error"]

        # the session graph was not replaced, so runs still work
        run = client.post("/api/run", json={"algorithm": "dijkstra", "start": "n0"})
        assert run.status_code == 200


class TestRun:

    def test_bfs(self, cycle_client):
        resp = cycle_client.post("/api/run", json={"algorithm": "bfs", "start": "n0"})
        data = resp.get_json()
        assert resp.status_code == 200
        assert data["total_steps"] == 16
        assert data["steps"][0] == {
            "type": "visit-node",
            "node_id": "n0",
            "edge_id": None,
            "description": "Start BFS from node n0",
        }
        assert data["metrics"]["nodes_visited"] == 4

    def test_a_star_without_end(self, cycle_client):
        resp = cycle_client.post("/api/run", json={"algorithm": "a-star", "start": "n0"})
        assert resp.status_code == 400
        assert "requires an end node" in resp.get_json()["error"]

    def test_a_star_with_heuristic(self, cycle_client):
        resp = cycle_client.post(
            "/api/run",
            json={"algorithm": "a-star", "start": "n0", "end": "n2", "heuristic": "zero"},
        )
        steps = resp.get_json()["steps"]
        assert resp.status_code == 200
        assert steps[-1]["node_id"] == "n2"
        assert steps[-1]["type"] == "complete-node"

    def test_unknown_heuristic(self, cycle_client):
        resp = cycle_client.post(
            "/api/run",
            json={"algorithm": "a-star", "start": "n0", "end": "n2", "heuristic": "chebyshev"},
        )
        assert resp.status_code == 400

    def test_unknown_algorithm(self, cycle_client):
        resp = cycle_client.post("/api/run", json={"algorithm": "quicksort", "start": "n0"})
        assert resp.status_code == 400

    def test_unknown_start(self, cycle_client):
        resp = cycle_client.post("/api/run", json={"algorithm": "bfs", "start": "n9"})
        assert resp.status_code == 400

    def test_floyd_warshall_needs_no_start(self, cycle_client):
        resp = cycle_client.post("/api/run", json={"algorithm": "floyd-warshall"})
        assert resp.status_code == 200


class TestStepping:

    def test_step_before_run(self, client):
        assert client.post("/api/step/next").status_code == 400
        assert client.post("/api/step/goto", json={"index": 0}).status_code == 400

    def test_goto(self, cycle_client):
        cycle_client.post("/api/run", json={"algorithm": "bfs", "start": "n0"})
        data = cycle_client.post("/api/step/goto", json={"index": 2}).get_json()
        assert data["current_step"] == 2
        assert data["step"]["node_id"] == "n1"
        assert data["nodes"]["n0"] == "start"
        assert data["nodes"]["n1"] == "active"
        assert data["edges"]["e0-1"] == "active"

    def test_goto_out_of_range(self, cycle_client):
        cycle_client.post("/api/run", json={"algorithm": "bfs", "start": "n0"})
        resp = cycle_client.post("/api/step/goto", json={"index": 99})
        assert resp.status_code == 400

    def test_next_and_prev(self, cycle_client):
        cycle_client.post("/api/run", json={"algorithm": "bfs", "start": "n0"})
        assert cycle_client.post("/api/step/next").get_json()["current_step"] == 1
        assert cycle_client.post("/api/step/prev").get_json()["current_step"] == 0
        assert cycle_client.post("/api/step/prev").status_code == 400

    def test_new_graph_clears_run(self, cycle_client):
        cycle_client.post("/api/run", json={"algorithm": "bfs", "start": "n0"})
        cycle_client.post("/api/graph/generate", json={"seed": 1})
        assert cycle_client.post("/api/step/next").status_code == 400


class TestCompare:

    def test_bfs_against_dfs(self, cycle_client):
        resp = cycle_client.post(
            "/api/compare",
            json={
                "left": {"algorithm": "bfs", "start": "n0"},
                "right": {"algorithm": "dfs", "start": "n0"},
            },
        )
        data = resp.get_json()
        assert resp.status_code == 200
        assert data["winner_steps"] == "Depth-First Search"
        assert data["left"]["total_steps"] == 16
