"""End-to-end tests against a running `graphwalk serve` process."""
import requests

from conftest import CYCLE4, DAG4


class TestLiveServer:
    def test_list_commands(self, live_server):
        resp = requests.get(f"{live_server}/commands")
        assert resp.status_code == 200
        assert "dijkstra" in resp.json()["commands"]

    def test_toposort(self, live_server):
        resp = requests.post(f"{live_server}/commands/toposort", data=DAG4)
        assert resp.status_code == 200
        assert resp.json()["output"] == "4 3 1 2"

    def test_strongly_connected(self, live_server):
        resp = requests.post(f"{live_server}/commands/strongly_connected", data=CYCLE4)
        assert resp.json()["output"] == "2"

    def test_bfs_with_query(self, live_server):
        resp = requests.post(f"{live_server}/commands/bfs", data=CYCLE4 + "2 4\n")
        assert resp.json()["output"] == "2"

    def test_malformed_input(self, live_server):
        resp = requests.post(f"{live_server}/commands/toposort", data="3 2\n1 2\n")
        assert resp.status_code == 400
        assert "line 3" in resp.json()["error"]

    def test_unknown_command(self, live_server):
        resp = requests.post(f"{live_server}/commands/nope", data=DAG4)
        assert resp.status_code == 404
