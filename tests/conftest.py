"""
Pytest configuration for graphwalk tests.

Graphs are written in the same edge-list text the CLI reads.
"""
import logging
import os
import signal
import subprocess
import sys
import time

import pytest
import requests

from graphwalk import parse_coords, parse_graph

# Directed 3-cycle 1 -> 2 -> 3 -> 1 plus 4 -> 1
CYCLE4 = """4 4
1 2
4 1
2 3
3 1
"""

# 1 -> 2, 4 -> 1, 3 -> 1
DAG4 = """4 3
1 2
4 1
3 1
"""

DAG5 = """5 7
1 2
2 3
1 3
3 4
1 4
2 5
3 5
"""

WEIGHTED4 = """4 4
1 2 1
4 1 2
2 3 2
1 3 5
"""

POINTS5 = """5
0 0
0 2
1 1
3 0
3 2
"""


@pytest.fixture
def make_graph():
    """Build a graph from edge-list text."""
    def build(text, directed=False):
        return parse_graph(text, directed)
    return build


@pytest.fixture
def make_points():
    """Build a complete graph from coordinate text."""
    return parse_coords


@pytest.fixture
def cli_argv(monkeypatch):
    """Run the CLI under a neutral executable name."""
    monkeypatch.setattr(sys, "argv", ["graphwalk"])
    monkeypatch.delenv("GRAPHWALK_DIRECTED", raising=False)
    monkeypatch.delenv("GRAPHWALK_LOG_LEVEL", raising=False)
    yield
    # main() installs a handler bound to the captured stderr
    logger = logging.getLogger("graphwalk")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


PORT = int(os.environ.get("GRAPHWALK_TEST_PORT", "18080"))
BASE_URL = f"http://127.0.0.1:{PORT}"


@pytest.fixture(scope="session")
def live_server():
    """Start `python -m graphwalk serve` for the test session."""
    root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (os.path.join(root, "py"), env.get("PYTHONPATH")) if p
    )
    env["GRAPHWALK_PORT"] = str(PORT)
    env.pop("GRAPHWALK_DIRECTED", None)

    proc = subprocess.Popen(
        [sys.executable, "-m", "graphwalk", "serve"],
        cwd=root,
        env=env,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )

    # Wait for server to be ready
    for _ in range(30):
        try:
            requests.get(f"{BASE_URL}/commands", timeout=1)
            break
        except requests.exceptions.ConnectionError:
            if proc.poll() is not None:
                _, stderr = proc.communicate()
                raise RuntimeError(f"Server failed to start:\n{stderr.decode()}")
            time.sleep(0.5)
    else:
        proc.kill()
        raise RuntimeError("Server did not start in time")

    yield BASE_URL

    proc.send_signal(signal.SIGTERM)
    try:
        proc.wait(timeout=5)
    except subprocess.TimeoutExpired:
        proc.kill()
