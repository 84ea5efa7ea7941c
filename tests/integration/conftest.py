import os
import sys
import socket
import time
import subprocess
from pathlib import Path
import urllib.request

import pytest


def _find_free_port():
    s = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    s.bind(("127.0.0.1", 0))
    addr, port = s.getsockname()
    s.close()
    return port


@pytest.fixture(scope="module")
def live_server():
    """Start uvicorn serving famtree_py.web.app in a subprocess and yield the base url.

    Readiness is detected by polling /health. The server is terminated after
    the module's tests complete.
    """
    # repo root is two levels up from tests/integration/conftest.py
    repo_root = Path(__file__).resolve().parents[2]

    port = _find_free_port()
    cmd = [sys.executable, "-m", "uvicorn", "famtree_py.web.app:app", "--host", "127.0.0.1", "--port", str(port)]
    env = os.environ.copy()
    env_pythonpath = env.get("PYTHONPATH", "")
    env["PYTHONPATH"] = str(repo_root) + (os.pathsep + env_pythonpath if env_pythonpath else "")
    # Do not capture stdout/stderr so server startup errors are visible in test output
    proc = subprocess.Popen(cmd, cwd=str(repo_root), env=env, stdout=None, stderr=None)

    base = f"http://127.0.0.1:{port}"
    deadline = time.time() + 30
    last_exc = None
    while time.time() < deadline:
        try:
            with urllib.request.urlopen(base + "/health", timeout=1) as r:
                if r.status == 200:
                    break
        except Exception as e:
            last_exc = e
            time.sleep(0.2)
            continue
    else:
        proc.kill()
        proc.communicate(timeout=5)
        pytest.fail(f"Server did not become ready in time; last error: {last_exc}")

    try:
        yield base
    finally:
        proc.terminate()
        try:
            proc.wait(timeout=5)
        except subprocess.TimeoutExpired:
            proc.kill()
