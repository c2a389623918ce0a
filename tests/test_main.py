"""Tests for running the bot as a process: signal handling and exit status."""

import os
import signal
import socket
import subprocess
import sys
import time
from pathlib import Path

import httpx
import pytest

SRC_DIR = Path(__file__).resolve().parents[1] / "src"

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals only")


def _free_port() -> int:
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def _start_bot(tmp_path: Path) -> tuple[subprocess.Popen, int]:
    port = _free_port()
    env = {
        **os.environ,
        "PYTHONPATH": os.pathsep.join(filter(None, [str(SRC_DIR), os.environ.get("PYTHONPATH")])),
        "HOST": "127.0.0.1",
        "PORT": str(port),
    }
    proc = subprocess.Popen(
        [sys.executable, "-m", "cleaning_bot"],
        cwd=tmp_path,
        env=env,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
    )
    deadline = time.monotonic() + 20
    while time.monotonic() < deadline:
        if proc.poll() is not None:
            break
        try:
            if httpx.get(f"http://127.0.0.1:{port}/health", timeout=0.5).status_code == 200:
                return proc, port
        except httpx.HTTPError:
            time.sleep(0.2)
    proc.kill()
    output = proc.communicate()[0].decode(errors="replace")
    pytest.fail(f"bot did not start: {output}")


@pytest.mark.parametrize("signum", [signal.SIGTERM, signal.SIGINT])
def test_signal_exits_with_status_zero(tmp_path: Path, signum: int):
    """SIGTERM and SIGINT both run shutdown and exit 0."""
    proc, _ = _start_bot(tmp_path)

    proc.send_signal(signum)
    try:
        output = proc.communicate(timeout=20)[0].decode(errors="replace")
    except subprocess.TimeoutExpired:
        proc.kill()
        raise

    assert proc.returncode == 0, output
    assert "Shutting down WhatsApp bot" in output
