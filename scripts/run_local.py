#!/usr/bin/env python3
"""
Start the in-memory dev backend under uvicorn and attach the terminal client.

    python scripts/run_local.py --port 8000
"""
import argparse
import os
import subprocess
import sys
import time
from dataclasses import dataclass

import httpx


@dataclass
class Proc:
    name: str
    popen: subprocess.Popen


def _repo_root() -> str:
    # scripts/run_local.py -> repo root is parent of scripts/
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def _spawn_backend(host: str, port: int, reload: bool) -> Proc:
    env = os.environ.copy()
    env["PYTHONUNBUFFERED"] = "1"

    # Use python -m uvicorn to ensure we use the same interpreter/venv
    cmd = [
        sys.executable,
        "-m",
        "uvicorn",
        "app.dev_backend:app",
        "--port",
        str(port),
        "--host",
        host,
        "--log-level",
        "warning",
    ]
    if reload:
        cmd.append("--reload")

    popen = subprocess.Popen(cmd, cwd=_repo_root(), env=env)
    return Proc(name="dev_backend", popen=popen)


def wait_ready(base_url: str, timeout_s: float, interval_s: float = 0.3) -> bool:
    deadline = time.time() + timeout_s
    while True:
        try:
            r = httpx.get(f"{base_url}/health", timeout=httpx.Timeout(1.0, connect=0.5))
            if r.status_code == 200:
                return True
        except httpx.HTTPError:
            pass
        if time.time() > deadline:
            return False
        time.sleep(interval_s)


def _shutdown(proc: Proc) -> None:
    if proc.popen.poll() is None:
        proc.popen.terminate()
        try:
            proc.popen.wait(timeout=3)
        except subprocess.TimeoutExpired:
            proc.popen.kill()


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the dev backend and the terminal client together.")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Backend port (default: 8000)")
    parser.add_argument("--reload", action="store_true", help="Run uvicorn with --reload (dev only)")
    parser.add_argument("--ready-timeout", type=float, default=15.0, help="Seconds to wait for the backend (default: 15)")
    args = parser.parse_args()

    base_url = f"http://{args.host}:{args.port}"
    proc = _spawn_backend(args.host, args.port, args.reload)
    try:
        if not wait_ready(base_url, args.ready_timeout):
            print(f"Backend did not become ready on {base_url} within {args.ready_timeout}s")
            return 2

        sys.path.insert(0, _repo_root())
        from app.main import main as client_main
        return client_main(["--backend-url", base_url])
    finally:
        _shutdown(proc)


if __name__ == "__main__":
    sys.exit(main())
