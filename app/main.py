#!/usr/bin/env python3
"""
Terminal client for Movie Search & Reviews.

Needs a backend serving /api/search and /api/reviews; for local runs start
the in-memory one first:

    uvicorn app.dev_backend:app --port 8000
    python -m app.main --backend-url http://127.0.0.1:8000
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from app.config import BACKEND_URL, LOG_LEVEL
from app.core.backend_client import BackendClient
from app.core.controller import ViewController
from app.ui.terminal import TerminalShell, confirm_on_terminal


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search movies and manage their reviews.")
    parser.add_argument(
        "--backend-url",
        default=BACKEND_URL,
        help="Base URL of the backend (default: %(default)s, env MOVIE_REVIEWS_BACKEND_URL)",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level (default: %(default)s, env LOG_LEVEL)",
    )
    return parser.parse_args(argv)


async def run(backend_url: str) -> None:
    async with BackendClient.connect(backend_url.rstrip("/")) as backend:
        controller = ViewController(backend, confirm=confirm_on_terminal)
        await TerminalShell(controller).run()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        asyncio.run(run(args.backend_url))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
