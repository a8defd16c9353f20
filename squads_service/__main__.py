"""
Run the Squads service with uvicorn.

Usage:
  python -m squads_service [--host HOST] [--port PORT] [--log-level LEVEL]

Defaults come from SQUADS_HOST, SQUADS_PORT and LOG_LEVEL (0.0.0.0:8080, INFO).
"""
from __future__ import annotations

import argparse

import uvicorn

from squads_service.utils.settings import get_settings


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="squads-service", description="Serve the Squads CRUD API.")
    parser.add_argument("--host", default=settings.host, help="interface to bind (default: %(default)s)")
    parser.add_argument("--port", type=int, default=settings.port, help="port to listen on (default: %(default)s)")
    parser.add_argument("--log-level", default=settings.log_level.lower(), help="uvicorn log level (default: %(default)s)")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    from squads_service.api.main import app

    # Request lines come from the app middleware
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower(), access_log=False)


if __name__ == "__main__":
    main()
