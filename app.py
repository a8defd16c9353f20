"""
App assembly entry point.

Re-exports the FastAPI `app` from `squads_service.api.main` so the service
can be started with `uvicorn app:app`.
"""

from squads_service.api.main import app  # noqa: F401

if __name__ == "__main__":
    from squads_service.__main__ import main

    main()
