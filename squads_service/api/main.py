"""
FastAPI app assembly: logging, middleware, error handlers and router wiring.
"""
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request

from squads_service import __version__
from squads_service.db.database import init_db, safe_database_url
from squads_service.api.errors import error_response, register_exception_handlers
from squads_service.api.members import router as members_router
from squads_service.api.multisigs import router as multisigs_router
from squads_service.api.vaults import router as vaults_router
from squads_service.utils.settings import get_settings

settings = get_settings()

# Configure logging
LOG_LEVEL_NAME = settings.log_level
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.auto_migrate:
        init_db()
    else:
        logger.info("auto_migrate disabled; expecting schema on %s", safe_database_url())
    yield


app = FastAPI(
    title="Squads Service",
    description="CRUD API for multisig groups, their vaults and members.",
    version=__version__,
    lifespan=lifespan,
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False

if settings.cors_allow_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


# Middleware: one access-log line per request; unhandled errors become a JSON 500
@app.middleware("http")
async def log_and_recover(request: Request, call_next):
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("unhandled_error method=%s path=%s", request.method, request.url.path)
        response = error_response(500, "internal server error")
    duration_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s %s %.1fms",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


register_exception_handlers(app)


@app.get("/health")
def health():
    """Liveness probe."""
    return {"status": "ok"}


app.include_router(multisigs_router)
app.include_router(vaults_router)
app.include_router(members_router)
