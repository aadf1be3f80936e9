import logging
import sys
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from vinemanager.api.v1.router import api_router
from vinemanager.core.config import settings
from vinemanager.db.store import VineyardStore
from vinemanager.tasks.seed_mock_data import seed_store

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s: %(message)s",
        stream=sys.stdout,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    configure_logging()
    store = VineyardStore()
    if settings.SEED_MOCK_DATA:
        seed_store(store)
    app.state.store = store
    logger.info("VineManager API started (%s)", settings.ENVIRONMENT)
    yield
    # Shutdown
    logger.info("VineManager API stopped")


app = FastAPI(
    title="VineManager API",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    start = time.monotonic()
    response = await call_next(request)
    latency_ms = int((time.monotonic() - start) * 1000)
    logger.info(
        "%s %s -> %d (%d ms)", request.method, request.url.path, response.status_code, latency_ms
    )
    return response


@app.get("/api/health", tags=["health"])
async def health():
    return {"status": "ok"}


app.include_router(api_router, prefix="/api/v1")
