"""FastAPI application entrypoint."""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from biztime import __version__
from biztime.db import engine
from biztime.errors import register_error_handlers
from biztime.logging_config import configure_logging, get_logger
from biztime.middleware.correlation_id import CorrelationIdMiddleware
from biztime.routers import (
    companies_router,
    health_router,
    industries_router,
    invoices_router,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown: logging, engine teardown."""
    configure_logging()
    logger.info("app_started", version=__version__)
    yield
    await engine.dispose()
    logger.info("app_shutdown")


app = FastAPI(
    title="BizTime",
    version=__version__,
    lifespan=lifespan,
)
app.add_middleware(CorrelationIdMiddleware)
register_error_handlers(app)

app.include_router(health_router)
app.include_router(companies_router)
app.include_router(invoices_router)
app.include_router(industries_router)


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint: app name and version."""
    return {"name": "biztime", "version": __version__}
