"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request logging), registers the exception handlers and includes all API
routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from unguka import __version__
from unguka.core.database import async_session_maker, init_db
from unguka.core.logging_config import get_logger, setup_logging
from unguka.core.monitoring import initialize_logfire

from .api.v1 import (
    announcements,
    cooperatives,
    fees,
    health,
    loans,
    members,
    payments,
    plots,
    productions,
    products,
    purchases,
    reports,
    sales,
    seasons,
)
from .core.config import API_V1_STR, PROJECT_NAME, settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestLoggingMiddleware
from .services.seasons import SeasonService

# Initialize logging
setup_logging()
logger = get_logger(__name__)

TENANT_PREFIX = f"{API_V1_STR}/cooperatives/{{cooperative_id}}"


async def run_startup_season_rollover() -> None:
    """Create the current and next seasons of every active cooperative."""
    async with async_session_maker() as session:
        results = await SeasonService(session).auto_create()
    logger.info(f"Startup season rollover updated {len(results)} cooperatives")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Handles startup and shutdown events for the FastAPI application.
    """
    # Startup
    try:
        logger.info("Starting up Unguka Server...")
        await init_db()
        logger.info("Database initialized successfully")
        if settings.auto_create_seasons_on_startup:
            await run_startup_season_rollover()
    except Exception as e:
        logger.error(f"Startup tasks failed: {e}", exc_info=True)

    yield

    # Shutdown
    logger.info("Shutting down Unguka Server...")


app = FastAPI(
    title=PROJECT_NAME,
    description="""
    Unguka Server API

    This API provides the backend services for agricultural cooperatives.
    It supports managing members, seasons, plots, productions, stock, cash,
    sales, loans, fees and member payments, and builds JSON reports.
    """,
    version=__version__,
    openapi_url=f"{API_V1_STR}/openapi.json",
    docs_url=f"{API_V1_STR}/docs",
    redoc_url=f"{API_V1_STR}/redoc",
    lifespan=lifespan,
)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(RequestLoggingMiddleware)

setup_exception_handlers(app)
initialize_logfire(app)


app.include_router(health.router, tags=["health"])
app.include_router(cooperatives.router, prefix=f"{API_V1_STR}/cooperatives")
app.include_router(seasons.calendar_router, prefix=f"{API_V1_STR}/seasons")
app.include_router(members.router, prefix=f"{TENANT_PREFIX}/members")
app.include_router(seasons.router, prefix=f"{TENANT_PREFIX}/seasons")
app.include_router(products.router, prefix=f"{TENANT_PREFIX}/products")
app.include_router(products.stocks_router, prefix=f"{TENANT_PREFIX}/stocks")
app.include_router(products.cash_router, prefix=f"{TENANT_PREFIX}/cash")
app.include_router(plots.router, prefix=f"{TENANT_PREFIX}/plots")
app.include_router(productions.router, prefix=f"{TENANT_PREFIX}/productions")
app.include_router(purchases.inputs_router, prefix=f"{TENANT_PREFIX}/purchase-inputs")
app.include_router(purchases.outs_router, prefix=f"{TENANT_PREFIX}/purchase-outs")
app.include_router(sales.router, prefix=f"{TENANT_PREFIX}/sales")
app.include_router(loans.router, prefix=f"{TENANT_PREFIX}/loans")
app.include_router(loans.transactions_router, prefix=f"{TENANT_PREFIX}/loan-transactions")
app.include_router(fees.types_router, prefix=f"{TENANT_PREFIX}/fee-types")
app.include_router(fees.router, prefix=f"{TENANT_PREFIX}/fees")
app.include_router(payments.router, prefix=f"{TENANT_PREFIX}/payments")
app.include_router(payments.transactions_router, prefix=f"{TENANT_PREFIX}/payment-transactions")
app.include_router(announcements.router, prefix=f"{TENANT_PREFIX}/announcements")
app.include_router(reports.router, prefix=f"{TENANT_PREFIX}/reports")


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run(app, host=settings.server_host, port=settings.server_port, log_config=None)
