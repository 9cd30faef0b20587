"""
Monitoring and Tracing Configuration Module.

This module provides optional integration with Logfire for tracing the
Unguka backend:
- API endpoint tracing
- Database operation monitoring
- Cash movements and member payments as structured events

Logfire is only configured when ``LOGFIRE_ENABLED`` is set and a token is
available. Every helper degrades to a debug log line when it is not.
"""

import logging
import os
from typing import Optional

import logfire
from fastapi import FastAPI

logger = logging.getLogger(__name__)

# Logfire configuration from environment
LOGFIRE_ENABLED = os.getenv("LOGFIRE_ENABLED", "false").lower() in ("true", "1", "yes")
LOGFIRE_TOKEN = os.getenv("LOGFIRE_TOKEN", "")
LOGFIRE_ENVIRONMENT = os.getenv("LOGFIRE_ENVIRONMENT", "development")
LOGFIRE_SERVICE_NAME = os.getenv("LOGFIRE_SERVICE_NAME", "unguka-server")
LOGFIRE_SERVICE_VERSION = os.getenv("LOGFIRE_SERVICE_VERSION", "0.1.0")

# Feature flags
LOGFIRE_TRACE_SQLALCHEMY = os.getenv("LOGFIRE_TRACE_SQLALCHEMY", "true").lower() in ("true", "1", "yes")
LOGFIRE_TRACE_FASTAPI = os.getenv("LOGFIRE_TRACE_FASTAPI", "true").lower() in ("true", "1", "yes")

_configured = False


def initialize_logfire(app: FastAPI | None = None) -> bool:
    """
    Initialize Logfire for monitoring and tracing.

    Args:
        app: FastAPI application instance for FastAPI instrumentation (optional).

    Returns:
        True when Logfire was configured.
    """
    global _configured

    if not LOGFIRE_ENABLED:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return False

    if not LOGFIRE_TOKEN:
        logger.warning(
            "Logfire is enabled but LOGFIRE_TOKEN is not set. "
            "Monitoring will not work. Set LOGFIRE_TOKEN to enable Logfire."
        )
        return False

    try:
        logfire.configure(
            token=LOGFIRE_TOKEN,
            service_name=LOGFIRE_SERVICE_NAME,
            service_version=LOGFIRE_SERVICE_VERSION,
            environment=LOGFIRE_ENVIRONMENT,
        )

        if LOGFIRE_TRACE_SQLALCHEMY:
            try:
                logfire.instrument_sqlalchemy()
                logger.info("Logfire: SQLAlchemy instrumentation enabled")
            except Exception as e:
                logger.warning(f"Failed to instrument SQLAlchemy: {e}")

        if LOGFIRE_TRACE_FASTAPI and app is not None:
            try:
                logfire.instrument_fastapi(app=app)
                logger.info("Logfire: FastAPI instrumentation enabled")
            except Exception as e:
                logger.warning(f"Failed to instrument FastAPI: {e}")

        _configured = True
        logger.info(
            f"Logfire monitoring initialized: environment={LOGFIRE_ENVIRONMENT}, service={LOGFIRE_SERVICE_NAME}"
        )
    except Exception as e:
        logger.error(f"Failed to initialize Logfire: {e}", exc_info=True)

    return _configured


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Log an API request with performance metrics.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
    """
    if not _configured:
        logger.debug(f"{method} {path} -> {status_code} ({duration_ms:.2f}ms)")
        return
    logfire.info(
        "API request completed",
        method=method,
        path=path,
        status_code=status_code,
        duration_ms=duration_ms,
    )


def log_cash_movement(cooperative_id: int, delta: float, balance: float, reason: str) -> None:
    """
    Log a change of a cooperative's cash balance.

    Args:
        cooperative_id: Cooperative whose balance moved
        delta: Signed change applied to the balance
        balance: Balance after the change
        reason: Short label of the operation causing the movement
    """
    if not _configured:
        logger.debug(f"Cash movement coop={cooperative_id} delta={delta} balance={balance} reason={reason}")
        return
    logfire.info(
        "Cash balance changed",
        cooperative_id=cooperative_id,
        delta=delta,
        balance=balance,
        reason=reason,
    )


def log_payment_processed(
    cooperative_id: int,
    payment_id: int,
    amount_paid: float,
    remaining: float,
    status: str,
    deductions: Optional[float] = None,
) -> None:
    """
    Log a member payment being processed.

    Args:
        cooperative_id: Cooperative paying the member
        payment_id: Payment record identifier
        amount_paid: Amount paid out in this operation
        remaining: Amount still owed to the member
        status: Payment status after the operation
        deductions: Fees and loans withheld, when netting took place
    """
    if not _configured:
        logger.debug(f"Payment {payment_id} processed: paid={amount_paid} remaining={remaining} status={status}")
        return
    logfire.info(
        "Member payment processed",
        cooperative_id=cooperative_id,
        payment_id=payment_id,
        amount_paid=amount_paid,
        remaining=remaining,
        status=status,
        deductions=deductions,
    )
