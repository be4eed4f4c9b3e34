"""
Application lifecycle management using the FastAPI lifespan pattern.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy import text

from ricebikes.config.settings import get_settings
from ricebikes.database.async_db import dispose_engine, get_async_db_context

logger = logging.getLogger(__name__)
settings = get_settings()


class LifecycleManager:
    """
    Manages application startup and graceful shutdown.
    """

    def __init__(self) -> None:
        self._initialized = False

    async def startup(self) -> None:
        if self._initialized:
            logger.warning("Lifecycle already initialized, skipping startup")
            return

        logger.info("Starting application lifecycle...")

        self._verify_configurations()
        await self._verify_database()

        self._initialized = True
        logger.info("Application lifecycle startup completed")

    async def shutdown(self) -> None:
        if not self._initialized:
            logger.warning("Lifecycle not initialized, skipping shutdown")
            return

        logger.info("Stopping application lifecycle...")
        await dispose_engine()

        self._initialized = False
        logger.info("Application lifecycle shutdown completed")

    def _verify_configurations(self) -> None:
        """Log configuration that changes runtime behaviour."""
        if settings.SLACK_NOTIFICATIONS_ENABLED and not settings.SLACK_WEBHOOK_URL:
            logger.warning("SLACK_NOTIFICATIONS_ENABLED is set but SLACK_WEBHOOK_URL is empty")
        if not settings.SLACK_NOTIFICATIONS_ENABLED:
            logger.info("Slack notifications are disabled via SLACK_NOTIFICATIONS_ENABLED=False")
        if settings.SUMMARY_EXCLUDE_SPECIAL_TRANSACTIONS:
            logger.info("Summary incomplete count excludes refurb, employee and retrospec transactions")

    async def _verify_database(self) -> None:
        """Check database connectivity without blocking startup."""
        try:
            async with get_async_db_context() as session:
                await session.execute(text("SELECT 1"))
            logger.info("Database connection verified")
        except Exception as e:
            logger.error(f"Database connectivity check failed: {e}")


_lifecycle_manager = LifecycleManager()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Lifespan context manager for FastAPI.

    Args:
        app: FastAPI application instance
    """
    await _lifecycle_manager.startup()
    try:
        yield
    finally:
        await _lifecycle_manager.shutdown()
