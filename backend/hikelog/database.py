"""
HikeLog Backend - MongoDB Client Management
=============================================

What:  Creates the async MongoDB client and resolves the application database.
How:   Motor's AsyncIOMotorClient owns a connection pool that is safe to
       share across concurrent request handlers. One client is created in the
       application lifespan and closed on shutdown.
Who:   main.lifespan (startup/shutdown) and routes/health.py (ping).

Connection Settings:
    serverSelectionTimeoutMS and socketTimeoutMS follow store_timeout_seconds,
    so a call against an unreachable server fails within the same bound that
    ResourceService enforces with asyncio.wait_for.
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from hikelog.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


def create_client(config: Optional[Settings] = None) -> AsyncIOMotorClient:
    """
    Build a Motor client from settings.

    The client connects lazily; no network I/O happens until the first
    operation, so this is safe to call before the event loop serves traffic.
    """
    config = config or default_settings
    timeout_ms = int(config.store_timeout_seconds * 1000)
    client = AsyncIOMotorClient(
        config.mongo_url,
        serverSelectionTimeoutMS=timeout_ms,
        socketTimeoutMS=timeout_ms,
        connectTimeoutMS=timeout_ms,
    )
    logger.info("MongoDB client created (database=%s)", config.mongo_database)
    return client


def get_database(
    client: AsyncIOMotorClient, config: Optional[Settings] = None
) -> AsyncIOMotorDatabase:
    """Return the application database handle from an existing client."""
    config = config or default_settings
    return client[config.mongo_database]


async def ping_database(database) -> None:
    """
    Run the server `ping` command against the database.

    Raises whatever the driver raises; callers decide how to report it.
    """
    await database.command("ping")


def close_client(client: Optional[AsyncIOMotorClient]) -> None:
    """Close all pooled connections. No-op when no client was created."""
    if client is None:
        return
    client.close()
    logger.info("MongoDB client closed")
