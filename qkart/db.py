"""
Database Module - Supabase client factory.

The client is created from explicit settings and handed to repositories;
there is no module-level connection.
"""

from supabase._async.client import AsyncClient
from supabase._async.client import create_client as acreate_client

from qkart.config import Settings
from qkart.logging import get_logger

logger = get_logger(__name__)


async def create_supabase(settings: Settings) -> AsyncClient:
    """Create an async Supabase client for the configured project."""
    url, key = settings.require_supabase()
    client = await acreate_client(url, key)
    logger.info("Supabase client created")
    return client
