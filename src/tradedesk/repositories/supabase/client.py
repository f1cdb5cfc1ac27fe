"""Supabase client construction."""

import logging

from supabase import Client, create_client

from tradedesk.core.exceptions import StorageError

logger = logging.getLogger(__name__)


def create_supabase_client(url: str, key: str) -> Client:
    """Create a Supabase client, wrapping configuration errors."""
    if not url or not key:
        raise StorageError("Supabase URL and key must be provided")
    try:
        client = create_client(url, key)
    except Exception as e:
        raise StorageError(f"Failed to initialize Supabase client: {e}")
    logger.info("Supabase client initialized successfully")
    return client
