"""Shopping list change notifications over Redis pub/sub."""

import json
import logging
from datetime import UTC, datetime
from enum import StrEnum

import redis

from kitchen.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()


class ShoppingListEventType(StrEnum):
    """Event types for shopping list updates."""

    ITEMS_ADDED = "items_added"
    ITEM_UPDATED = "item_updated"
    ITEM_DELETED = "item_deleted"
    ITEMS_CLEARED = "items_cleared"


_sync_redis: redis.Redis | None = None


def get_sync_redis() -> redis.Redis:
    """Get synchronous Redis client for publishing from API endpoints."""
    global _sync_redis
    if _sync_redis is None:
        _sync_redis = redis.from_url(settings.redis_url)
    return _sync_redis


def publish_shopping_list_event(
    shopping_list_id: int,
    event_type: ShoppingListEventType,
    data: dict | None = None,
) -> None:
    """Tell other household members that the shopping list changed.

    Only call after the change has been committed.

    Args:
        shopping_list_id: The shopping list to publish to
        event_type: Type of event (items_added, item_updated, etc.)
        data: Optional event payload
    """
    try:
        redis_client = get_sync_redis()
        channel = f"shopping-list:{shopping_list_id}"
        message = {
            "type": event_type,
            "shopping_list_id": shopping_list_id,
            "timestamp": datetime.now(UTC).isoformat(),
            "data": data or {},
        }
        redis_client.publish(channel, json.dumps(message))
        logger.debug(f"Published {event_type} to {channel}")
    except Exception as e:
        # Don't fail the request if pub/sub fails
        logger.error(f"Failed to publish shopping list event: {e}")
