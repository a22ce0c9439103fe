"""Customer self-service subscribe and unsubscribe operations."""

from .self_service import subscribe, unsubscribe, unsubscribe_with_token

__all__ = [
    'subscribe',
    'unsubscribe',
    'unsubscribe_with_token',
]
