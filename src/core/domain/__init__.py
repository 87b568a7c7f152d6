"""
Domain module.

Contains value objects and entities of the notification relay.
"""

from src.core.domain.entities import RelaySettings
from src.core.domain.value_objects import DiscordEvent, WebhookEndpoint

__all__ = [
    'DiscordEvent',
    'RelaySettings',
    'WebhookEndpoint',
]
