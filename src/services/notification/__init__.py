"""
Notification services module.

Configuration resolution and the event subscription filter.
"""

from src.services.notification.config_resolver import (
    PLUGIN_NAME,
    resolve_endpoint,
    resolve_relay_settings,
    resolve_subscriptions,
)
from src.services.notification.relay import NotificationRelay

__all__ = [
    'NotificationRelay',
    'PLUGIN_NAME',
    'resolve_endpoint',
    'resolve_relay_settings',
    'resolve_subscriptions',
]
