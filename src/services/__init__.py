"""
Services layer module.

Contains the relay logic and the background task facility.

Directory structure:
- notification/ : Configuration resolution and event filtering
- queue/        : Background task queue
"""

from src.services.notification import NotificationRelay, resolve_relay_settings
from src.services.queue import TaskQueue

__all__ = [
    'NotificationRelay',
    'resolve_relay_settings',
    'TaskQueue',
]
