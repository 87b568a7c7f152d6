"""
Interfaces module.

Contains abstract base classes defining the contracts for the plugin host
and message dispatch, plus notification data classes.
"""

from src.core.interfaces.adapters import (
    HOST_EVENTS_BY_DISCORD_EVENT,
    HostEvent,
    IMessageDispatcher,
    IPluginHost,
    PlayerCallback,
    Task,
)
from src.core.interfaces.notifications import (
    OutboundMessage,
    PlayerNotification,
)

__all__ = [
    # Host contracts
    'HostEvent',
    'HOST_EVENTS_BY_DISCORD_EVENT',
    'IPluginHost',
    'PlayerCallback',
    'Task',
    # Dispatch contracts
    'IMessageDispatcher',
    # Notification data classes
    'OutboundMessage',
    'PlayerNotification',
]
