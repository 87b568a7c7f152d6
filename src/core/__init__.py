"""
Core layer module.

Contains domain models, interfaces, and exception definitions.
"""

from src.core.exceptions import (
    ConfigurationError,
    DiscordNotifyError,
    DispatchError,
    TaskRejectedError,
    UnknownEventError,
    WebhookConfigError,
)

__all__ = [
    # Exceptions
    'DiscordNotifyError',
    'ConfigurationError',
    'WebhookConfigError',
    'UnknownEventError',
    'DispatchError',
    'TaskRejectedError',
]
