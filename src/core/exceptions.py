"""
Exceptions module.

Contains the exception hierarchy for the discord-notify plugin.
All custom exceptions inherit from DiscordNotifyError for consistent handling.
"""

from typing import Any, Dict, Optional


class DiscordNotifyError(Exception):
    """
    Base exception for all discord-notify errors.

    None of these exceptions are allowed to reach the host runtime; they are
    raised at parsing and scheduling seams and downgraded to log records at
    the component boundaries.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code.
        context: Additional context information for debugging.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or 'UNKNOWN_ERROR'
        self.context = context or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.context:
            return f'[{self.code}] {self.message} - Context: {self.context}'
        return f'[{self.code}] {self.message}'


# Configuration exceptions

class ConfigurationError(DiscordNotifyError):
    """Base exception for configuration problems."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, code or 'CONFIG_ERROR', context)


class WebhookConfigError(ConfigurationError):
    """
    Exception raised when the configured webhook URL cannot be used.

    Attributes:
        webhook: The offending webhook string.
    """

    def __init__(self, message: str, webhook: Optional[str] = None):
        super().__init__(
            message,
            'WEBHOOK_INVALID',
            {'webhook': webhook} if webhook else None
        )
        self.webhook = webhook


class UnknownEventError(ConfigurationError):
    """
    Exception raised when an event name has no matching DiscordEvent.

    Attributes:
        event_name: The unrecognised event name.
    """

    def __init__(self, event_name: str):
        super().__init__(f'Unknown event "{event_name}"', 'UNKNOWN_EVENT')
        self.event_name = event_name


# Dispatch exceptions

class DispatchError(DiscordNotifyError):
    """Base exception for message dispatch problems."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, code or 'DISPATCH_ERROR', context)


class TaskRejectedError(DispatchError):
    """
    Exception raised when a task is submitted to a stopped task queue.

    Attributes:
        task_name: Name of the rejected task.
    """

    def __init__(self, task_name: str, queue_name: str):
        super().__init__(
            f'Task queue {queue_name} is stopped',
            'TASK_REJECTED',
            {'task': task_name}
        )
        self.task_name = task_name
