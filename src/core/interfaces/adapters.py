"""
Adapter interfaces module.

Contains abstract base classes defining contracts between the relay,
its host runtime, and the outbound delivery channel.
"""

from abc import ABC, abstractmethod
from typing import Callable

from src.core.domain.value_objects import DiscordEvent
from src.core.interfaces.notifications import OutboundMessage

PlayerCallback = Callable[[str], None]
Task = Callable[[], None]


class HostEvent:
    """Host-side lifecycle event names."""

    PLAYER_JOIN = 'player.join'
    PLAYER_QUIT = 'player.quit'


HOST_EVENTS_BY_DISCORD_EVENT = {
    DiscordEvent.PLAYER_JOIN: HostEvent.PLAYER_JOIN,
    DiscordEvent.PLAYER_QUIT: HostEvent.PLAYER_QUIT,
}


class IPluginHost(ABC):
    """
    Plugin host interface.

    Defines what the relay needs from the runtime that loads it: callback
    registration for player lifecycle events and an asynchronous task
    facility.
    """

    @abstractmethod
    def register_event(self, event_name: str, callback: PlayerCallback) -> None:
        """
        Register a callback for a host event.

        Args:
            event_name: One of the HostEvent names.
            callback: Called with the player's display name.
        """
        pass

    @abstractmethod
    def run_task_async(self, task: Task, name: str = 'task') -> None:
        """
        Run a task off the calling thread.

        Args:
            task: Zero-argument callable.
            name: Task name for logging.

        Raises:
            TaskRejectedError: If the host no longer accepts tasks.
        """
        pass


class IMessageDispatcher(ABC):
    """
    Message dispatcher interface.

    Implementations must return without waiting for delivery and must never
    raise delivery failures to the caller.
    """

    @abstractmethod
    def dispatch(self, message: OutboundMessage) -> None:
        """
        Hand a message over for asynchronous delivery.

        Args:
            message: Message to deliver.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release delivery resources."""
        pass
