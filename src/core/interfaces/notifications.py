"""
Notification data classes module.

Contains data classes passed between the relay and the dispatcher.
"""

from dataclasses import dataclass

from src.core.domain.value_objects import DiscordEvent


@dataclass(frozen=True)
class OutboundMessage:
    """
    A single chat message waiting to be delivered.

    Attributes:
        content: Human-readable message text.
    """
    content: str

    def __str__(self) -> str:
        return self.content


@dataclass(frozen=True)
class PlayerNotification:
    """
    Player lifecycle notification data.

    Attributes:
        event: The domain event that occurred.
        display_name: Player display name as reported by the host.
    """
    event: DiscordEvent
    display_name: str

    def to_message(self) -> OutboundMessage:
        """Render the notification as an outbound message."""
        return OutboundMessage(self.event.format_message(self.display_name))
