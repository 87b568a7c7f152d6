"""
Value objects module.

Contains immutable value objects representing domain concepts without identity.
Value objects are compared by their attributes, not by identity.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict
from urllib.parse import urlsplit

from requests.exceptions import RequestException
from requests.models import PreparedRequest

from src.core.exceptions import UnknownEventError, WebhookConfigError


class DiscordEvent(Enum):
    """
    Notifiable game events.

    The value of each member is its external (configuration) name.
    """
    PLAYER_JOIN = 'player-join'
    PLAYER_QUIT = 'player-quit'

    @property
    def external_name(self) -> str:
        """Return the lowercase, hyphenated configuration name."""
        return self.value

    @property
    def message_template(self) -> str:
        """Return the message template for this event."""
        return _MESSAGE_TEMPLATES[self]

    def format_message(self, display_name: str) -> str:
        """Render the notification text for a player."""
        return self.message_template.format(name=display_name)

    @classmethod
    def parse(cls, name: str) -> 'DiscordEvent':
        """
        Look up an event by its exact external name.

        Args:
            name: Configuration name, e.g. 'player-join'.

        Returns:
            The matching DiscordEvent.

        Raises:
            UnknownEventError: If no event has that exact name.
        """
        try:
            return _EVENTS_BY_NAME[name]
        except (KeyError, TypeError):
            raise UnknownEventError(str(name)) from None


_EVENTS_BY_NAME: Dict[str, DiscordEvent] = {
    'player-join': DiscordEvent.PLAYER_JOIN,
    'player-quit': DiscordEvent.PLAYER_QUIT,
}

_MESSAGE_TEMPLATES: Dict[DiscordEvent, str] = {
    DiscordEvent.PLAYER_JOIN: '{name} has joined.',
    DiscordEvent.PLAYER_QUIT: '{name} has quit.',
}


@dataclass(frozen=True)
class WebhookEndpoint:
    """
    Webhook endpoint value object.

    Represents a validated, absolute HTTP(S) webhook URL.

    Attributes:
        url: The webhook URL exactly as configured.
    """
    url: str

    def __post_init__(self) -> None:
        """Validate the URL on initialization."""
        if not self.url:
            raise WebhookConfigError('Webhook URL is empty')

        if any(ch.isspace() for ch in self.url):
            raise WebhookConfigError(
                'Webhook URL contains whitespace', webhook=self.url
            )

        try:
            parts = urlsplit(self.url)
        except ValueError as e:
            raise WebhookConfigError(str(e), webhook=self.url) from e

        if parts.scheme not in ('http', 'https'):
            raise WebhookConfigError(
                f'Unsupported URL scheme: {parts.scheme or "(none)"}',
                webhook=self.url
            )
        if not parts.hostname:
            raise WebhookConfigError('No host supplied', webhook=self.url)

        # Port and IDNA host checks are left to requests
        try:
            PreparedRequest().prepare_url(self.url, None)
        except RequestException as e:
            raise WebhookConfigError(str(e), webhook=self.url) from e

    @property
    def host(self) -> str:
        """Return the host part of the URL."""
        return urlsplit(self.url).hostname or ''

    def __str__(self) -> str:
        """Return the URL as string."""
        return self.url
