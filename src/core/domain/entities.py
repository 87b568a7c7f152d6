"""
Entities module.

Contains the runtime state of the notification relay, built once when the
plugin is enabled and discarded when it is disabled.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from src.core.domain.value_objects import DiscordEvent, WebhookEndpoint


@dataclass(frozen=True)
class RelaySettings:
    """
    Resolved relay settings.

    Attributes:
        endpoint: Validated webhook endpoint, None when delivery is disabled.
        subscriptions: Events that should produce a notification.
    """
    endpoint: Optional[WebhookEndpoint] = None
    subscriptions: FrozenSet[DiscordEvent] = field(default_factory=frozenset)

    @property
    def enabled(self) -> bool:
        """Delivery is enabled only with an endpoint and at least one event."""
        return self.endpoint is not None and len(self.subscriptions) > 0

    def is_subscribed(self, event: DiscordEvent) -> bool:
        """Check whether an event is in the subscription set."""
        return event in self.subscriptions

    @property
    def event_names(self) -> str:
        """Return subscribed event member names, sorted, comma separated."""
        return ', '.join(sorted(event.name for event in self.subscriptions))

    def describe(self, plugin_name: str) -> str:
        """
        Return a one-line summary of the resolved state.

        Args:
            plugin_name: Name used as the summary prefix.
        """
        state = '' if self.enabled else ' not'
        return (
            f'{plugin_name}{state} enabled '
            f'(webhook={self.endpoint}, events={self.event_names})'
        )
