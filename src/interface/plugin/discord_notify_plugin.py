"""
Discord notify plugin module.

Adapter between a plugin host and the notification relay. Owns every piece
of runtime state (settings, HTTP client, dispatcher) from enable to disable.
"""

import logging
from typing import Callable, Optional

from pydantic import ValidationError

from src.core.config import AppConfig, DEFAULT_WEBHOOK_URL, DiscordNotifyConfig
from src.core.interfaces.adapters import HostEvent, IPluginHost
from src.infrastructure.notification.discord.message_builder import MessageBuilder
from src.infrastructure.notification.discord.webhook_client import DiscordWebhookClient
from src.infrastructure.notification.discord.webhook_dispatcher import (
    DiscordWebhookDispatcher,
)
from src.services.notification.config_resolver import (
    PLUGIN_NAME,
    resolve_relay_settings,
)
from src.services.notification.relay import NotificationRelay

logger = logging.getLogger(__name__)

ClientFactory = Callable[[int], DiscordWebhookClient]


class DiscordNotifyPlugin:
    """
    Discord notify plugin.

    Lifecycle:
        on_enable(host): resolve configuration, create the shared HTTP
            client, register the join/quit callbacks.
        on_disable(): close the shared HTTP client and drop all state.
    """

    name = PLUGIN_NAME

    def __init__(
        self,
        config_loader: Callable[[], AppConfig] = AppConfig.load,
        client_factory: Optional[ClientFactory] = None,
        message_builder: Optional[MessageBuilder] = None,
        placeholder_webhook: str = DEFAULT_WEBHOOK_URL
    ):
        """
        Initialize the plugin.

        Args:
            config_loader: Returns the application configuration; called
                once per enable.
            client_factory: Builds the shared webhook client from a timeout.
            message_builder: Payload builder shared by dispatches.
            placeholder_webhook: Value that means "never configured".
        """
        self._load_config = config_loader
        self._client_factory = client_factory or (
            lambda timeout: DiscordWebhookClient(timeout=timeout)
        )
        self._message_builder = message_builder or MessageBuilder()
        self._placeholder = placeholder_webhook
        self._relay: Optional[NotificationRelay] = None
        self._dispatcher: Optional[DiscordWebhookDispatcher] = None
        self._host: Optional[IPluginHost] = None

    @property
    def relay(self) -> Optional[NotificationRelay]:
        """The active relay, None while disabled."""
        return self._relay

    @property
    def enabled(self) -> bool:
        """Whether notifications are being delivered."""
        return self._relay is not None and self._relay.enabled

    def on_enable(self, host: IPluginHost) -> None:
        """
        Resolve configuration and register callbacks with the host.

        Configuration problems only disable delivery; nothing is raised.

        Args:
            host: The plugin host that loaded this plugin.
        """
        # Re-enabling on the same host keeps the callbacks already registered
        registered = self._relay is not None and self._host is host
        if self._relay is not None:
            self.on_disable()

        section = self._read_section()
        settings = resolve_relay_settings(
            section,
            placeholder=self._placeholder,
            plugin_name=self.name
        )

        client = self._client_factory(section.timeout)
        if settings.endpoint is not None:
            self._dispatcher = DiscordWebhookDispatcher(
                webhook_client=client,
                endpoint=settings.endpoint,
                task_runner=host.run_task_async,
                message_builder=self._message_builder
            )
        else:
            # Nothing will ever be sent; release the client right away
            client.close()
            self._dispatcher = None

        self._relay = NotificationRelay(settings, self._dispatcher)
        self._host = host

        if not registered:
            host.register_event(HostEvent.PLAYER_JOIN, self.on_player_join)
            host.register_event(HostEvent.PLAYER_QUIT, self.on_player_quit)

    def _read_section(self) -> DiscordNotifyConfig:
        """Load the plugin section, falling back to an unset one."""
        try:
            return self._load_config().discord_notify
        except (ValidationError, ValueError, OSError) as e:
            logger.warning(f'⚠️ Failed to read configuration, notifications disabled: {e}')
            return DiscordNotifyConfig(webhook=None, events=[])

    def on_disable(self) -> None:
        """Release the shared HTTP client and discard runtime state."""
        if self._dispatcher is not None:
            self._dispatcher.close()
        self._dispatcher = None
        self._relay = None
        self._host = None

        logger.info(f'🛑 {self.name} disabled')

    def on_player_join(self, display_name: str) -> None:
        """Host callback for a player joining."""
        relay = self._relay
        if relay is not None:
            relay.on_player_join(display_name)

    def on_player_quit(self, display_name: str) -> None:
        """Host callback for a player quitting."""
        relay = self._relay
        if relay is not None:
            relay.on_player_quit(display_name)
