"""
End-to-end tests for the notification workflow.

Host event -> plugin -> relay -> task queue -> webhook POST, with the HTTP
session mocked.
"""

import json
import logging

import pytest
import requests
from dependency_injector import providers

from src.container import Container
from src.core.config import AppConfig
from src.core.interfaces.adapters import HostEvent
from src.infrastructure.notification.discord.webhook_client import DiscordWebhookClient
from src.interface.host.local_host import LocalPluginHost
from src.interface.plugin.discord_notify_plugin import DiscordNotifyPlugin
from src.main import create_app
from src.services.queue.task_queue import TaskQueue
from tests.fixtures.test_data import PLAYER_NAME, WEBHOOK_URL


@pytest.fixture
def running_host():
    host = LocalPluginHost(TaskQueue(name='WorkflowQueue', workers=2))
    host.start()
    yield host
    host.stop()


@pytest.fixture
def plugin(config_file, mock_session):
    return DiscordNotifyPlugin(
        config_loader=lambda: AppConfig.load(str(config_file)),
        client_factory=lambda timeout: DiscordWebhookClient(
            timeout=timeout, session=mock_session
        )
    )


class TestNotifyWorkflow:
    """Tests for the complete workflow."""

    def test_example_scenario(self, running_host, plugin, mock_session, caplog):
        caplog.set_level(logging.INFO)

        running_host.enable_plugin(plugin)
        running_host.call_event(HostEvent.PLAYER_JOIN, PLAYER_NAME)
        running_host.call_event(HostEvent.PLAYER_QUIT, PLAYER_NAME)
        running_host.task_queue.join()

        warnings = [
            r for r in caplog.records
            if r.levelno == logging.WARNING and 'Unknown event' in r.getMessage()
        ]
        assert len(warnings) == 1
        assert 'bogus-event' in warnings[0].getMessage()
        assert plugin.enabled is True

        mock_session.post.assert_called_once()
        args, kwargs = mock_session.post.call_args
        assert args == (WEBHOOK_URL,)
        assert kwargs['timeout'] == 5
        assert json.dumps(kwargs['json'], separators=(',', ':')) == (
            '{"content":"Alice has joined.","allowed_mentions":{"parse":[]}}'
        )

    def test_concurrent_joins_each_post_once(self, running_host, plugin, mock_session):
        running_host.enable_plugin(plugin)

        names = [f'Player{i}' for i in range(10)]
        for name in names:
            running_host.call_event(HostEvent.PLAYER_JOIN, name)
        running_host.task_queue.join()

        contents = sorted(
            c.kwargs['json']['content'] for c in mock_session.post.call_args_list
        )
        assert contents == sorted(f'{name} has joined.' for name in names)

    def test_connection_refused_never_reaches_host(
        self, running_host, plugin, mock_session, caplog
    ):
        mock_session.post.side_effect = requests.ConnectionError('Connection refused')
        running_host.enable_plugin(plugin)

        running_host.call_event(HostEvent.PLAYER_JOIN, PLAYER_NAME)
        running_host.task_queue.join()

        assert 'Connection refused' in caplog.text
        stats = running_host.task_queue.get_status()['stats']
        assert stats['total_failed'] == 0

    def test_host_stop_closes_http_client(self, plugin, mock_session):
        host = LocalPluginHost(TaskQueue(name='StopQueue', workers=1))
        host.start()
        host.enable_plugin(plugin)

        host.stop()

        mock_session.close.assert_called_once()
        assert plugin.relay is None

    def test_enable_twice_posts_once(self, running_host, plugin, mock_session):
        running_host.enable_plugin(plugin)
        running_host.enable_plugin(plugin)

        running_host.call_event(HostEvent.PLAYER_JOIN, PLAYER_NAME)
        running_host.task_queue.join()

        assert mock_session.post.call_count == 1

    def test_http_endpoint_to_webhook(self, running_host, plugin, mock_session):
        running_host.enable_plugin(plugin)
        client = create_app(running_host).test_client()

        response = client.post('/events/player-join', json={'player': PLAYER_NAME})
        running_host.task_queue.join()

        assert response.status_code == 202
        mock_session.post.assert_called_once()
        assert mock_session.post.call_args.kwargs['json']['content'] == 'Alice has joined.'


class TestContainerWiring:
    """Tests for the dependency injection container."""

    @pytest.fixture
    def container(self, config_file, mock_session):
        container = Container()
        container.config_path.override(str(config_file))
        container.webhook_client.override(
            providers.Factory(DiscordWebhookClient, session=mock_session)
        )
        return container

    def test_container_builds_working_plugin(self, container, mock_session):
        host = container.plugin_host()
        plugin = container.discord_notify_plugin()

        host.start()
        try:
            host.enable_plugin(plugin)
            host.call_event(HostEvent.PLAYER_JOIN, PLAYER_NAME)
            host.task_queue.join()
        finally:
            host.stop()

        assert container.app_config().discord_notify.webhook == WEBHOOK_URL
        assert host.task_queue.get_status()['workers'] == 2
        mock_session.post.assert_called_once()
        assert mock_session.post.call_args.kwargs['timeout'] == 5

    def test_plugin_reloads_config_on_each_enable(self, container, config_file, mock_session):
        other_webhook = 'https://discord.com/api/webhooks/456/def'
        host = container.plugin_host()
        plugin = container.discord_notify_plugin()

        host.start()
        try:
            host.enable_plugin(plugin)
            host.disable_plugin(plugin)

            data = json.loads(config_file.read_text(encoding='utf-8'))
            data['discord_notify']['webhook'] = other_webhook
            config_file.write_text(json.dumps(data), encoding='utf-8')

            host.enable_plugin(plugin)
            host.call_event(HostEvent.PLAYER_JOIN, PLAYER_NAME)
            host.task_queue.join()
        finally:
            host.stop()

        mock_session.post.assert_called_once()
        assert mock_session.post.call_args.args == (other_webhook,)

    def test_singletons_are_shared(self, container):
        assert container.plugin_host() is container.plugin_host()
        assert container.plugin_host().task_queue is container.task_queue()
