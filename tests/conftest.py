"""
Test configuration and fixtures for discord-notify tests.

This module provides:
- Mock HTTP sessions and responses (no real network traffic)
- A fake plugin host that runs async tasks inline
- Temporary configuration files
"""

import json
import sys
from pathlib import Path
from typing import Callable, Dict, List
from unittest.mock import MagicMock

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.core.interfaces.adapters import IPluginHost  # noqa: E402
from tests.fixtures.test_data import EXAMPLE_CONFIG  # noqa: E402


# ==================== Fake Host ====================

class FakePluginHost(IPluginHost):
    """Plugin host that records registrations and runs tasks inline."""

    def __init__(self):
        self.listeners: Dict[str, List[Callable[[str], None]]] = {}
        self.task_names: List[str] = []

    def register_event(self, event_name, callback):
        self.listeners.setdefault(event_name, []).append(callback)

    def run_task_async(self, task, name='task'):
        self.task_names.append(name)
        task()

    def fire(self, event_name: str, display_name: str) -> None:
        for callback in self.listeners.get(event_name, []):
            callback(display_name)


@pytest.fixture
def fake_host() -> FakePluginHost:
    """Create a fake plugin host."""
    return FakePluginHost()


@pytest.fixture
def inline_runner():
    """Task runner that executes tasks immediately and records their names."""
    calls = []

    def run(task, name='task'):
        calls.append(name)
        task()

    run.calls = calls
    return run


# ==================== HTTP Mocks ====================

@pytest.fixture
def make_response():
    """Factory for mock requests.Response objects."""
    def _make(status_code: int = 204, reason: str = 'No Content'):
        response = MagicMock()
        response.status_code = status_code
        response.reason = reason
        return response
    return _make


@pytest.fixture
def mock_session(make_response):
    """Mock requests.Session whose post() returns 204 No Content."""
    session = MagicMock()
    session.headers = {}
    session.post.return_value = make_response(204, 'No Content')
    return session


@pytest.fixture
def webhook_client(mock_session):
    """DiscordWebhookClient backed by the mock session."""
    from src.infrastructure.notification.discord.webhook_client import (
        DiscordWebhookClient
    )
    return DiscordWebhookClient(timeout=5, session=mock_session)


@pytest.fixture
def mock_dispatcher():
    """Mock message dispatcher."""
    from src.core.interfaces.adapters import IMessageDispatcher
    return MagicMock(spec=IMessageDispatcher)


# ==================== Configuration ====================

@pytest.fixture
def config_file(tmp_path) -> Path:
    """Write the example configuration to a temporary file."""
    path = tmp_path / 'config.json'
    path.write_text(json.dumps(EXAMPLE_CONFIG), encoding='utf-8')
    return path
