"""
Tests for DiscordEvent names and message templates.
"""

import pytest

from src.core.domain.value_objects import DiscordEvent
from src.core.exceptions import UnknownEventError
from tests.fixtures.test_data import MISSPELLED_EVENT_NAMES


class TestDiscordEventNames:
    """Tests for the event name table."""

    def test_parse_canonical_names(self):
        """Canonical names map to their members."""
        assert DiscordEvent.parse('player-join') is DiscordEvent.PLAYER_JOIN
        assert DiscordEvent.parse('player-quit') is DiscordEvent.PLAYER_QUIT

    def test_every_member_round_trips(self):
        """Every member parses back from its external name."""
        for event in DiscordEvent:
            assert DiscordEvent.parse(event.external_name) is event

    def test_external_names_are_lowercase_hyphenated(self):
        """External names are derived from member names."""
        for event in DiscordEvent:
            assert event.external_name == event.name.lower().replace('_', '-')

    @pytest.mark.parametrize('name', MISSPELLED_EVENT_NAMES)
    def test_parse_requires_exact_match(self, name):
        """Case, separators and whitespace must match exactly."""
        with pytest.raises(UnknownEventError) as exc_info:
            DiscordEvent.parse(name)

        assert exc_info.value.event_name == name
        assert exc_info.value.code == 'UNKNOWN_EVENT'

    def test_parse_non_string(self):
        """Non-string names are unknown, not a crash."""
        with pytest.raises(UnknownEventError):
            DiscordEvent.parse(None)


class TestDiscordEventMessages:
    """Tests for message templates."""

    def test_join_message(self):
        assert DiscordEvent.PLAYER_JOIN.format_message('Alice') == 'Alice has joined.'

    def test_quit_message(self):
        assert DiscordEvent.PLAYER_QUIT.format_message('Alice') == 'Alice has quit.'

    def test_braces_in_name_are_not_interpreted(self):
        """Display names are inserted literally."""
        message = DiscordEvent.PLAYER_JOIN.format_message('{name}{0}')

        assert message == '{name}{0} has joined.'
