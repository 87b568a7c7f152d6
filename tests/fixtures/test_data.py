"""
Test data fixtures for discord-notify tests.

Constants shared by unit and integration tests.
"""

# ==================== Webhook Test Data ====================

WEBHOOK_URL = 'https://discord.com/api/webhooks/123/abc'

INVALID_WEBHOOK_URLS = [
    'discord.com/api/webhooks/123/abc',   # no scheme
    'ftp://discord.com/api/webhooks/1',   # unsupported scheme
    'https://',                           # no host
    'https://disc ord.com/api/webhooks',  # whitespace
    'http://[::1/api/webhooks',           # broken IPv6 literal
]


# ==================== Event Test Data ====================

EXAMPLE_EVENTS = ['player-join', 'bogus-event']

MISSPELLED_EVENT_NAMES = [
    'PLAYER-JOIN',
    'Player-Join',
    'player_join',
    'PLAYER_JOIN',
    ' player-join',
    'player-join ',
    'playerjoin',
    '',
]


# ==================== Player Test Data ====================

PLAYER_NAME = 'Alice'
MENTION_PLAYER_NAME = '@everyone Bob <@&123>'


# ==================== Config File Data ====================

EXAMPLE_CONFIG = {
    'discord_notify': {
        'webhook': WEBHOOK_URL,
        'events': EXAMPLE_EVENTS,
        'timeout': 5
    },
    'server': {
        'host': '127.0.0.1',
        'port': 5679
    },
    'dispatch': {
        'workers': 2
    }
}
