"""
Plugin module.

Contains the discord-notify plugin adapter.
"""

from src.interface.plugin.discord_notify_plugin import DiscordNotifyPlugin

__all__ = [
    'DiscordNotifyPlugin',
]
