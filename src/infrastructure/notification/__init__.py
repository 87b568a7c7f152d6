"""
通知服务模块。

提供各种通知渠道的实现。
"""

from src.infrastructure.notification.discord import (
    DiscordWebhookClient,
    DiscordWebhookDispatcher,
    MessageBuilder,
)

__all__ = [
    'DiscordWebhookClient',
    'DiscordWebhookDispatcher',
    'MessageBuilder',
]
