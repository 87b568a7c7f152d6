"""
基础设施层模块。

提供外部服务集成实现：
- 通知服务（Discord Webhook）
"""

from src.infrastructure.notification.discord import (
    DiscordWebhookClient,
    DiscordWebhookDispatcher,
    MessageBuilder,
)

__all__ = [
    # Discord Notification
    'DiscordWebhookClient',
    'DiscordWebhookDispatcher',
    'MessageBuilder',
]
