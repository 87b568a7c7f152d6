"""
Discord 通知模块。

提供 Discord Webhook 集成，包括：
- Webhook 客户端（HTTP 通信）
- 消息构建器（JSON 负载）
- 异步发送器（交给宿主任务设施执行）
"""

from src.infrastructure.notification.discord.message_builder import MessageBuilder
from src.infrastructure.notification.discord.webhook_client import (
    DiscordWebhookClient,
    WebhookResponse,
)
from src.infrastructure.notification.discord.webhook_dispatcher import (
    DiscordWebhookDispatcher,
)

__all__ = [
    'DiscordWebhookClient',
    'DiscordWebhookDispatcher',
    'MessageBuilder',
    'WebhookResponse',
]
