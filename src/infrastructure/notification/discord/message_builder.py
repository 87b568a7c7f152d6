"""
Discord 消息构建器模块。

负责把 OutboundMessage 转换为 Discord Webhook 的 JSON 负载。
"""

from typing import Any

from src.core.interfaces.notifications import OutboundMessage


class MessageBuilder:
    """
    Discord 消息构建器。

    负载格式参考 Discord 文档 Execute Webhook。
    allowed_mentions.parse 固定为空列表，玩家名中的 @everyone 等不会触发提醒。
    """

    def build_payload(self, message: OutboundMessage) -> dict[str, Any]:
        """
        构建 Webhook 负载。

        Args:
            message: 待发送消息

        Returns:
            {'content': ..., 'allowed_mentions': {'parse': []}}
        """
        return {
            'content': message.content,
            'allowed_mentions': {'parse': []},
        }
