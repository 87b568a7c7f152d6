"""
通知转发服务模块。

把宿主的玩家生命周期回调过滤、格式化后交给发送器。
"""

import logging
from typing import Optional

from src.core.domain.entities import RelaySettings
from src.core.domain.value_objects import DiscordEvent
from src.core.interfaces.adapters import IMessageDispatcher
from src.core.interfaces.notifications import PlayerNotification

logger = logging.getLogger(__name__)


class NotificationRelay:
    """
    通知转发器。

    只读持有启用时解析出的 RelaySettings，本身无可变状态。
    禁用状态或未订阅的事件直接忽略。

    Example:
        >>> relay = NotificationRelay(settings, dispatcher)
        >>> relay.on_player_join('Alice')   # -> "Alice has joined."
    """

    def __init__(
        self,
        settings: RelaySettings,
        dispatcher: Optional[IMessageDispatcher]
    ):
        """
        初始化转发器。

        Args:
            settings: 已解析的转发设置
            dispatcher: 消息发送器（禁用状态下可为 None）
        """
        self._settings = settings
        self._dispatcher = dispatcher

    @property
    def settings(self) -> RelaySettings:
        """已解析的转发设置"""
        return self._settings

    @property
    def enabled(self) -> bool:
        """是否启用发送"""
        return self._settings.enabled and self._dispatcher is not None

    def on_player_join(self, display_name: str) -> None:
        """宿主回调：玩家加入。"""
        self.notify(DiscordEvent.PLAYER_JOIN, display_name)

    def on_player_quit(self, display_name: str) -> None:
        """宿主回调：玩家退出。"""
        self.notify(DiscordEvent.PLAYER_QUIT, display_name)

    def notify(self, event: DiscordEvent, display_name: str) -> None:
        """
        过滤并转发一个事件。

        Args:
            event: 领域事件
            display_name: 玩家显示名
        """
        if not self.enabled:
            return
        if not self._settings.is_subscribed(event):
            logger.debug(f'🔕 未订阅事件 {event.external_name}，跳过')
            return

        message = PlayerNotification(event, display_name).to_message()
        self._dispatcher.dispatch(message)
