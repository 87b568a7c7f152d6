"""
Discord Webhook 异步发送器模块。

把消息交给宿主的异步任务设施执行，调用方线程从不等待网络请求。
"""

import logging
from typing import Callable

from src.core.domain.value_objects import WebhookEndpoint
from src.core.exceptions import DispatchError
from src.core.interfaces.adapters import IMessageDispatcher, Task
from src.core.interfaces.notifications import OutboundMessage

from .message_builder import MessageBuilder
from .webhook_client import DiscordWebhookClient

logger = logging.getLogger(__name__)

TaskRunner = Callable[[Task, str], None]


class DiscordWebhookDispatcher(IMessageDispatcher):
    """
    Discord Webhook 发送器。

    发送策略:
    - 状态码 2xx: INFO 记录发送成功
    - 其他状态码: WARNING 记录状态行
    - 传输异常或任务被拒绝: WARNING 记录，不向调用方抛出
    - 不重试

    Example:
        >>> dispatcher = DiscordWebhookDispatcher(client, endpoint, host.run_task_async)
        >>> dispatcher.dispatch(OutboundMessage('Alice has joined.'))
        >>> dispatcher.close()
    """

    def __init__(
        self,
        webhook_client: DiscordWebhookClient,
        endpoint: WebhookEndpoint,
        task_runner: TaskRunner,
        message_builder: MessageBuilder | None = None
    ):
        """
        初始化发送器。

        Args:
            webhook_client: 共享的 Webhook 客户端
            endpoint: 已校验的 Webhook 地址
            task_runner: 宿主的异步任务入口 (task, name) -> None
            message_builder: 消息构建器（可选，默认创建新实例）
        """
        self._client = webhook_client
        self._endpoint = endpoint
        self._run_async = task_runner
        self._builder = message_builder or MessageBuilder()

    @property
    def endpoint(self) -> WebhookEndpoint:
        """目标 Webhook 地址"""
        return self._endpoint

    def dispatch(self, message: OutboundMessage) -> None:
        """
        提交一条消息，立即返回。

        Args:
            message: 待发送消息
        """
        try:
            self._run_async(lambda: self.send_now(message), 'discord-webhook')
        except DispatchError as e:
            logger.warning(f'⚠️ Discord 消息未能提交: "{message}" ({e})')
        except Exception as e:
            logger.warning(f'⚠️ Discord 消息提交时出现异常: "{message}" ({e})')

    def send_now(self, message: OutboundMessage) -> None:
        """
        在当前线程发送消息。

        由异步任务调用；所有异常都在这里记录并吞掉。

        Args:
            message: 待发送消息
        """
        try:
            logger.info(f'🔔 发送 Discord 消息: "{message}"...')
            payload = self._builder.build_payload(message)
            response = self._client.send(self._endpoint.url, payload)

            if response.success:
                logger.info(f'✅ Discord 消息已发送: "{message}".')
            elif response.status_code is not None:
                logger.warning(
                    f'⚠️ Discord Webhook POST 返回状态: {response.status_line}'
                )
            else:
                logger.warning(
                    f'⚠️ Discord Webhook POST 出现异常: {response.error_message}'
                )
        except Exception as e:
            logger.warning(f'⚠️ Discord Webhook POST 出现异常: {e}', exc_info=True)

    def close(self) -> None:
        """关闭共享的 Webhook 客户端。"""
        try:
            self._client.close()
        except Exception as e:
            logger.warning(f'⚠️ HTTP 客户端关闭时出错: {e}')
