"""
Discord Webhook 客户端模块。

提供 Discord Webhook 的 HTTP 通信功能。
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any

import requests

logger = logging.getLogger(__name__)


@dataclass
class WebhookResponse:
    """
    Webhook 响应数据类。

    Attributes:
        success: 请求是否成功（状态码在 [200, 300) 区间）
        status_code: HTTP 状态码
        status_line: 状态行，如 '404 Not Found'
        error_message: 错误消息（失败时）
    """
    success: bool
    status_code: int | None = None
    status_line: str | None = None
    error_message: str | None = None


class DiscordWebhookClient:
    """
    Discord Webhook 客户端。

    只负责 HTTP 通信，不包含消息格式化逻辑。
    内部持有一个长期复用的 requests.Session，可被多个线程同时调用。

    不做重试，也不处理 Rate Limit：每次发送只有一次 POST。

    Example:
        >>> client = DiscordWebhookClient(timeout=10)
        >>> response = client.send(
        ...     'https://discord.com/api/webhooks/xxx/yyy',
        ...     {'content': 'Alice has joined.', 'allowed_mentions': {'parse': []}}
        ... )
        >>> client.close()
    """

    def __init__(self, timeout: int = 10, session: requests.Session | None = None):
        """
        初始化客户端。

        Args:
            timeout: 请求超时时间（秒），默认 10 秒
            session: 自定义 Session（可选，默认新建）
        """
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({'Content-Type': 'application/json'})
        self._closed = False
        self._close_lock = threading.Lock()

    @property
    def timeout(self) -> int:
        """请求超时时间（秒）"""
        return self._timeout

    @property
    def closed(self) -> bool:
        """客户端是否已关闭"""
        return self._closed

    def send(self, webhook_url: str, payload: dict[str, Any]) -> WebhookResponse:
        """
        发送一次 JSON POST 请求。

        传输层异常不会抛出，而是以 success=False 的响应返回。

        Args:
            webhook_url: Webhook URL
            payload: JSON 负载

        Returns:
            WebhookResponse: 响应结果
        """
        try:
            response = self._session.post(
                webhook_url,
                json=payload,
                timeout=self._timeout
            )
        except requests.RequestException as e:
            return WebhookResponse(success=False, error_message=str(e))

        status_line = f'{response.status_code} {response.reason or ""}'.strip()

        if 200 <= response.status_code < 300:
            return WebhookResponse(
                success=True,
                status_code=response.status_code,
                status_line=status_line
            )

        return WebhookResponse(
            success=False,
            status_code=response.status_code,
            status_line=status_line,
            error_message=f'HTTP {status_line}'
        )

    def close(self) -> None:
        """
        关闭底层 Session。

        只关闭一次；关闭失败只记录日志，不抛出。
        """
        with self._close_lock:
            if self._closed:
                return
            self._closed = True

        try:
            self._session.close()
        except Exception as e:
            logger.warning(f'⚠️ HTTP 客户端关闭时出错: {e}')
