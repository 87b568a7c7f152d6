"""
配置解析服务模块。

在插件启用时执行一次：把配置中的事件名与 Webhook 字符串解析为 RelaySettings。
所有错误都降级为“禁用发送”或“跳过该事件”，不会中断启动。
"""

import logging
from typing import Iterable, Optional, Set

from src.core.config import DEFAULT_WEBHOOK_URL, DiscordNotifyConfig
from src.core.domain.entities import RelaySettings
from src.core.domain.value_objects import DiscordEvent, WebhookEndpoint
from src.core.exceptions import UnknownEventError, WebhookConfigError

logger = logging.getLogger(__name__)

PLUGIN_NAME = 'discord-notify'


def resolve_subscriptions(event_names: Iterable[str]) -> frozenset:
    """
    解析订阅事件集合。

    未知事件名记录 WARNING 后跳过；重复项自动合并。

    Args:
        event_names: 配置中的事件名列表

    Returns:
        DiscordEvent 的 frozenset
    """
    subscriptions: Set[DiscordEvent] = set()
    for event_name in event_names or []:
        try:
            subscriptions.add(DiscordEvent.parse(event_name))
        except UnknownEventError as e:
            logger.warning(f'⚠️ Unknown event "{e.event_name}"')
    return frozenset(subscriptions)


def resolve_endpoint(
    webhook: Optional[str],
    placeholder: Optional[str] = DEFAULT_WEBHOOK_URL
) -> Optional[WebhookEndpoint]:
    """
    校验 Webhook 字符串。

    按顺序检查，遇到第一个失败即返回 None:
    1. 未设置（None 或空字符串）
    2. 仍是默认占位值
    3. 不是合法的绝对 http(s) URL

    Args:
        webhook: 配置中的 Webhook 字符串
        placeholder: 内置占位值

    Returns:
        WebhookEndpoint，或 None 表示禁用发送
    """
    if not webhook:
        logger.warning('⚠️ Discord webhook not set')
        return None

    if placeholder is not None and webhook == placeholder:
        logger.warning(
            '⚠️ Discord webhook URL must be set to something other than the default'
        )
        return None

    try:
        return WebhookEndpoint(webhook)
    except WebhookConfigError as e:
        logger.warning(f'⚠️ Discord webhook URL invalid: "{webhook}": {e.message}')
        return None


def resolve_relay_settings(
    section: DiscordNotifyConfig,
    placeholder: Optional[str] = DEFAULT_WEBHOOK_URL,
    plugin_name: str = PLUGIN_NAME
) -> RelaySettings:
    """
    解析完整的转发设置并记录摘要日志。

    启用时以 INFO 记录摘要，禁用时以 WARNING 记录。

    Args:
        section: discord_notify 配置段
        placeholder: 内置占位 Webhook 值
        plugin_name: 摘要日志前缀

    Returns:
        RelaySettings
    """
    subscriptions = resolve_subscriptions(section.events)
    endpoint = resolve_endpoint(section.webhook, placeholder)
    settings = RelaySettings(endpoint=endpoint, subscriptions=subscriptions)

    summary = settings.describe(plugin_name)
    if settings.enabled:
        logger.info(f'🔔 {summary}')
    else:
        logger.warning(f'⚠️ {summary}')

    return settings
