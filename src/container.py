"""
Dependency Injection Container module.

Contains the Container class wiring the plugin, its host and the Discord
delivery components.
"""

from dependency_injector import containers, providers

from src.core.config import AppConfig

# Discord Notification Components
from src.infrastructure.notification.discord.message_builder import MessageBuilder
from src.infrastructure.notification.discord.webhook_client import DiscordWebhookClient

# Host & Plugin
from src.interface.host.local_host import LocalPluginHost
from src.interface.plugin.discord_notify_plugin import DiscordNotifyPlugin

# Queue
from src.services.queue.task_queue import TaskQueue


class Container(containers.DeclarativeContainer):
    """
    依赖注入容器。

    服务层次结构:
    1. Configuration (配置文件路径与配置实例)
    2. Notification Components (Webhook 客户端、消息构建器)
    3. Host (任务队列、本地插件宿主)
    4. Plugin (discord-notify 插件)
    """

    # ===== Configuration =====
    config_path = providers.Object(None)
    app_config = providers.Singleton(AppConfig.load, config_path=config_path)
    # 插件每次启用时重新读取配置文件
    plugin_config = providers.Factory(AppConfig.load, config_path=config_path)

    # ===== Notification Components =====
    # 每次插件启用时创建一个新的共享客户端
    webhook_client = providers.Factory(DiscordWebhookClient)
    message_builder = providers.Singleton(MessageBuilder)

    # ===== Host =====
    task_queue = providers.Singleton(
        TaskQueue,
        name='DispatchQueue',
        workers=app_config.provided.dispatch.workers
    )
    plugin_host = providers.Singleton(LocalPluginHost, task_queue=task_queue)

    # ===== Plugin =====
    discord_notify_plugin = providers.Singleton(
        DiscordNotifyPlugin,
        config_loader=plugin_config.provider,
        client_factory=webhook_client.provider,
        message_builder=message_builder
    )


# 全局容器实例
container = Container()
