"""
Configuration module.

Contains Pydantic-based configuration classes for the discord-notify plugin.
"""

import json
import os
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings

# Shipped placeholder; a webhook equal to this value counts as "never configured"
DEFAULT_WEBHOOK_URL = 'https://discord.com/api/webhooks/<id>/<token>'
DEFAULT_EVENTS = ['player-join', 'player-quit']


class DiscordNotifyConfig(BaseModel):
    """Discord 通知配置"""

    webhook: Optional[str] = DEFAULT_WEBHOOK_URL
    events: List[str] = Field(default_factory=lambda: list(DEFAULT_EVENTS))
    timeout: int = Field(default=10, ge=1, le=120)  # HTTP 超时时间（秒）


class ServerConfig(BaseModel):
    """本地事件接收服务配置"""

    host: str = '0.0.0.0'
    port: int = Field(default=5679, ge=1, le=65535)


class DispatchConfig(BaseModel):
    """异步发送配置"""

    workers: int = Field(default=2, ge=1, le=16)


class AppConfig(BaseSettings):
    """主应用配置"""

    discord_notify: DiscordNotifyConfig = Field(default_factory=DiscordNotifyConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    dispatch: DispatchConfig = Field(default_factory=DispatchConfig)

    model_config = ConfigDict(
        env_prefix='DISCORD_NOTIFY_',
        env_nested_delimiter='__'
    )

    def get(self, key: str, default=None):
        """获取配置值，支持点分隔的嵌套键"""
        value = self
        for k in key.split('.'):
            if not hasattr(value, k):
                return default
            value = getattr(value, k)
        return value

    @classmethod
    def load(cls, config_path: str = None) -> 'AppConfig':
        """
        加载配置。

        配置文件不存在时写出默认配置，然后返回默认值。
        """
        if config_path is None:
            config_path = os.getenv('CONFIG_PATH', 'config.json')

        if os.path.exists(config_path):
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = json.load(f)
            return cls(**config_data)

        config_instance = cls()
        config_instance.save(config_path)
        return config_instance

    def save(self, config_path: str = None):
        """保存配置"""
        if config_path is None:
            config_path = os.getenv('CONFIG_PATH', 'config.json')

        directory = os.path.dirname(config_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(config_path, 'w', encoding='utf-8') as f:
            f.write(self.model_dump_json(indent=2))
