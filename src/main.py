"""
discord-notify Application Entry Point.

Starts the local plugin host, enables the discord-notify plugin and serves
the HTTP endpoint that receives player join/quit events from the game server.
"""

import argparse
import logging
import os
import sys
from datetime import datetime

from flask import Flask

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """配置日志：按日期命名的文件 + UTF-8 控制台输出"""
    log_path = os.getenv('LOG_PATH', 'logs')
    os.makedirs(log_path, exist_ok=True)

    today = datetime.now().strftime('%Y-%m-%d')
    log_file = os.path.join(log_path, f'discord_notify_{today}.log')

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setStream(
        open(sys.stdout.fileno(), mode='w', encoding='utf-8', buffering=1, closefd=False)
    )

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8'),
            stream_handler
        ]
    )

    # Werkzeug 只保留警告以上
    logging.getLogger('werkzeug').setLevel(logging.WARNING)


def create_app(host) -> Flask:
    """
    创建 Flask 应用。

    Args:
        host: 接收事件的 LocalPluginHost

    Returns:
        Flask 应用
    """
    from src.interface.webhook.handler import create_events_blueprint

    app = Flask(__name__)
    app.register_blueprint(create_events_blueprint(host))
    return app


def main():
    """主程序入口"""
    parser = argparse.ArgumentParser(
        description='discord-notify - 玩家加入/退出 Discord 通知'
    )
    parser.add_argument('--config', default=None, help='配置文件路径（默认 CONFIG_PATH 或 config.json）')
    parser.add_argument('--debug', action='store_true', help='启用debug模式')
    args = parser.parse_args()

    setup_logging(args.debug)

    from src.container import container

    if args.config:
        container.config_path.override(args.config)

    config = container.app_config()
    host = container.plugin_host()
    plugin = container.discord_notify_plugin()

    logger.info('🚀 正在启动插件宿主...')
    host.start()
    host.enable_plugin(plugin)

    app = create_app(host)
    logger.info(
        f'📍 事件接收地址: http://{config.server.host}:{config.server.port}/events/<event>'
    )

    try:
        app.run(
            host=config.server.host,
            port=config.server.port,
            debug=False,
            use_reloader=False
        )
    except KeyboardInterrupt:
        logger.info('🛑 接收到停止信号，正在退出...')
    except Exception as e:
        logger.error(f'❌ 发生未预期错误: {e}', exc_info=True)
    finally:
        host.stop()
        logger.info('✅ 已优雅关闭')


if __name__ == '__main__':
    main()
