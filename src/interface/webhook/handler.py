"""
Event webhook handler module.

Receives player lifecycle events from the game server over HTTP and feeds
them into the local plugin host.
"""

import logging

from flask import Blueprint, jsonify, request

from src.core.domain.value_objects import DiscordEvent
from src.core.exceptions import UnknownEventError
from src.core.interfaces.adapters import HOST_EVENTS_BY_DISCORD_EVENT
from src.interface.host.local_host import LocalPluginHost

logger = logging.getLogger(__name__)


def create_events_blueprint(
    host: LocalPluginHost,
    prefix: str = '/events'
) -> Blueprint:
    """
    Create a Flask Blueprint for game event endpoints.

    Args:
        host: Host that receives the events.
        prefix: URL prefix for the blueprint.

    Returns:
        Configured Flask Blueprint.
    """
    bp = Blueprint('events', __name__, url_prefix=prefix)

    @bp.route('/health', methods=['GET'])
    def events_health() -> tuple:
        """
        Health check endpoint.

        Returns:
            JSON response with health status.
        """
        return jsonify({
            'status': 'healthy',
            'service': 'events'
        }), 200

    @bp.route('/status', methods=['GET'])
    def events_status() -> tuple:
        """
        Get task queue status.

        Returns:
            JSON response with queue status.
        """
        return jsonify({
            'success': True,
            'queue': host.task_queue.get_status()
        }), 200

    @bp.route('/<event_name>', methods=['POST'])
    def handle_event(event_name: str) -> tuple:
        """
        Handle a player lifecycle event.

        Expects JSON {"player": "<display name>"}.

        Returns:
            JSON response with processing status.
        """
        try:
            event = DiscordEvent.parse(event_name)
        except UnknownEventError as e:
            logger.warning(f'⚠️ 收到未知事件: {event_name}')
            return jsonify({'error': e.message}), 404

        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            logger.warning('⚠️ 事件请求缺少 JSON 数据')
            return jsonify({'error': 'No data provided'}), 400

        player = data.get('player')
        if not isinstance(player, str) or not player:
            logger.warning('⚠️ 事件请求缺少 player 字段')
            return jsonify({'error': 'Missing player'}), 400

        logger.info(f'📨 收到游戏事件: {event.external_name} ({player})')
        delivered = host.call_event(HOST_EVENTS_BY_DISCORD_EVENT[event], player)

        return jsonify({
            'success': True,
            'event': event.external_name,
            'player': player,
            'listeners': delivered
        }), 202

    return bp
