"""
Webhook interface module.

Contains the HTTP endpoint that receives game events.
"""

from src.interface.webhook.handler import create_events_blueprint

__all__ = [
    'create_events_blueprint',
]
