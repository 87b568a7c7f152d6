"""
Plugin host module.

Contains the bundled in-process plugin runtime.
"""

from src.interface.host.local_host import LocalPluginHost

__all__ = [
    'LocalPluginHost',
]
