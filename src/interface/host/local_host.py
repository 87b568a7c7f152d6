"""
Local plugin host module.

A minimal in-process plugin runtime: an event registry for player lifecycle
callbacks plus a background task queue for asynchronous work.
"""

import logging
import threading
from collections import defaultdict
from typing import Any, Dict, List

from src.core.interfaces.adapters import IPluginHost, PlayerCallback, Task
from src.services.queue.task_queue import TaskQueue

logger = logging.getLogger(__name__)


class LocalPluginHost(IPluginHost):
    """
    In-process plugin host.

    Callbacks run synchronously on the thread that calls call_event().
    A failing callback is logged and never stops the others or reaches the
    caller. Asynchronous tasks go to the TaskQueue.
    """

    def __init__(self, task_queue: TaskQueue):
        """
        Initialize the host.

        Args:
            task_queue: Queue backing run_task_async().
        """
        self._task_queue = task_queue
        self._listeners: Dict[str, List[PlayerCallback]] = defaultdict(list)
        self._plugins: List[Any] = []
        self._lock = threading.Lock()

    @property
    def task_queue(self) -> TaskQueue:
        """The queue backing run_task_async()."""
        return self._task_queue

    def start(self) -> None:
        """Start the background task queue."""
        self._task_queue.start()

    def stop(self) -> None:
        """Disable every plugin, then stop the task queue."""
        for plugin in list(reversed(self._plugins)):
            self.disable_plugin(plugin)
        self._task_queue.stop()

    # ========== IPluginHost 实现 ==========

    def register_event(self, event_name: str, callback: PlayerCallback) -> None:
        with self._lock:
            self._listeners[event_name].append(callback)
        logger.debug(f'Registered event {event_name!r} -> {callback!r}')

    def run_task_async(self, task: Task, name: str = 'task') -> None:
        self._task_queue.submit(task, name=name)

    # ========== Plugin lifecycle ==========

    def enable_plugin(self, plugin: Any) -> None:
        """
        Enable a plugin.

        Args:
            plugin: Object with on_enable(host) and on_disable().
        """
        if plugin in self._plugins:
            logger.debug(f'Plugin {getattr(plugin, "name", plugin)} already loaded')
            return
        plugin.on_enable(self)
        self._plugins.append(plugin)
        logger.info(f'🔌 Plugin {getattr(plugin, "name", plugin)} loaded')

    def disable_plugin(self, plugin: Any) -> None:
        """
        Disable a plugin and drop the callbacks it registered.

        Args:
            plugin: A previously enabled plugin.
        """
        if plugin not in self._plugins:
            return
        self._plugins.remove(plugin)

        with self._lock:
            for event_name, callbacks in self._listeners.items():
                self._listeners[event_name] = [
                    cb for cb in callbacks
                    if getattr(cb, '__self__', None) is not plugin
                ]

        try:
            plugin.on_disable()
        except Exception as e:
            logger.error(f'❌ Plugin {getattr(plugin, "name", plugin)} failed to disable: {e}')

    # ========== Event dispatch ==========

    def call_event(self, event_name: str, display_name: str) -> int:
        """
        Deliver a host event to every registered callback.

        Args:
            event_name: One of the HostEvent names.
            display_name: Player display name.

        Returns:
            Number of callbacks invoked.
        """
        with self._lock:
            callbacks = list(self._listeners.get(event_name, ()))

        for callback in callbacks:
            try:
                callback(display_name)
            except Exception as e:
                logger.exception(f'❌ Callback for {event_name} failed: {e}')

        return len(callbacks)

    def listener_count(self, event_name: str) -> int:
        """Return the number of callbacks registered for an event."""
        with self._lock:
            return len(self._listeners.get(event_name, ()))
