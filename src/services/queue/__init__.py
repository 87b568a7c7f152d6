"""
Queue services module.

Background task execution for the bundled plugin host.
"""

from src.services.queue.task_queue import QueuedTask, QueueStats, TaskQueue

__all__ = [
    'QueuedTask',
    'QueueStats',
    'TaskQueue',
]
