"""
Task queue module.

Provides the asynchronous task facility of the bundled plugin host: a pool of
background worker threads draining a shared queue of zero-argument callables.
"""

import logging
import queue
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

from src.core.exceptions import TaskRejectedError
from src.core.interfaces.adapters import Task

logger = logging.getLogger(__name__)


@dataclass
class QueuedTask:
    """
    Queued task data class.

    Attributes:
        name: Task name for logging.
        func: Zero-argument callable to run.
        task_id: Unique identifier for the task.
        submitted_at: UTC timestamp when the task was submitted.
    """
    name: str
    func: Task
    task_id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])
    submitted_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        """Convert task to dictionary representation."""
        return {
            'task_id': self.task_id,
            'name': self.name,
            'submitted_at_utc': self.submitted_at.isoformat(),
        }


@dataclass
class QueueStats:
    """
    Queue statistics data class.

    Tracks processing statistics for the queue.
    """
    total_processed: int = 0
    total_success: int = 0
    total_failed: int = 0

    @property
    def success_rate(self) -> float:
        """Calculate success rate as percentage."""
        if self.total_processed == 0:
            return 0.0
        return (self.total_success / self.total_processed) * 100


class TaskQueue:
    """
    Background task queue with a fixed number of worker threads.

    Tasks run concurrently and may finish in any order. A failing task is
    logged and counted; it never stops the worker that ran it.
    """

    def __init__(self, name: str = 'TaskQueue', workers: int = 2):
        """
        Initialize the task queue.

        Args:
            name: Queue name for logging and thread names.
            workers: Number of worker threads.
        """
        self._name = name
        self._worker_count = max(1, workers)
        self._queue: queue.Queue[QueuedTask] = queue.Queue()
        self._threads: List[threading.Thread] = []
        self._stop_event = threading.Event()
        self._lock = threading.Lock()
        self._accepting = False

        # Statistics
        self._stats = QueueStats()

    @property
    def name(self) -> str:
        """Return the queue name."""
        return self._name

    def start(self) -> None:
        """
        Start the worker threads.

        If the workers are already running, this is a no-op.
        """
        with self._lock:
            if self._accepting:
                logger.debug(f'[{self._name}] Workers already running')
                return

            self._stop_event.clear()
            self._threads = [
                threading.Thread(
                    target=self._run,
                    daemon=True,
                    name=f'{self._name}-{index}'
                )
                for index in range(self._worker_count)
            ]
            for thread in self._threads:
                thread.start()
            self._accepting = True

        logger.info(f'🚀 [{self._name}] Started {self._worker_count} worker(s)')

    def stop(self, timeout: float = 5.0) -> None:
        """
        Stop accepting tasks and stop the worker threads.

        Tasks still in flight have an undefined outcome: they may finish
        or be abandoned when the process exits.

        Args:
            timeout: Seconds to wait for each worker thread.
        """
        with self._lock:
            self._accepting = False
            self._stop_event.set()
            threads, self._threads = self._threads, []

        for thread in threads:
            thread.join(timeout=timeout)
            if thread.is_alive():
                logger.warning(f'⚠️ [{self._name}] {thread.name} did not stop cleanly')

        logger.info(f'🛑 [{self._name}] Stopped')

    def is_running(self) -> bool:
        """Check whether the queue accepts and runs tasks."""
        return self._accepting and not self._stop_event.is_set()

    def qsize(self) -> int:
        """Return the number of tasks waiting to run."""
        return self._queue.qsize()

    def submit(self, func: Task, name: str = 'task') -> QueuedTask:
        """
        Submit a task for background execution.

        Args:
            func: Zero-argument callable.
            name: Task name for logging.

        Returns:
            The queued task.

        Raises:
            TaskRejectedError: If the queue is not running.
        """
        if not self.is_running():
            raise TaskRejectedError(name, self._name)

        task = QueuedTask(name=name, func=func)
        self._queue.put(task)
        logger.debug(
            f'📥 [{self._name}] Task {task.name} ({task.task_id}) queued, '
            f'queue size: {self._queue.qsize()}'
        )
        return task

    def join(self) -> None:
        """Block until every submitted task has been processed."""
        self._queue.join()

    def _run(self) -> None:
        """
        Main worker loop.

        Processes tasks from the queue until stopped.
        """
        logger.debug(f'[{self._name}] Worker thread started')

        while not self._stop_event.is_set():
            try:
                task = self._queue.get(timeout=0.5)
            except queue.Empty:
                continue

            try:
                self._execute(task)
            finally:
                self._queue.task_done()

        logger.debug(f'[{self._name}] Worker thread exiting')

    def _execute(self, task: QueuedTask) -> None:
        """
        Run a single task and record the outcome.

        Args:
            task: Task to run.
        """
        logger.debug(f'🔄 [{self._name}] Running task {task.name} ({task.task_id})')
        try:
            task.func()
        except Exception as e:
            logger.exception(f'❌ [{self._name}] Task {task.name} failed: {e}')
            with self._lock:
                self._stats.total_failed += 1
        else:
            with self._lock:
                self._stats.total_success += 1
        finally:
            with self._lock:
                self._stats.total_processed += 1

    def get_status(self) -> Dict[str, Any]:
        """
        Get queue status.

        Returns:
            Dictionary with queue status information.
        """
        with self._lock:
            pending = [task.to_dict() for task in list(self._queue.queue)[:10]]
            return {
                'name': self._name,
                'queue_len': self._queue.qsize(),
                'workers': self._worker_count,
                'threads_alive': sum(1 for t in self._threads if t.is_alive()),
                'running': self._accepting and not self._stop_event.is_set(),
                'pending_tasks': pending,
                'stats': {
                    'total_processed': self._stats.total_processed,
                    'total_success': self._stats.total_success,
                    'total_failed': self._stats.total_failed,
                    'success_rate': round(self._stats.success_rate, 2)
                }
            }
