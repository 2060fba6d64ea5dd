"""Background work with latest-request-wins result delivery."""

import logging
import threading
from typing import Any, Callable, Optional, Tuple

from PyQt6.QtCore import QThread, pyqtSignal

logger = logging.getLogger(__name__)

# --- Module-level constants ---
CLEANUP_WAIT_MS = 200     # Wait time during shutdown cleanup


class GenerationCounter:
    """
    Monotonic request counter.

    Each request takes a new number; a result is only worth delivering while
    its number is still the latest one issued.

    Usage:
        generation = counter.next()
        result = await compute()
        if counter.is_current(generation):
            apply(result)
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._latest = 0

    @property
    def latest(self) -> int:
        return self._latest

    def next(self) -> int:
        with self._lock:
            self._latest += 1
            return self._latest

    def is_current(self, generation: int) -> bool:
        return generation == self._latest


class BackgroundTask(QThread):
    """
    Run a callable on a worker thread and report back through signals.

    Signals carry the task's generation number so receivers can drop
    results that were superseded while the task was running.

    Usage:
        task = BackgroundTask(generation, target=build_scheme, args=(seed, 0.0))
        task.result_ready.connect(on_success)    # (generation, result)
        task.error_occurred.connect(on_error)    # (generation, Exception)
        task.start()
    """

    result_ready = pyqtSignal(int, object)
    error_occurred = pyqtSignal(int, Exception)  # Full exception, caller decides

    def __init__(
        self,
        generation: int,
        target: Callable[..., Any],
        args: Tuple = (),
        kwargs: dict = None,
        parent=None
    ):
        super().__init__(parent)
        self.generation = generation
        self._target = target
        self._args = args
        self._kwargs = kwargs or {}

    def run(self):
        """Execute target in background."""
        try:
            result = self._target(*self._args, **self._kwargs)
        except Exception as e:
            self.error_occurred.emit(self.generation, e)
            return
        self.result_ready.emit(self.generation, result)


class BackgroundTaskManager:
    """
    Starts background tasks and forwards only the latest one's outcome.

    Earlier tasks are not cancelled; they run to completion and their
    results are discarded. Pass a shared counter to let other request
    paths supersede these tasks too.
    """

    def __init__(self, counter: Optional[GenerationCounter] = None):
        self.counter = counter or GenerationCounter()
        self._tasks = set()

    def run(
        self,
        target: Callable[..., Any],
        args: Tuple = (),
        kwargs: dict = None,
        on_success: Callable[[Any], None] = None,
        on_error: Callable[[Exception], None] = None,
    ) -> BackgroundTask:
        """
        Run ``target`` on a worker thread.

        Args:
            target: Function to execute in background
            args: Positional arguments for target
            kwargs: Keyword arguments for target
            on_success: Called with the result if this is still the latest task
            on_error: Called with the exception if this is still the latest task

        Returns:
            The started BackgroundTask
        """
        task = BackgroundTask(self.counter.next(), target=target, args=args, kwargs=kwargs)

        def deliver_result(generation, result):
            if not self.counter.is_current(generation):
                logger.debug(f"Discarding stale result of task {generation}")
                return
            if on_success:
                on_success(result)

        def deliver_error(generation, error):
            if not self.counter.is_current(generation):
                logger.debug(f"Discarding stale error of task {generation}: {error}")
                return
            if on_error:
                on_error(error)

        task.result_ready.connect(deliver_result)
        task.error_occurred.connect(deliver_error)
        task.finished.connect(lambda: self._tasks.discard(task))

        # Keep a reference until the thread finishes
        self._tasks.add(task)
        task.start()
        return task

    def cleanup(self, wait_ms: int = CLEANUP_WAIT_MS):
        """Wait for running tasks. Call from closeEvent."""
        for task in list(self._tasks):
            if task.isRunning():
                task.wait(wait_ms)
        self._tasks.clear()
