"""
Asynchronous delivery pipeline

A DeliveryQueue feeds a single BackgroundWorker thread which delivers
each DispatchUnit to its handler. With the default capacity of 0 the
queue is a rendezvous point: a producer blocks until the worker has
taken its unit, so a slow handler stalls every producer sharing the
pipeline.
"""

from __future__ import annotations

import atexit
import threading
from collections import deque
from enum import Enum
from typing import Any, Deque, Optional

from slogger.core.dispatch import DispatchUnit, deliver
from slogger.core.errors import QueueClosedError
from slogger.core.log_record import LogRecord


class DeliveryQueue:
    """
    Multi-producer, single-consumer FIFO channel.

    Thread Safety:
        This class is thread-safe. All methods share one condition.
    """

    def __init__(self, capacity: int = 0):
        """
        Initialize delivery queue.

        Args:
            capacity: Number of items buffered without a receiver.
                      0 makes every put() wait for the receiver.
        """
        if capacity < 0:
            raise ValueError("capacity cannot be negative")

        self.capacity = capacity
        self._items: Deque[Any] = deque()
        self._cond = threading.Condition()
        self._closed = False
        self._sent = 0
        self._received = 0

    @property
    def closed(self) -> bool:
        return self._closed

    def put(self, item: Any) -> None:
        """
        Send an item.

        Blocks while the buffer is full. With capacity 0 it also blocks
        until the receiver has taken this item.

        Raises:
            QueueClosedError: If the queue is closed
        """
        with self._cond:
            limit = max(self.capacity, 1)
            while len(self._items) >= limit and not self._closed:
                self._cond.wait()
            if self._closed:
                raise QueueClosedError("delivery queue is closed")

            self._items.append(item)
            self._sent += 1
            ticket = self._sent
            self._cond.notify_all()

            if self.capacity == 0:
                # Items already queued stay there for the drain after close()
                while self._received < ticket and not self._closed:
                    self._cond.wait()

    def get(self) -> Any:
        """
        Receive the next item, waiting for one if necessary.

        Buffered items are still returned after close().

        Raises:
            QueueClosedError: If the queue is closed and empty
        """
        with self._cond:
            while not self._items:
                if self._closed:
                    raise QueueClosedError("delivery queue is closed")
                self._cond.wait()

            item = self._items.popleft()
            self._received += 1
            self._cond.notify_all()
            return item

    def close(self) -> None:
        """Close the queue, waking all waiting producers and the receiver."""
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)


class WorkerState(Enum):
    """Background worker states."""

    IDLE = "idle"
    PROCESSING = "processing"
    STOPPED = "stopped"


class BackgroundWorker:
    """Single thread draining a DeliveryQueue."""

    def __init__(self, delivery_queue: DeliveryQueue, name: str = "slogger-worker"):
        self._queue = delivery_queue
        self.name = name
        self._thread: Optional[threading.Thread] = None
        self._lock = threading.Lock()
        self._state = WorkerState.IDLE
        self.processed = 0

    @property
    def state(self) -> WorkerState:
        return self._state

    @property
    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the worker thread. Calling it again has no effect."""
        with self._lock:
            if self._thread is not None:
                return
            self._thread = threading.Thread(
                target=self._run,
                name=self.name,
                daemon=True
            )
            self._thread.start()

    def _run(self) -> None:
        """Process units until the queue is closed and drained."""
        while True:
            try:
                unit = self._queue.get()
            except QueueClosedError:
                break

            self._state = WorkerState.PROCESSING
            try:
                deliver(unit.handler, unit.record)
            finally:
                self.processed += 1
                self._state = WorkerState.IDLE

        self._state = WorkerState.STOPPED

    def join(self, timeout: Optional[float] = None) -> bool:
        """
        Wait for the worker thread to exit.

        Returns:
            True if the thread is no longer running
        """
        if self._thread is not None:
            self._thread.join(timeout)
        return not self.is_alive


class AsyncPipeline:
    """
    Delivery queue plus its background worker.

    Example:
        pipeline = AsyncPipeline()
        pipeline.start()
        logger = Logger(handlers, async_mode=True, pipeline=pipeline)
        ...
        pipeline.close()
    """

    def __init__(self, capacity: int = 0, name: str = "slogger-worker"):
        self.queue = DeliveryQueue(capacity)
        self.worker = BackgroundWorker(self.queue, name=name)

    @property
    def closed(self) -> bool:
        return self.queue.closed

    def start(self) -> "AsyncPipeline":
        """Start the worker. Idempotent."""
        self.worker.start()
        return self

    def submit(self, handler: Any, record: LogRecord) -> None:
        """
        Queue one record for one handler.

        Raises:
            QueueClosedError: If the pipeline has been closed
        """
        self.queue.put(DispatchUnit(handler, record))

    def close(self, timeout: Optional[float] = 5.0) -> bool:
        """
        Close the queue and wait for queued units to be delivered.

        Producers must stop submitting before the pipeline is closed;
        later submissions raise QueueClosedError.

        Returns:
            True if the worker finished within the timeout
        """
        self.queue.close()
        return self.worker.join(timeout)


_default_pipeline: Optional[AsyncPipeline] = None
_default_lock = threading.Lock()
_atexit_registered = False


def get_default_pipeline() -> AsyncPipeline:
    """
    Return the process-wide pipeline, starting it on first use.

    A closed default pipeline is replaced by a new one. Loggers created
    before shutdown_default_pipeline() keep the closed pipeline and
    deliver their records inline on the calling thread from then on;
    only loggers created afterwards use the new worker.
    """
    global _default_pipeline, _atexit_registered

    with _default_lock:
        if _default_pipeline is None or _default_pipeline.closed:
            _default_pipeline = AsyncPipeline().start()
            if not _atexit_registered:
                atexit.register(shutdown_default_pipeline)
                _atexit_registered = True
        return _default_pipeline


def shutdown_default_pipeline(timeout: Optional[float] = 5.0) -> bool:
    """
    Close the process-wide pipeline, draining queued units.

    Returns:
        True if there was nothing to stop or the worker finished in time
    """
    global _default_pipeline

    with _default_lock:
        pipeline = _default_pipeline
        _default_pipeline = None

    if pipeline is None:
        return True
    return pipeline.close(timeout)
