"""
Worker pool and channel plumbing for the migration pipeline.

Stages are connected by bounded channels. A producer blocks while the next
channel is full, which gives the pipeline its backpressure. All channels of
one pipeline share an in-flight counter: a message counts from the moment it
is put on a channel until the worker that took it has finished processing,
including any messages it produced downstream. The pipeline is idle exactly
when that counter is zero.
"""

import logging
import threading
import time
import traceback
from queue import Empty, Queue
from typing import Generic, List, Optional, TypeVar

from ..exceptions import MigratorError
from ..utils.constants import WORKER_POLL_INTERVAL

T = TypeVar("T")


def deadline_after(timeout: Optional[float]) -> Optional[float]:
    """Monotonic deadline ``timeout`` seconds from now, or None for no deadline."""
    return None if timeout is None else time.monotonic() + timeout


class InFlightTracker:
    """Counts messages that are queued or being processed anywhere in the pipeline."""

    def __init__(self) -> None:
        self._count = 0
        self._condition = threading.Condition()

    @property
    def count(self) -> int:
        """Number of messages currently in flight."""
        with self._condition:
            return self._count

    def add(self) -> None:
        """Record one new message."""
        with self._condition:
            self._count += 1

    def done(self) -> None:
        """Record that one message was fully processed."""
        with self._condition:
            self._count -= 1
            if self._count == 0:
                self._condition.notify_all()

    def wait_until_idle(self, timeout: Optional[float] = None) -> bool:
        """
        Block until no message is in flight.

        Args:
            timeout: Maximum seconds to wait, or None to wait forever

        Returns:
            True if the pipeline became idle, False on timeout
        """
        with self._condition:
            return self._condition.wait_for(lambda: self._count == 0, timeout)


class Channel(Generic[T]):
    """Bounded FIFO channel between two pipeline stages."""

    def __init__(self, name: str, capacity: int, tracker: InFlightTracker) -> None:
        """
        Initialize the channel.

        Args:
            name: Channel name used in log messages
            capacity: Maximum number of queued messages before producers block
            tracker: In-flight counter shared by every channel of the pipeline
        """
        self.name = name
        self.capacity = capacity
        self._queue: Queue[T] = Queue(maxsize=capacity)
        self._tracker = tracker

    def put(self, item: T) -> None:
        """Enqueue a message, blocking while the channel is full."""
        self._tracker.add()
        self._queue.put(item)

    def get(self, timeout: Optional[float] = None) -> T:
        """
        Take the next message.

        Raises:
            queue.Empty: If no message arrived within the timeout
        """
        return self._queue.get(timeout=timeout)

    def task_done(self) -> None:
        """Mark a message taken with get() as fully processed."""
        self._queue.task_done()
        self._tracker.done()

    def qsize(self) -> int:
        """Approximate number of queued messages."""
        return self._queue.qsize()


class Stage(Generic[T]):
    """One pipeline stage; subclasses implement process()."""

    def process(self, item: T) -> None:
        """Handle one message, putting any results on downstream channels."""
        raise NotImplementedError


class WorkerPool(Generic[T]):
    """
    A fixed-size pool of daemon threads running one stage.

    Every worker takes messages from the stage's input channel and calls
    the stage on them. Errors never end a worker: they are put on the
    failure sink and the message is dropped.
    """

    def __init__(
        self,
        name: str,
        stage: Stage[T],
        channel: Channel[T],
        failures: "Queue[BaseException]",
        size: int,
        stop_event: Optional[threading.Event] = None,
    ) -> None:
        """
        Initialize the pool.

        Args:
            name: Stage name, used as the worker thread name prefix
            stage: Stage the workers run
            channel: Input channel of the stage
            failures: Failure sink shared by every stage
            size: Number of worker threads
            stop_event: Event that ends the workers once set
        """
        self.name = name
        self.stage = stage
        self.channel = channel
        self.failures = failures
        self.size = size
        self._stop = stop_event or threading.Event()
        self._threads: List[threading.Thread] = []

    def start(self) -> None:
        """Start the worker threads."""
        logging.debug("Starting %d %s worker(s)", self.size, self.name)
        for i in range(self.size):
            thread = threading.Thread(target=self._worker_loop, daemon=True, name=f"{self.name}-{i}")
            thread.start()
            self._threads.append(thread)

    def join(self, timeout: Optional[float] = None) -> None:
        """Wait for stopped workers to exit, at most ``timeout`` seconds in total."""
        self.join_until(deadline_after(timeout))

    def join_until(self, deadline: Optional[float]) -> None:
        """
        Wait for stopped workers to exit.

        Args:
            deadline: ``time.monotonic()`` value after which to stop waiting, or None to wait forever
        """
        for thread in self._threads:
            thread.join(None if deadline is None else max(0.0, deadline - time.monotonic()))

    @property
    def alive_count(self) -> int:
        """Number of worker threads still running."""
        return sum(1 for thread in self._threads if thread.is_alive())

    def _worker_loop(self) -> None:
        while not self._stop.is_set():
            try:
                item = self.channel.get(timeout=WORKER_POLL_INTERVAL)
            except Empty:
                continue

            try:
                self.stage.process(item)
            except MigratorError as e:
                self.failures.put(e)
            except Exception as e:  # pylint: disable=broad-exception-caught
                logging.debug("Traceback: %s", traceback.format_exc())
                self.failures.put(e)
            finally:
                self.channel.task_done()


__all__ = ["InFlightTracker", "Channel", "Stage", "WorkerPool", "deadline_after"]
