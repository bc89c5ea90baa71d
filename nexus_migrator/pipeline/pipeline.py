"""
Migration pipeline wiring.

Four stages run as independently sized worker pools:

    fetch channel ──> Fetcher ──> decode channel ──> Decoder ──> plan channel ──> Planner
          ^                                                                         │
          └──────────────────── child groups ──────────────────────────────────────┤
                                                                                    v
                                                   Transferer <── transfer channel ─┘

Every stage error goes to one unbounded failure sink that the main thread
drains. Seeding the fetch channel with the root listing URL starts the
traversal; nothing signals its completion.
"""

import logging
import threading
from queue import Empty, Queue
from typing import List, Optional

from ..api.repository_client import SourceRepositoryClient, TargetRepositoryClient, create_clients
from ..models.config import MigratorSettings
from ..models.nexus_api import TreeNode
from ..models.transfer import TransferJob
from ..utils.constants import DECODER_STAGE, FETCHER_STAGE, PLANNER_STAGE, TRANSFERER_STAGE
from ..utils.error_handling import report_failure
from .decoder import Decoder
from .fetcher import Fetcher
from .planner import Planner
from .transferer import Transferer
from .workers import Channel, InFlightTracker, WorkerPool, deadline_after


class MigrationPipeline:
    """
    Concurrent traversal-and-transfer pipeline between two repository servers.

    Attributes:
        settings: Configuration and credentials shared by every stage
        source: Client for the source server
        target: Client for the target server
        failures: Failure sink collecting errors from every stage
    """

    def __init__(
        self,
        settings: MigratorSettings,
        source: SourceRepositoryClient,
        target: TargetRepositoryClient,
    ) -> None:
        """
        Initialize the pipeline.

        Args:
            settings: Configuration and credentials
            source: Client for the source server
            target: Client for the target server
        """
        self.settings = settings
        self.source = source
        self.target = target
        config = settings.config

        self._tracker = InFlightTracker()
        self._stop = threading.Event()
        self._started = False

        self.fetch_channel: Channel[str] = Channel(FETCHER_STAGE, config.queue_capacity, self._tracker)
        self.decode_channel: Channel[bytes] = Channel(DECODER_STAGE, config.queue_capacity, self._tracker)
        self.plan_channel: Channel[TreeNode] = Channel(PLANNER_STAGE, config.queue_capacity, self._tracker)
        self.transfer_channel: Channel[TransferJob] = Channel(TRANSFERER_STAGE, config.queue_capacity, self._tracker)
        self.failures: "Queue[BaseException]" = Queue()

        self.pools: List[WorkerPool] = [
            WorkerPool(
                FETCHER_STAGE,
                Fetcher(source, self.decode_channel),
                self.fetch_channel,
                self.failures,
                config.fetch_workers,
                self._stop,
            ),
            WorkerPool(
                DECODER_STAGE,
                Decoder(self.plan_channel),
                self.decode_channel,
                self.failures,
                config.decode_workers,
                self._stop,
            ),
            WorkerPool(
                PLANNER_STAGE,
                Planner(config, self.fetch_channel, self.transfer_channel),
                self.plan_channel,
                self.failures,
                config.plan_workers,
                self._stop,
            ),
            WorkerPool(
                TRANSFERER_STAGE,
                Transferer(source, target),
                self.transfer_channel,
                self.failures,
                config.transfer_workers,
                self._stop,
            ),
        ]

    @classmethod
    def from_settings(cls, settings: MigratorSettings) -> "MigrationPipeline":
        """
        Create a pipeline with source and target clients built from settings.

        Each client's connection pool is sized for the larger of the pools that use it.
        """
        config = settings.config
        source, target = create_clients(
            settings.auth.source_auth,
            settings.auth.target_auth,
            max_connections=max(config.fetch_workers, config.transfer_workers),
        )
        return cls(settings, source, target)

    def start(self) -> None:
        """Start every worker pool."""
        if self._started:
            return
        for pool in self.pools:
            pool.start()
        self._started = True

    def seed(self, url: Optional[str] = None) -> None:
        """
        Queue a listing URL for the fetcher.

        Args:
            url: Listing URL, defaults to the root listing URL from the configuration
        """
        root_url = url or self.settings.config.source_url
        logging.info("Starting traversal at %s", root_url)
        self.fetch_channel.put(root_url)

    def next_failure(self, timeout: Optional[float] = None) -> Optional[BaseException]:
        """
        Take the next failure from the sink.

        Args:
            timeout: Maximum seconds to wait, or None to block until one arrives

        Returns:
            The failure, or None if none arrived within the timeout
        """
        try:
            return self.failures.get(timeout=timeout)
        except Empty:
            return None

    def drain_failures(self) -> List[BaseException]:
        """Take every failure currently in the sink without blocking."""
        drained: List[BaseException] = []
        while True:
            try:
                drained.append(self.failures.get_nowait())
            except Empty:
                return drained

    def wait_until_idle(self, timeout: Optional[float] = None) -> bool:
        """
        Block until no message is queued or being processed in any stage.

        Args:
            timeout: Maximum seconds to wait, or None to wait forever

        Returns:
            True if the pipeline became idle, False on timeout
        """
        return self._tracker.wait_until_idle(timeout)

    @property
    def in_flight(self) -> int:
        """Number of messages queued or being processed."""
        return self._tracker.count

    def run_forever(self) -> None:
        """
        Run the migration.

        Starts the workers, seeds the root listing URL and then reports
        failures as they arrive. This method never returns on its own.
        """
        self.start()
        self.seed()
        while True:
            report_failure(self.failures.get())

    def stop(self, timeout: Optional[float] = None) -> None:
        """
        Ask every worker to exit and wait for them.

        Workers blocked on a full downstream channel or in an HTTP call
        cannot observe the request; they are daemon threads and end with the
        process.

        Args:
            timeout: Maximum seconds to wait for all workers together, or None to wait forever
        """
        self._stop.set()
        deadline = deadline_after(timeout)
        for pool in self.pools:
            pool.join_until(deadline)

    def close(self) -> None:
        """Stop the workers and close both clients."""
        self.stop(timeout=1.0)
        self.source.close()
        self.target.close()
        logging.debug("Repository client sessions closed")

    def __enter__(self) -> "MigrationPipeline":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = ["MigrationPipeline"]
