"""
Planner stage: classifies tree nodes and plans the next pipeline work.

A node whose first-child chain reaches a leaf is artifact-bearing and turns
into one transfer job per artifact and companion descriptor. Any other node
turns into one new listing request per child group, which goes back to the
fetcher. There is no depth or breadth limit on this fan-out.
"""

import logging

from ..models.config import EndpointConfig
from ..models.nexus_api import TreeNode
from ..models.transfer import TransferJob
from ..utils.tree import build_transfer_job, get_artifacts, get_groups, has_artifacts
from ..utils.url import listing_url
from .workers import Channel, Stage


class Planner(Stage[TreeNode]):
    """Turns tree nodes into listing requests or transfer jobs."""

    def __init__(
        self,
        config: EndpointConfig,
        fetch_output: Channel[str],
        transfer_output: Channel[TransferJob],
    ) -> None:
        """
        Initialize the planner.

        Args:
            config: Endpoint configuration holding the base URLs
            fetch_output: Fetcher input channel, for groups to descend into
            transfer_output: Transferer input channel, for artifacts to move
        """
        self.config = config
        self.fetch_output = fetch_output
        self.transfer_output = transfer_output

    def process(self, item: TreeNode) -> None:
        if has_artifacts(item):
            artifacts = get_artifacts(item)
            logging.debug("Planning %d transfer(s) under %s", len(artifacts), item.path)
            for artifact in artifacts:
                self.transfer_output.put(build_transfer_job(artifact, self.config))
        else:
            groups = get_groups(item)
            logging.debug("Descending into %d group(s) under %s", len(groups), item.path)
            for group in groups:
                self.fetch_output.put(listing_url(self.config, group))


__all__ = ["Planner"]
