"""
Concurrent traversal-and-transfer pipeline.

This package moves artifacts from a source repository server to a target
server through four stages connected by bounded channels:

Modules:
    - fetcher: Downloads tree listings from the source server
    - decoder: Parses listings into tree nodes
    - planner: Descends into groups or plans artifact transfers
    - transferer: Streams artifacts from source to target
    - workers: Channels, worker pools and in-flight tracking
    - pipeline: Wires the stages together and drains the failure sink
"""

from .decoder import Decoder, decode_tree_node
from .fetcher import Fetcher
from .pipeline import MigrationPipeline
from .planner import Planner
from .transferer import SourceStream, Transferer
from .workers import Channel, InFlightTracker, Stage, WorkerPool

__all__ = [
    "Channel",
    "Decoder",
    "Fetcher",
    "InFlightTracker",
    "MigrationPipeline",
    "Planner",
    "SourceStream",
    "Stage",
    "Transferer",
    "WorkerPool",
    "decode_tree_node",
]
