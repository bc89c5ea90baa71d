"""Transfer job models."""

from .base import MigratorBaseModel


class TransferJob(MigratorBaseModel):
    """
    One artifact to move from the source server to the target server.

    Attributes:
        source_url: Download URL on the source server
        target_url: Upload URL on the target server
        content_type: Content-Type sent with the upload
    """

    source_url: str
    target_url: str
    content_type: str


__all__ = ["TransferJob"]
