"""Configuration and credential models for nexus-migrator."""

from typing import Any

from pydantic import ConfigDict, Field, model_validator

from ..utils.constants import DEFAULT_QUEUE_CAPACITY
from .base import MigratorBaseModel

# Per-stage pool sizes that fall back to the shared worker count
_STAGE_WORKER_FIELDS = (
    ("fetch_workers", "FetchWorkers"),
    ("decode_workers", "DecodeWorkers"),
    ("plan_workers", "PlanWorkers"),
    ("transfer_workers", "TransferWorkers"),
)


class EndpointConfig(MigratorBaseModel):
    """
    Endpoint configuration loaded from the configuration file.

    Attributes:
        source_url: Base URL for tree listing requests on the source server
        target_url: Base URL artifacts are uploaded to on the target server
        source_download_url: Base URL artifacts are downloaded from on the source server
        workers: Default number of workers in every stage pool
        fetch_workers: Fetcher pool size (defaults to ``workers``)
        decode_workers: Decoder pool size (defaults to ``workers``)
        plan_workers: Planner pool size (defaults to ``workers``)
        transfer_workers: Transferer pool size (defaults to ``workers``)
        queue_capacity: Capacity of each bounded stage channel
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    source_url: str = Field(alias="SourceURL")
    target_url: str = Field(alias="TargetURL")
    source_download_url: str = Field(alias="SourceDownloadURL")
    workers: int = Field(alias="Workers", ge=1)
    fetch_workers: int = Field(alias="FetchWorkers", ge=1)
    decode_workers: int = Field(alias="DecodeWorkers", ge=1)
    plan_workers: int = Field(alias="PlanWorkers", ge=1)
    transfer_workers: int = Field(alias="TransferWorkers", ge=1)
    queue_capacity: int = Field(default=DEFAULT_QUEUE_CAPACITY, alias="QueueCapacity", ge=1)

    @model_validator(mode="before")
    @classmethod
    def default_stage_workers(cls, data: Any) -> Any:
        """Fill unset per-stage pool sizes from the shared worker count."""
        if not isinstance(data, dict):
            return data

        workers = data.get("Workers", data.get("workers"))
        if workers is None:
            return data

        data = dict(data)
        for name, alias in _STAGE_WORKER_FIELDS:
            if name not in data and alias not in data:
                data[alias] = workers
        return data


class Credentials(MigratorBaseModel):
    """
    Basic authentication credentials for both servers.

    Attributes:
        source_user: Username on the source server
        source_password: Password on the source server
        target_user: Username on the target server
        target_password: Password on the target server
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    source_user: str = Field(alias="SourceUser")
    source_password: str = Field(alias="SourcePassword", repr=False)
    target_user: str = Field(alias="TargetUser")
    target_password: str = Field(alias="TargetPassword", repr=False)

    @property
    def source_auth(self) -> tuple[str, str]:
        """Source credentials as a (user, password) pair."""
        return (self.source_user, self.source_password)

    @property
    def target_auth(self) -> tuple[str, str]:
        """Target credentials as a (user, password) pair."""
        return (self.target_user, self.target_password)


class MigratorSettings(MigratorBaseModel):
    """Endpoint configuration and credentials, loaded once at startup."""

    config: EndpointConfig
    auth: Credentials


__all__ = ["EndpointConfig", "Credentials", "MigratorSettings"]
