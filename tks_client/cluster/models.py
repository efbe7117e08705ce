"""Domain models for cluster listings."""

from datetime import datetime, timezone
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class ClusterStatus(IntEnum):
    """Cluster lifecycle states reported by tks-info."""

    UNSPECIFIED = 0
    INSTALLING = 1
    RUNNING = 2
    DELETING = 3
    DELETED = 4
    ERROR = 5


_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Cluster(BaseModel):
    """A cluster as returned by the cluster-info service (read-only)."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Cluster ID")
    name: str = Field(default="", description="Display name")
    status: int = Field(default=ClusterStatus.UNSPECIFIED, description="ClusterStatus number")
    contract_id: str = Field(default="", description="Owning contract ID")
    csp_id: str = Field(default="", description="Cloud service provider ID")
    status_desc: str = Field(default="", description="Status description")
    created_at: datetime = Field(default=_EPOCH, description="Creation time (UTC)")
    updated_at: datetime = Field(default=_EPOCH, description="Last update time (UTC)")

    @property
    def is_deleted(self) -> bool:
        return self.status == ClusterStatus.DELETED

    @property
    def status_name(self) -> str:
        """Status as its enum name, or the raw number for values this client does not know."""
        try:
            return ClusterStatus(self.status).name
        except ValueError:
            return str(self.status)

    @classmethod
    def from_proto(cls, message) -> "Cluster":
        """
        Build a Cluster from a ``tks.Cluster`` wire message.

        Args:
            message: tks_pb.Cluster message

        Returns:
            Cluster model with timestamps converted to aware UTC datetimes
        """
        return cls(
            id=message.id,
            name=message.name,
            status=message.status,
            contract_id=message.contract_id,
            csp_id=message.csp_id,
            status_desc=message.status_desc,
            created_at=message.created_at.ToDatetime(tzinfo=timezone.utc),
            updated_at=message.updated_at.ToDatetime(tzinfo=timezone.utc),
        )
