"""Wire-level definitions for the tks services."""

from .tks_pb import (
    Cluster,
    ClusterStatus,
    GetClustersRequest,
    GetClustersResponse,
    CLUSTER_INFO_SERVICE,
    GET_CLUSTERS_METHOD,
)

__all__ = [
    "Cluster",
    "ClusterStatus",
    "GetClustersRequest",
    "GetClustersResponse",
    "CLUSTER_INFO_SERVICE",
    "GET_CLUSTERS_METHOD",
]
