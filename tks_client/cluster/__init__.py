"""Cluster listing: models, service client, filtering and rendering."""

from .client import ClusterInfoClient, ClusterInfoService
from .filters import filter_deleted
from .formatting import format_timestamp
from .lister import ClusterLister, NO_CLUSTER_MESSAGE
from .models import Cluster, ClusterStatus
from .table import render_clusters, LONG_COLUMNS, SHORT_COLUMNS

__all__ = [
    "Cluster",
    "ClusterStatus",
    "ClusterInfoClient",
    "ClusterInfoService",
    "ClusterLister",
    "NO_CLUSTER_MESSAGE",
    "filter_deleted",
    "format_timestamp",
    "render_clusters",
    "LONG_COLUMNS",
    "SHORT_COLUMNS",
]
