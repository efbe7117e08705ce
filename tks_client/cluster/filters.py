"""Response filtering."""

from typing import Iterable, List

from .models import Cluster


def filter_deleted(clusters: Iterable[Cluster]) -> List[Cluster]:
    """
    Drop clusters in the DELETED state.

    Args:
        clusters: Clusters in response order

    Returns:
        New list with the remaining clusters, original relative order kept
    """
    return [cluster for cluster in clusters if not cluster.is_deleted]
