"""Shared fixtures for tks-client tests."""

import os
import time
from datetime import datetime, timezone

import pytest

from tks_client.cluster.models import Cluster, ClusterStatus

CREATED_AT = datetime(2022, 5, 2, 10, 11, 12, tzinfo=timezone.utc)
UPDATED_AT = datetime(2022, 5, 3, 8, 0, 0, tzinfo=timezone.utc)


def _make_cluster(cluster_id: str, status: int = ClusterStatus.RUNNING, **fields) -> Cluster:
    values = {
        "id": cluster_id,
        "name": f"name-{cluster_id}",
        "status": status,
        "contract_id": "P0010010a",
        "csp_id": "csp-aws",
        "status_desc": "ok",
        "created_at": CREATED_AT,
        "updated_at": UPDATED_AT,
    }
    values.update(fields)
    return Cluster(**values)


@pytest.fixture
def make_cluster():
    """Build a Cluster with sensible defaults; override any field by keyword."""
    return _make_cluster


@pytest.fixture
def local_tz():
    """Switch the process timezone; the original TZ is restored afterwards."""
    original = os.environ.get("TZ")

    def _set(name: str) -> None:
        os.environ["TZ"] = name
        time.tzset()

    _set("UTC")
    yield _set

    if original is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = original
    time.tzset()


@pytest.fixture
def three_clusters():
    """Three clusters, the middle one deleted."""
    return [
        _make_cluster("C001"),
        _make_cluster("C002", status=ClusterStatus.DELETED),
        _make_cluster("C003", status=ClusterStatus.INSTALLING),
    ]
