"""Tests for deleted-cluster filtering."""

from tks_client.cluster.filters import filter_deleted
from tks_client.cluster.models import ClusterStatus


class TestFilterDeleted:

    def test_removes_deleted_and_keeps_order(self, three_clusters):
        result = filter_deleted(three_clusters)
        assert [c.id for c in result] == ["C001", "C003"]

    def test_empty_input(self):
        assert filter_deleted([]) == []

    def test_is_idempotent(self, three_clusters):
        once = filter_deleted(three_clusters)
        assert filter_deleted(once) == once

    def test_returns_new_list(self, three_clusters):
        result = filter_deleted(three_clusters)
        assert result is not three_clusters
        assert len(three_clusters) == 3

    def test_only_deleted_is_excluded(self, make_cluster):
        clusters = [make_cluster(f"C{status.value}", status=status) for status in ClusterStatus]
        result = filter_deleted(clusters)
        assert [c.status for c in result] == [s for s in ClusterStatus if s != ClusterStatus.DELETED]

    def test_unknown_status_is_kept(self, make_cluster):
        clusters = [make_cluster("C100", status=42)]
        assert filter_deleted(clusters) == clusters

    def test_all_deleted(self, make_cluster):
        clusters = [make_cluster("C1", status=ClusterStatus.DELETED), make_cluster("C2", status=ClusterStatus.DELETED)]
        assert filter_deleted(clusters) == []
