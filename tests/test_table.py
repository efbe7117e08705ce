"""Tests for table rendering."""

import pytest

from tks_client.cluster.filters import filter_deleted
from tks_client.cluster.models import ClusterStatus
from tks_client.cluster.table import LONG_COLUMNS, SHORT_COLUMNS, build_rows, render_clusters


def data_lines(text):
    return text.splitlines()[1:]


class TestRenderClusters:

    def test_short_header(self, local_tz, three_clusters):
        text = render_clusters(three_clusters)
        assert text.splitlines()[0].split() == list(SHORT_COLUMNS)

    def test_long_header(self, local_tz, three_clusters):
        text = render_clusters(three_clusters, long=True)
        assert text.splitlines()[0].split() == list(LONG_COLUMNS)

    def test_short_row_fields(self, local_tz, make_cluster):
        text = render_clusters([make_cluster("C001", name="alpha")])
        (row,) = data_lines(text)
        # the two timestamps contain a space each
        assert row.split() == ["alpha", "C001", "RUNNING", "2022-05-02", "10:11:12", "2022-05-03", "08:00:00"]

    def test_long_row_fields(self, local_tz, make_cluster):
        cluster = make_cluster("C001", name="alpha", csp_id="csp-1", contract_id="P001", status_desc="healthy")
        (row,) = data_lines(render_clusters([cluster], long=True))
        assert row.split()[:3] == ["alpha", "C001", "RUNNING"]
        assert row.split()[-3:] == ["csp-1", "P001", "healthy"]
        assert len(row.split()) == len(LONG_COLUMNS) + 2

    def test_timestamps_follow_local_timezone(self, local_tz, make_cluster):
        local_tz("KST-9")
        text = render_clusters([make_cluster("C001")])
        assert "2022-05-02 19:11:12" in text
        assert "2022-05-03 17:00:00" in text

    @pytest.mark.parametrize("long, columns", [(False, SHORT_COLUMNS), (True, LONG_COLUMNS)])
    def test_header_only_without_rows(self, long, columns):
        text = render_clusters([], long=long)
        assert text.splitlines() == [text.splitlines()[0]]
        assert text.split() == list(columns)

    def test_filtered_rows_in_order(self, local_tz, three_clusters):
        rows = data_lines(render_clusters(filter_deleted(three_clusters)))
        assert len(rows) == 2
        assert [row.split()[1] for row in rows] == ["C001", "C003"]
        assert "C002" not in "\n".join(rows)

    def test_preserves_input_order(self, local_tz, make_cluster):
        clusters = [make_cluster(cluster_id) for cluster_id in ("C9", "C1", "C5")]
        rows = data_lines(render_clusters(clusters))
        assert [row.split()[1] for row in rows] == ["C9", "C1", "C5"]

    def test_no_borders_or_separators(self, local_tz, three_clusters):
        text = render_clusters(three_clusters, long=True)
        for char in "│─┃━┏┓┗┛|+=":
            assert char not in text
        assert len(text.splitlines()) == 4

    def test_no_trailing_whitespace(self, local_tz, three_clusters):
        text = render_clusters(three_clusters)
        assert all(line == line.rstrip() for line in text.splitlines())
        assert not text.endswith("\n")

    def test_columns_are_aligned(self, local_tz, make_cluster):
        clusters = [make_cluster("C1", name="a"), make_cluster("C22222", name="much-longer-name")]
        lines = render_clusters(clusters).splitlines()
        offsets = {line.index("C") for line in lines[1:]}
        assert len(offsets) == 1
        assert lines[0].index("ID") == offsets.pop()

    def test_values_are_not_markup(self, local_tz, make_cluster):
        text = render_clusters([make_cluster("C1", name="[bold]prod[/bold]")])
        assert "[bold]prod[/bold]" in text

    def test_unknown_status_rendered_as_number(self, local_tz, make_cluster):
        (row,) = data_lines(render_clusters([make_cluster("C1", status=42)]))
        assert row.split()[2] == "42"


class TestBuildRows:

    def test_short_rows_have_five_fields(self, local_tz, three_clusters):
        assert all(len(row) == 5 for row in build_rows(three_clusters))

    def test_long_rows_have_eight_fields(self, local_tz, three_clusters):
        assert all(len(row) == 8 for row in build_rows(three_clusters, long=True))

    def test_status_names(self, local_tz, three_clusters):
        assert [row[2] for row in build_rows(three_clusters)] == ["RUNNING", "DELETED", "INSTALLING"]

    def test_empty_fields_kept(self, local_tz, make_cluster):
        (row,) = build_rows([make_cluster("C1", csp_id="", status_desc="")], long=True)
        assert row[5] == ""
        assert row[7] == ""
        assert ClusterStatus.RUNNING.name == row[2]
