"""
Plain-text table rendering for cluster listings.

The layout is dense: a header row followed by one row per
cluster, with no borders or separator lines.

    NAME     ID          STATUS   CREATED_AT           UPDATED_AT
    dev-01   C1a2b3c4d   RUNNING  2022-05-02 10:11:12  2022-05-02 10:30:00
"""

from io import StringIO
from typing import List, Sequence, Tuple

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .formatting import format_timestamp
from .models import Cluster

SHORT_COLUMNS = ("NAME", "ID", "STATUS", "CREATED_AT", "UPDATED_AT")
LONG_COLUMNS = SHORT_COLUMNS + ("CSP_ID", "CONTRACT_ID", "STATUS_DESC")

# Wide enough that rich never wraps a row
_RENDER_WIDTH = 4096


def cluster_row(cluster: Cluster, long: bool = False) -> Tuple[str, ...]:
    """Project a cluster into its display fields."""
    row = (
        cluster.name,
        cluster.id,
        cluster.status_name,
        format_timestamp(cluster.created_at),
        format_timestamp(cluster.updated_at),
    )
    if long:
        row += (cluster.csp_id, cluster.contract_id, cluster.status_desc)
    return row


def build_rows(clusters: Sequence[Cluster], long: bool = False) -> List[Tuple[str, ...]]:
    return [cluster_row(cluster, long) for cluster in clusters]


def render_clusters(clusters: Sequence[Cluster], long: bool = False) -> str:
    """
    Render clusters as a borderless text table.

    Args:
        clusters: Clusters to show, in display order
        long: Use the detailed column set

    Returns:
        Table text without trailing newline
    """
    columns = LONG_COLUMNS if long else SHORT_COLUMNS

    table = Table(box=None, show_edge=False, pad_edge=False, show_lines=False, show_footer=False)
    for header in columns:
        table.add_column(header, no_wrap=True)
    for row in build_rows(clusters, long):
        # Text keeps values like "[prod]" from being parsed as markup
        table.add_row(*(Text(value) for value in row))

    buffer = StringIO()
    console = Console(
        file=buffer,
        width=_RENDER_WIDTH,
        color_system=None,
        force_terminal=False,
        highlight=False,
        emoji=False,
    )
    console.print(table)
    lines = buffer.getvalue().splitlines()
    return "\n".join(line.rstrip() for line in lines)
