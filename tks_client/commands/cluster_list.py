"""``tks cluster list``: show the clusters of the configured contract."""

import argparse

from ..cluster.client import ClusterInfoClient
from ..cluster.lister import ClientFactory, ClusterLister
from ..config import load_config
from .registry import CommandSpec

DESCRIPTION = """Show list of clusters.

Example:
  tks cluster list (--long)"""


def configure(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--long', '-l',
        action='store_true',
        help='Print detail information'
    )


def make_cluster_list_command(client_factory: ClientFactory = ClusterInfoClient) -> CommandSpec:
    """
    Build the ``cluster list`` descriptor.

    Args:
        client_factory: Builds the service client, replaceable in tests

    Returns:
        CommandSpec ready to register
    """
    def run(args: argparse.Namespace) -> int:
        config = load_config(args.config)
        ClusterLister(config, client_factory=client_factory).run(long=args.long, verbose=args.verbose)
        return 0

    return CommandSpec(
        group="cluster",
        name="list",
        help="Show list of clusters.",
        description=DESCRIPTION,
        configure=configure,
        handler=run,
    )
