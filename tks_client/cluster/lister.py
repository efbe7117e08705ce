"""
Cluster listing workflow.

Validates configuration, sends a single GetClusters request, drops deleted
clusters and prints the resulting table.

Usage:
    from tks_client.cluster.lister import ClusterLister
    from tks_client.config import load_config

    ClusterLister(load_config()).run(long=True)
"""

import logging
import sys
from typing import Callable, ContextManager, List, Optional, TextIO

from google.protobuf import json_format

from ..config import ClientConfig
from ..exceptions import ConfigurationError
from ..proto import GetClustersRequest
from .client import ClusterInfoClient, ClusterInfoService
from .filters import filter_deleted
from .models import Cluster
from .table import render_clusters

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT_SECONDS = 30 * 60
NO_CLUSTER_MESSAGE = "No cluster exists for specified contract!"

# (target, connect_timeout) -> context manager yielding a ClusterInfoService
ClientFactory = Callable[[str, Optional[float]], ContextManager[ClusterInfoService]]


def request_to_json(request: GetClustersRequest) -> str:
    """Serialize a request as indented JSON using proto field names."""
    return json_format.MessageToJson(request, indent=2, preserving_proto_field_name=True)


class ClusterLister:
    """List the clusters of the configured contract."""

    def __init__(
        self,
        config: ClientConfig,
        client_factory: ClientFactory = ClusterInfoClient,
        out: Optional[TextIO] = None
    ):
        """
        Initialize cluster lister.

        Args:
            config: Resolved client configuration
            client_factory: Builds the service client for an endpoint
            out: Stream for results, defaults to stdout
        """
        self.config = config
        self.client_factory = client_factory
        self.out = out

    def _print(self, text: str) -> None:
        print(text, file=self.out or sys.stdout)

    def run(self, long: bool = False, verbose: bool = False) -> List[Cluster]:
        """
        Fetch, filter and print the contract's clusters.

        Args:
            long: Print the detailed column set
            verbose: Print the outgoing request before sending it

        Returns:
            Clusters that were rendered (deleted ones removed)

        Raises:
            ConfigurationError: If tksInfoUrl or contractId is not configured
            ServiceConnectionError: If the service cannot be reached
            RemoteCallError: If the GetClusters call fails
        """
        if not self.config.tks_info_url:
            raise ConfigurationError("You must specify tksInfoUrl at config file")
        if not self.config.contract_id:
            raise ConfigurationError("You must specify contractId at config file")

        with self.client_factory(self.config.tks_info_url, self.config.connect_timeout) as client:
            request = GetClustersRequest(contract_id=self.config.contract_id)
            if verbose:
                self._print("Proto Json data...")
                self._print(request_to_json(request))

            logger.debug(f"Requesting clusters of contract '{self.config.contract_id}' from {self.config.tks_info_url}")
            clusters = client.get_clusters(request, timeout=REQUEST_TIMEOUT_SECONDS)

        if not clusters:
            self._print(NO_CLUSTER_MESSAGE)
            return []

        visible = filter_deleted(clusters)
        logger.debug(f"Received {len(clusters)} clusters, {len(clusters) - len(visible)} deleted")
        self._print(render_clusters(visible, long=long))
        return visible
