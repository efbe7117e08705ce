"""
gRPC client for the tks cluster-info service.

Usage:
    from tks_client.cluster.client import ClusterInfoClient
    from tks_client.proto import GetClustersRequest

    with ClusterInfoClient("tks-info.example.com:9110") as client:
        clusters = client.get_clusters(GetClustersRequest(contract_id="P0010010a"))
"""

import logging
from typing import List, Optional, Protocol, runtime_checkable

import grpc

from ..exceptions import RemoteCallError, ServiceConnectionError
from ..proto import GET_CLUSTERS_METHOD, GetClustersRequest, GetClustersResponse
from .models import Cluster

logger = logging.getLogger(__name__)


@runtime_checkable
class ClusterInfoService(Protocol):
    """The one call the cluster lister needs from the remote service."""

    def get_clusters(self, request: GetClustersRequest, timeout: Optional[float] = None) -> List[Cluster]:
        """
        List the clusters of a contract.

        Args:
            request: GetClustersRequest carrying the contract ID
            timeout: Call deadline in seconds

        Returns:
            Clusters in the order the service returned them

        Raises:
            RemoteCallError: If the call fails or times out
        """
        ...


class ClusterInfoClient:
    """
    ClusterInfoService backed by a plaintext gRPC channel.

    The channel is opened by ``connect()`` (or entering the ``with`` block)
    and released by ``close()``.
    """

    def __init__(self, target: str, connect_timeout: Optional[float] = None):
        """
        Initialize cluster-info client.

        Args:
            target: host:port of the tks-info service
            connect_timeout: Seconds to wait for the channel to become ready;
                None connects lazily on the first call
        """
        self.target = target
        self.connect_timeout = connect_timeout
        self._channel: Optional[grpc.Channel] = None
        self._get_clusters = None

    def connect(self) -> "ClusterInfoClient":
        """
        Open the channel to the service.

        Raises:
            ServiceConnectionError: If the channel is not ready within connect_timeout
        """
        if self._channel is not None:
            return self

        channel = grpc.insecure_channel(self.target)
        if self.connect_timeout is not None:
            try:
                grpc.channel_ready_future(channel).result(timeout=self.connect_timeout)
            except grpc.FutureTimeoutError as e:
                channel.close()
                raise ServiceConnectionError(
                    self.target, f"not ready after {self.connect_timeout}s"
                ) from e

        self._channel = channel
        self._get_clusters = channel.unary_unary(
            GET_CLUSTERS_METHOD,
            request_serializer=GetClustersRequest.SerializeToString,
            response_deserializer=GetClustersResponse.FromString,
        )
        logger.debug(f"Opened channel to {self.target}")
        return self

    def close(self) -> None:
        if self._channel is not None:
            self._channel.close()
            logger.debug(f"Closed channel to {self.target}")
        self._channel = None
        self._get_clusters = None

    def __enter__(self) -> "ClusterInfoClient":
        return self.connect()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def get_clusters(self, request: GetClustersRequest, timeout: Optional[float] = None) -> List[Cluster]:
        """
        Call ClusterInfoService.GetClusters.

        The response's ``code`` and ``error`` fields are not acted on; a
        non-zero code or non-empty error is only logged at DEBUG level.

        Args:
            request: GetClustersRequest carrying the contract ID
            timeout: Call deadline in seconds

        Returns:
            Clusters in response order

        Raises:
            RemoteCallError: If the call fails or times out
        """
        if self._get_clusters is None:
            self.connect()

        try:
            response = self._get_clusters(request, timeout=timeout)
        except grpc.RpcError as e:
            raise RemoteCallError.from_rpc_error(e) from e

        if response.code or response.error:
            logger.debug(f"GetClusters returned code={response.code} error={response.error}")

        return [Cluster.from_proto(message) for message in response.clusters]
