"""
tks-client: command-line client for TKS (SK Telecom Kubernetes Service)

Lists the clusters of a contract through the tks-info gRPC service and prints
them as a plain text table.

Basic Usage:
    from tks_client import ClusterLister, load_config

    ClusterLister(load_config()).run(long=True)

Command line:
    tks cluster list (--long)
"""

__version__ = "0.1.0"

from .cluster import ClusterLister, Cluster, ClusterStatus, ClusterInfoClient
from .config import ClientConfig, load_config
from .exceptions import (
    TksError,
    ConfigurationError,
    ServiceConnectionError,
    RemoteCallError,
)

__all__ = [
    'ClusterLister',
    'Cluster',
    'ClusterStatus',
    'ClusterInfoClient',
    'ClientConfig',
    'load_config',
    'TksError',
    'ConfigurationError',
    'ServiceConnectionError',
    'RemoteCallError',
    '__version__',
]
