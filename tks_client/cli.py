#!/usr/bin/env python3
"""
tks command-line client.

Usage:
    # List clusters of the contract set in ~/.tks-client.yaml
    tks cluster list

    # Detailed columns, custom config, print the outgoing request
    tks --config ./tks.yaml --verbose cluster list --long
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .commands import CommandRegistry, make_cluster_list_command
from .exceptions import ConfigurationError, RemoteCallError, ServiceConnectionError

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


def build_registry() -> CommandRegistry:
    """Register every subcommand the CLI exposes."""
    registry = CommandRegistry()
    registry.register(make_cluster_list_command(), group_help="Operations for cluster")
    return registry


def build_parser(registry: CommandRegistry) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='tks',
        description='Command line client for TKS services',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List clusters of the configured contract
  tks cluster list

  # Show detailed columns
  tks cluster list --long

  # Use another config file and print the request being sent
  tks --config ./tks.yaml --verbose cluster list
        """
    )

    parser.add_argument(
        '--config',
        type=str,
        help='Path to YAML configuration file (default: ~/.tks-client.yaml)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    registry.attach(parser)
    return parser


def main(argv: Optional[List[str]] = None, registry: Optional[CommandRegistry] = None) -> int:
    """Main entry point."""
    registry = registry or build_registry()
    parser = build_parser(registry)
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        return args.handler(args)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ServiceConnectionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except RemoteCallError as e:
        print(e, file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
