"""CLI subcommands and their registry."""

from .cluster_list import make_cluster_list_command
from .registry import CommandRegistry, CommandSpec

__all__ = [
    "CommandRegistry",
    "CommandSpec",
    "make_cluster_list_command",
]
