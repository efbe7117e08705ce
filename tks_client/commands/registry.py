"""
Command registry for the tks CLI.

Subcommands are described by ``CommandSpec`` descriptors and registered
explicitly by the CLI assembler; nothing registers itself on import.

Usage:
    from tks_client.commands.registry import CommandRegistry, CommandSpec

    registry = CommandRegistry()
    registry.register(CommandSpec(group="cluster", name="list", help="...", handler=run))
    registry.attach(parser)
"""

import argparse
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandSpec:
    """
    Descriptor of one ``tks <group> <name>`` subcommand.

    Attributes:
        group: Command group (e.g., "cluster")
        name: Subcommand name within the group (e.g., "list")
        help: One-line help shown in the group listing
        handler: Called with the parsed arguments, returns the exit status
        configure: Adds the subcommand's own flags to its parser
        description: Longer help shown by ``--help``
    """
    group: str
    name: str
    help: str
    handler: Callable[[argparse.Namespace], int]
    configure: Optional[Callable[[argparse.ArgumentParser], None]] = None
    description: Optional[str] = None

    @property
    def key(self) -> Tuple[str, str]:
        return (self.group, self.name)


class CommandRegistry:
    """Holds the subcommands known to the CLI."""

    def __init__(self):
        self._commands: Dict[Tuple[str, str], CommandSpec] = {}
        self._group_help: Dict[str, str] = {}

    def register(self, spec: CommandSpec, group_help: Optional[str] = None) -> None:
        """
        Register a subcommand.

        Args:
            spec: Command descriptor
            group_help: Help text for the command group, if not set yet

        Raises:
            ValueError: If the same group/name is already registered
        """
        if spec.key in self._commands:
            raise ValueError(f"Command '{spec.group} {spec.name}' is already registered")

        self._commands[spec.key] = spec
        if group_help and spec.group not in self._group_help:
            self._group_help[spec.group] = group_help
        logger.debug(f"Registered command: {spec.group} {spec.name}")

    def get(self, group: str, name: str) -> CommandSpec:
        """
        Look up a registered subcommand.

        Raises:
            KeyError: If the command is not registered
        """
        try:
            return self._commands[(group, name)]
        except KeyError:
            available = ", ".join(" ".join(key) for key in self._commands)
            raise KeyError(f"Command '{group} {name}' is not registered. Available commands: {available}") from None

    def list_commands(self) -> List[str]:
        return [f"{group} {name}" for group, name in self._commands]

    def groups(self) -> List[str]:
        seen: List[str] = []
        for group, _ in self._commands:
            if group not in seen:
                seen.append(group)
        return seen

    def attach(self, parser: argparse.ArgumentParser) -> None:
        """
        Add every registered command to an argparse parser.

        Each leaf parser gets ``handler`` set as a default, so the caller can
        dispatch with ``args.handler(args)``.
        """
        group_parsers = parser.add_subparsers(dest="group", metavar="<command>")
        group_parsers.required = True

        for group in self.groups():
            group_help = self._group_help.get(group, f"Operations for {group}")
            group_parser = group_parsers.add_parser(group, help=group_help, description=group_help)
            subparsers = group_parser.add_subparsers(dest="command", metavar="<subcommand>")
            subparsers.required = True

            for (spec_group, _), spec in self._commands.items():
                if spec_group != group:
                    continue
                sub = subparsers.add_parser(
                    spec.name,
                    help=spec.help,
                    description=spec.description or spec.help,
                    formatter_class=argparse.RawDescriptionHelpFormatter,
                )
                if spec.configure:
                    spec.configure(sub)
                sub.set_defaults(handler=spec.handler)

    def __repr__(self) -> str:
        return f"CommandRegistry(commands=[{', '.join(self.list_commands())}])"
