#!/usr/bin/env python3

"""
Command-line interface for the GoHighLevel community MCP server.

``ghl-community-mcp serve`` (the default) runs the server over stdio for an AI
assistant; ``ghl-community-mcp tools`` lists the tools it exposes.
"""

import argparse
import asyncio
import sys
from typing import Any, Dict, List, Optional

import structlog
from rich.console import Console
from rich.table import Table

from ..core.errors import ConfigurationError, ConfigurationMissingError
from ..core.gateway import CommunityRestGateway
from ..mcp.server_init import create_server
from ..mcp.tools import AVAILABLE_TOOLS
from ..utils.config_types import Settings
from ..utils.configuration import load_settings
from ..utils.logging_config import configure_logging

# stdout carries the MCP protocol
console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghl-community-mcp",
        description="MCP server for GoHighLevel community posts, pins and channels",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    serve_parser = subparsers.add_parser(
        "serve",
        help="Start the MCP server over stdio (default)",
        description="Start the MCP server over stdio. Requires GHL_TOKEN.",
    )
    serve_parser.add_argument("--config", type=str, help="Path to a YAML configuration file")
    verbosity = serve_parser.add_mutually_exclusive_group()
    verbosity.add_argument("--debug", action="store_true", help="Enable debug logging")
    verbosity.add_argument(
        "--quiet", "-q", action="store_true", help="Only log warnings and errors"
    )
    serve_parser.add_argument(
        "--structured-logs", action="store_true", help="Emit JSON log lines"
    )

    subparsers.add_parser("tools", help="List the available tools")
    return parser


def _overrides_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if getattr(args, "debug", False):
        overrides["log_level"] = "DEBUG"
    elif getattr(args, "quiet", False):
        overrides["log_level"] = "WARNING"
    if getattr(args, "structured_logs", False):
        overrides["structured_logging"] = True
    return overrides


async def run_server(settings: Settings) -> None:
    """Serve the tools until the client closes stdin."""
    log = structlog.get_logger("ghl_community_mcp.cli")
    async with CommunityRestGateway.from_settings(settings) as gateway:
        server = create_server(settings, gateway)
        log.info(
            "server_starting",
            tools=len(server.get_registered_tools()),
            default_location=bool(settings.ghl_location_id),
            default_group=bool(settings.ghl_group_id),
        )
        async with server.lifespan():
            await server.start()
    log.info("server_stopped")


def cmd_tools() -> int:
    table = Table(title="ghl-community-mcp tools")
    table.add_column("Tool", style="bold")
    table.add_column("Description")
    table.add_column("Required arguments")
    for name, info in AVAILABLE_TOOLS.items():
        required = info["input_schema"].get("required", [])
        table.add_row(name, info["description"], ", ".join(required) or "-")
    Console().print(table)
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    try:
        settings = load_settings(
            getattr(args, "config", None), overrides=_overrides_from_args(args)
        )
    except ConfigurationMissingError as e:
        console.print(f"[bold red]Error:[/bold red] {e.message}")
        return 2
    except ConfigurationError as e:
        console.print(f"[bold red]Configuration error:[/bold red] {e}")
        return 1

    configure_logging(settings)
    try:
        asyncio.run(run_server(settings))
    except KeyboardInterrupt:
        console.print("[yellow]Interrupted, server stopped[/yellow]")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "tools":
        return cmd_tools()
    return cmd_serve(args)


if __name__ == "__main__":
    sys.exit(main())
