#!/usr/bin/env python3
"""
mcstatusio - Minecraft server status from the mcstatus.io API
Command-line entry point
"""

import asyncio
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, List

from . import __version__
from .core.config import ConfigManager
from .core.exceptions import McStatusError
from .core.icon import fetch_icon, icon_url
from .core.status import fetch_java_status, fetch_bedrock_status
from .ui.console import StatusConsole
from .utils.export import StatusExporter

logger = logging.getLogger(__name__)

def setup_logging(verbose: bool = False, level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Setup logging configuration"""
    handlers: List[logging.Handler] = []
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    handlers.append(logging.StreamHandler(sys.stdout) if verbose else logging.NullHandler())

    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcstatusio",
        description="Query Minecraft server status through the mcstatus.io API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mcstatusio java play.example.com
  mcstatusio java mc.example.com:25566 --no-query --json
  mcstatusio bedrock bedrock.example.com --export status.csv
  mcstatusio icon play.example.com --output icon.png
        """
    )

    parser.add_argument("--version", action="version", version=f"mcstatusio v{__version__}")
    parser.add_argument(
        "--config", "-c",
        default="mcstatusio.yaml",
        help="Configuration file path (default: mcstatusio.yaml)"
    )
    parser.add_argument(
        "--create-config",
        action="store_true",
        help="Create default configuration file and exit"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command")

    java = subparsers.add_parser("java", help="Java edition server status")
    java.add_argument("address", help="Server address, optionally host:port")
    java.add_argument("--no-query", action="store_true", help="Skip the query protocol lookup")

    bedrock = subparsers.add_parser("bedrock", help="Bedrock edition server status")
    bedrock.add_argument("address", help="Server address, optionally host:port")

    for sub in (java, bedrock):
        sub.add_argument("--timeout", "-t", type=float, help="API timeout in seconds")
        sub.add_argument("--json", action="store_true", help="Print the raw JSON document")
        sub.add_argument("--export", help="Export summary to file (JSON or CSV)")

    icon = subparsers.add_parser("icon", help="Download a server icon")
    icon.add_argument("address", help="Server address, optionally host:port")
    icon.add_argument("--timeout", "-t", type=float, help="API timeout in seconds")
    icon.add_argument("--output", "-o", help="Save the icon to this file instead of printing its URL")

    return parser

def save_icon(image, output: str) -> None:
    """Save an icon, as PNG when the file name has no extension"""
    if Path(output).suffix:
        image.save(output)
    else:
        image.save(output, format="PNG")

async def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.create_config:
        ConfigManager.create_default(args.config)
        print(f"Default configuration created: {args.config}")
        return 0

    if not args.command:
        parser.error("one of the commands java, bedrock or icon is required")

    try:
        config = ConfigManager(args.config)
    except McStatusError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(args.verbose, config.logging.level, config.logging.file)
    console = StatusConsole(config.ui)
    timeout = args.timeout if args.timeout is not None else config.client.timeout

    try:
        if args.command == "icon":
            if not args.output:
                print(icon_url(args.address, timeout, config.client))
                return 0
            image = (await fetch_icon(args.address, timeout, config=config.client)).unwrap()
            try:
                save_icon(image, args.output)
            except (OSError, ValueError) as e:
                logger.error(f"Could not save icon to {args.output}: {e}")
                console.show_error(f"Could not save icon to {args.output}: {e}")
                return 1
            print(f"Icon saved to {args.output}")
            return 0

        if args.command == "java":
            query = config.client.query and not args.no_query
            result = await fetch_java_status(args.address, query, timeout, config=config.client)
        else:
            result = await fetch_bedrock_status(args.address, timeout, config=config.client)

        status = result.unwrap()
        summary = status.summary()

        if args.json:
            print(json.dumps(status.raw, indent=2, ensure_ascii=False))
        else:
            console.show(summary)

        if args.export:
            path = StatusExporter().export([summary], args.export)
            print(f"Exported to {path}")
        return 0

    except McStatusError as e:
        logger.error(f"{args.command} lookup for {args.address} failed: {e}")
        console.show_error(str(e))
        return 1

def run() -> None:
    """Console script entry point"""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nInterrupted")
        sys.exit(130)

if __name__ == "__main__":
    run()
