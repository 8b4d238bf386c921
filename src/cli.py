"""
YouTube Data MCP CLI - Invoke any tool from the command line.

Usage:
    youtube-data-mcp-cli                                   # List available tools
    youtube-data-mcp-cli list --verbose                    # Tools with descriptions
    youtube-data-mcp-cli call youtube_get_video --args '{"videoId": "dQw4w9WgXcQ"}'
    youtube-data-mcp-cli call youtube_search --args '{"query": "python"}' --format markdown
    youtube-data-mcp-cli test-connection                   # Check credentials

Credentials and limits are read from the same environment variables as the
server (YOUTUBE_ACCESS_TOKEN, YOUTUBE_API_KEY, YOUTUBE_MCP_*).
"""

import argparse
import asyncio
import json
import sys
from typing import Optional

from server import YouTubeMCPServer, configure_logging, server_from_env
from tool_catalog import TOOLS


class CLI:
    """Command-line front end over the MCP tool dispatch."""

    def __init__(self, server: YouTubeMCPServer):
        self.server = server

    def list_tools(self, verbose: bool = False):
        """Display available tools."""
        print("=" * 60)
        print(f"Available Tools ({len(TOOLS)})")
        print("=" * 60)
        print()

        for tool in TOOLS:
            print(f"  {tool.name}")
            if verbose:
                print(f"    {tool.description}")
                required = tool.inputSchema.get("required") or []
                if required:
                    print(f"    Required: {', '.join(required)}")
                print()

        if not verbose:
            print()
        print("-" * 60)
        print("Usage:")
        print("  youtube-data-mcp-cli call <tool> --args '<json>'")
        print()

    def call(self, name: str, arguments: dict, fmt: Optional[str] = None) -> bool:
        """Invoke one tool and print its text. Returns False on error."""
        if fmt:
            arguments = {**arguments, "format": fmt}

        result = asyncio.run(self.server.handle_call(name, arguments))
        stream = sys.stderr if result.isError else sys.stdout
        for content in result.content:
            print(content.text, file=stream)
        return not result.isError


def _parse_args_json(raw: str) -> dict:
    try:
        arguments = json.loads(raw)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"--args is not valid JSON: {e}")
    if not isinstance(arguments, dict):
        raise argparse.ArgumentTypeError("--args must be a JSON object")
    return arguments


def main(argv: Optional[list[str]] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="YouTube Data API MCP tools CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  youtube-data-mcp-cli list
  youtube-data-mcp-cli call youtube_get_video --args '{"videoId": "dQw4w9WgXcQ"}'
  youtube-data-mcp-cli call youtube_list_my_playlists --format markdown
  youtube-data-mcp-cli test-connection
        """,
    )
    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser("list", help="List available tools")
    list_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show descriptions and required arguments",
    )

    call_parser = subparsers.add_parser("call", help="Invoke a tool")
    call_parser.add_argument("tool", help="Tool name (e.g., youtube_get_video)")
    call_parser.add_argument(
        "--args",
        "-a",
        dest="arguments",
        type=_parse_args_json,
        default={},
        help="Tool arguments as a JSON object",
    )
    call_parser.add_argument(
        "--format",
        "-f",
        choices=["json", "markdown"],
        help="Response format (overrides any format in --args)",
    )

    subparsers.add_parser("test-connection", help="Check the configured credentials")

    args = parser.parse_args(argv)

    configure_logging()
    cli = CLI(server_from_env())

    if args.command == "call":
        ok = cli.call(args.tool, args.arguments, args.format)
        sys.exit(0 if ok else 1)
    elif args.command == "test-connection":
        ok = cli.call("youtube_test_connection", {})
        sys.exit(0 if ok else 1)
    else:
        cli.list_tools(verbose=getattr(args, "verbose", False))


if __name__ == "__main__":
    main()
