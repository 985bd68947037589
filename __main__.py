"""CLI entry point for compdoc.

This module acts as the central entry point for the project's CLI tools.
It delegates commands to the appropriate submodules or runs specific tasks.
"""

import argparse
import json
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from compdoc.config import (
    get_environment,
    get_environment_info,
    list_environment_variables,
)
from compdoc.core.log import get_logger, setup_logging

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")


def _load_host(path: Path, with_clipboard: bool = False):
    """Load a snapshot host, logging why it failed.

    Returns:
        SnapshotHost, or None when the file is unreadable or malformed.
    """
    from compdoc.host import MemoryClipboard, SnapshotHost

    clipboard = MemoryClipboard() if with_clipboard else None
    try:
        return SnapshotHost.from_file(path, clipboard=clipboard)
    except OSError as e:
        logger.error(f"Cannot read snapshot {path}: {e}")
    except json.JSONDecodeError as e:
        logger.error(f"Snapshot {path} is not valid JSON: {e}")
    except ValidationError as e:
        logger.error(f"Snapshot {path} is malformed:\n{e}")
    return None


def _emit(text: str, output: Path | None) -> None:
    if output:
        output.write_text(text, encoding="utf-8")
        logger.info(f"Saved to {output}")
    else:
        print(text)


# =============================================================================
# Extract Command
# =============================================================================


def cmd_extract(args: argparse.Namespace) -> int:
    """Handle the extract command."""
    from compdoc.dispatch import Dispatcher, PanelConfig
    from compdoc.output import format_metadata_tree

    host = _load_host(args.snapshot)
    if host is None:
        return 1

    result = Dispatcher(host, PanelConfig()).dispatch_metadata()
    if not result.ok:
        logger.error(result.error)
        return 1

    logger.info(f"Extracted metadata for '{result.data.name}'")
    if args.format == "tree":
        text = format_metadata_tree(result.data)
    else:
        text = json.dumps(result.data.to_dict(), indent=2, ensure_ascii=False)

    _emit(text, args.output)
    return 0


# =============================================================================
# Message Command
# =============================================================================


def _default_guide(host) -> str:
    """Text tree of the current selection, or "" when extraction fails."""
    from compdoc.metadata import extract_metadata
    from compdoc.output import format_metadata_tree
    from compdoc.tokens import TokenResolver

    result = extract_metadata(host, TokenResolver(host))
    return format_metadata_tree(result.data) if result.ok else ""


def cmd_message(args: argparse.Namespace) -> int:
    """Handle the message command.

    Delivers one panel message against a snapshot and prints every outbound
    message as JSON.
    """
    from compdoc.dispatch import Dispatcher, MessageType, PanelConfig

    host = _load_host(args.snapshot, with_clipboard=args.clipboard)
    if host is None:
        return 1

    message = {"type": args.type}
    if args.payload is not None:
        message["payload"] = args.payload
    elif args.type == MessageType.COPY_GUIDE.value:
        message["payload"] = _default_guide(host)

    Dispatcher(host, PanelConfig()).on_message(message)

    if not host.messages:
        logger.warning(f"Message type '{args.type}' produced no response")
    for outbound in host.messages:
        print(json.dumps(outbound, ensure_ascii=False))

    if args.clipboard and host.clipboard.text is not None:
        logger.info("Clipboard contents:")
        print(host.clipboard.text)
    return 0


def handle_message_parsers(subparsers) -> None:
    """Register the extract and message subcommands."""
    extract_parser = subparsers.add_parser(
        "extract",
        help="Extract metadata of a snapshot's selection",
    )
    extract_parser.add_argument("snapshot", type=Path, help="Snapshot JSON file")
    extract_parser.add_argument(
        "--format",
        "-f",
        choices=["json", "tree"],
        default="json",
        help="Output format (default: json)",
    )
    extract_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Write output to file instead of stdout",
    )
    extract_parser.set_defaults(func=cmd_extract)

    message_parser = subparsers.add_parser(
        "message",
        help="Deliver a panel message against a snapshot",
    )
    message_parser.add_argument("snapshot", type=Path, help="Snapshot JSON file")
    message_parser.add_argument(
        "type",
        help="Message type (request-metadata, copy-guide)",
    )
    message_parser.add_argument(
        "--payload",
        help="Message payload (copy-guide defaults to the metadata tree)",
    )
    message_parser.add_argument(
        "--clipboard",
        action="store_true",
        help="Provide an in-memory clipboard to the host",
    )
    message_parser.set_defaults(func=cmd_message)


# =============================================================================
# Environment Command
# =============================================================================


def cmd_env(args: argparse.Namespace) -> int:
    """List configuration variables with their current values."""
    variables = list_environment_variables(args.category)
    if not variables:
        logger.error(f"No variables in category '{args.category}'")
        return 1

    for var in variables:
        config = get_environment_info(var)
        print(f"{config.name:<16} = {get_environment(var)!s:<10} [{config.category}]")
        print(f"    {config.description} (default: {config.default})")
    return 0


# =============================================================================
# Test Command
# =============================================================================


def cmd_test(extra_args: list[str]) -> int:
    """Run pytest with provided arguments and test tier options.

    Usage:
        python . test                # Run all tests
        python . test --unit         # Run only unit tests
        python . test --mcp          # Run MCP protocol tests
        python . test --integration  # Run CLI subprocess tests
        python . test -k "fills"     # Run tests matching pattern
    """
    tier_markers = {
        "--unit": ["-m", "unit"],
        "--mcp": ["-m", "mcp"],
        "--integration": ["-m", "integration"],
        "--all": [],
    }

    pytest_args: list[str] = []
    remaining_args: list[str] = []

    for arg in extra_args:
        if arg in tier_markers:
            pytest_args.extend(tier_markers[arg])
        else:
            remaining_args.append(arg)

    cmd = [sys.executable, "-m", "pytest", *pytest_args, *remaining_args]
    logger.info(f"Running: {' '.join(cmd)}")

    try:
        return subprocess.call(cmd)
    except KeyboardInterrupt:
        return 130


# =============================================================================
# MCP Server Command
# =============================================================================


def handle_mcp_command(argv: list[str]) -> int:
    """Handle MCP server commands.

    Usage:
        python . mcp run              # Start in STDIO mode
        python . mcp serve            # Start in HTTP mode
        python . mcp serve --port 8080
        python . mcp info             # Show server info
    """
    if not argv:
        print("MCP Server Commands")
        print("\nUsage: python . mcp {command} [options]")
        print("\nCommands:")
        print("  run                 Start server in STDIO mode")
        print("  serve               Start server in HTTP mode")
        print("  info                Show server information")
        print("\nOptions for 'serve':")
        print("  --host HOST         Bind address (default: MCP_HOST or 0.0.0.0)")
        print("  --port PORT         Port number (default: MCP_PORT or 18080)")
        print("  --transport TYPE    Transport: http or sse (default: http)")
        return 1

    subcommand = argv[0]

    if subcommand == "run":
        from compdoc.mcp.server import ServerConfig, run_server

        logger.info("Starting MCP server in STDIO mode...")
        run_server(ServerConfig.from_env())
        return 0

    elif subcommand == "serve":
        from compdoc.mcp.server import ServerConfig, TransportType, run_server

        parser = argparse.ArgumentParser(prog="python . mcp serve")
        parser.add_argument("--host")
        parser.add_argument("--port", type=int)
        parser.add_argument("--transport", choices=["http", "sse"], default="http")
        args = parser.parse_args(argv[1:])

        config = ServerConfig.from_env(
            transport=TransportType(args.transport),
            host=args.host,
            port=args.port,
        )
        logger.info(f"Starting MCP server in {config.transport.value} mode...")
        run_server(config)
        return 0

    elif subcommand == "info":
        from compdoc.mcp import get_server_capabilities, get_server_version

        print("compdoc MCP Server")
        print("=" * 40)
        print(f"Version: {get_server_version()}")
        print("\nCapabilities:")
        for cap, enabled in get_server_capabilities().items():
            status = "enabled" if enabled else "disabled"
            print(f"  {cap}: {status}")
        print("\nAvailable Tools:")
        print("  - extract_metadata: Metadata message for a snapshot")
        print("  - send_message: Deliver a panel message against a snapshot")
        print("  - status: Version and capabilities")
        print("\nResources:")
        print("  - schema://metadata: ComponentMetadata JSON schema")
        return 0

    else:
        logger.error(f"Unknown mcp command: {subcommand}")
        return handle_mcp_command([])


# =============================================================================
# Entry Point
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    """Build the parser for the snapshot and environment commands."""
    parser = argparse.ArgumentParser(
        prog="python .",
        description="Component documentation metadata extractor",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    subparsers = parser.add_subparsers(dest="command")

    handle_message_parsers(subparsers)

    env_parser = subparsers.add_parser("env", help="List configuration variables")
    env_parser.add_argument(
        "--category",
        "-c",
        choices=["panel", "service"],
        help="Only show one category",
    )
    env_parser.set_defaults(func=cmd_env)

    return parser


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python . {command} [args]")
    print("\n=== Metadata ===")
    print("  extract    Extract metadata of a snapshot's selection")
    print("  message    Deliver a panel message against a snapshot")
    print("\n=== MCP Server ===")
    print("  mcp        Run MCP server (STDIO or HTTP mode)")
    print("\n=== Configuration ===")
    print("  env        List configuration variables")
    print("\n=== Development ===")
    print("  test       Run the test suite")
    print("\nExamples:")
    print("  python . extract button.json --format tree")
    print("  python . message button.json request-metadata")
    print("  python . message button.json copy-guide --clipboard")
    print("  python . mcp serve --port 18080")
    print("  python . env --category panel")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        show_help()
        return 1

    command = argv[0]
    rest_args = argv[1:]

    if command in ("-h", "--help"):
        show_help()
        return 0

    if command == "mcp":
        setup_logging()
        return handle_mcp_command(rest_args)

    if command == "test":
        setup_logging()
        return cmd_test(rest_args)

    args = build_parser().parse_args(argv)
    if args.command is None:
        show_help()
        return 1

    setup_logging(verbose=args.verbose)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
