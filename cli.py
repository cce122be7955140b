#!/usr/bin/env python3
"""
Command-line interface for the shopping patterns demo.

Usage:
    uv run python cli.py [command] [options]

Commands:
    demo        Run the shopping demo
    test        Run the test suite
    serve       Start the API server

Examples:
    uv run python cli.py demo
    uv run python cli.py demo --customer Ali --customer Bora --customer Cem
    uv run python cli.py demo --status "Stok yok." --verbose
    uv run python cli.py serve
"""

import argparse
import logging
import subprocess
import sys
from typing import Optional


def configure_logging(verbose: bool, debug: bool) -> None:
    """Send logs to stderr so the demo output on stdout stays clean."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def run_demo(customers: list[str], status: str) -> None:
    """Run the shopping demo."""
    from shopping.demo import run_shopping_demo
    from shopping.models import ShoppingScenario

    overrides = {}
    if customers:
        overrides["customers"] = customers
    if status is not None:
        overrides["stock_status"] = status

    run_shopping_demo(ShoppingScenario(**overrides))


def run_tests(args: list[str]) -> None:
    """Run the test suite."""
    cmd = ["uv", "run", "pytest"] + args
    subprocess.run(cmd)


def run_server(host: str, port: int, reload: bool) -> None:
    """Start the API server."""
    cmd = ["uv", "run", "uvicorn", "api.main:app", f"--host={host}", f"--port={port}"]
    if reload:
        cmd.append("--reload")

    print(f"Starting server at http://{host}:{port}")
    print(f"API docs available at http://{host}:{port}/docs")
    subprocess.run(cmd)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Shopping Patterns Demo CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s demo
  %(prog)s demo --customer Ali --customer Bora
  %(prog)s test -v
  %(prog)s serve --reload
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Run the shopping demo")
    demo_parser.add_argument(
        "--customer",
        action="append",
        default=[],
        dest="customers",
        help="Customer to notify (repeatable, default: Ali and Bora)",
    )
    demo_parser.add_argument(
        "--status",
        default=None,
        help='Stock status to broadcast (default: "Stok var.")',
    )
    demo_parser.add_argument("--verbose", action="store_true", help="Log at INFO level")
    demo_parser.add_argument("--debug", action="store_true", help="Log at DEBUG level")

    # Test command
    test_parser = subparsers.add_parser("test", help="Run the test suite")
    test_parser.add_argument(
        "pytest_args",
        nargs="*",
        default=[],
        help="Arguments to pass to pytest",
    )

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start the API server")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    # Options after "test" belong to pytest, so only that command accepts extras
    args, extra = parser.parse_known_args(argv)
    if extra and args.command != "test":
        parser.error(f"unrecognized arguments: {' '.join(extra)}")

    if args.command == "demo":
        configure_logging(args.verbose, args.debug)
        run_demo(args.customers, args.status)
    elif args.command == "test":
        run_tests(args.pytest_args + extra)
    elif args.command == "serve":
        run_server(args.host, args.port, args.reload)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
