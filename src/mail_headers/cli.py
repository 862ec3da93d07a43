"""Command-line interface for mail-headers.

This module provides the main entry point for the CLI application.
"""

from __future__ import annotations

import argparse
import sys

import structlog

from mail_headers import __version__
from mail_headers.config import get_settings
from mail_headers.exceptions import MailHeadersError
from mail_headers.logging import configure_logging
from mail_headers.message import MessageHeaders
from mail_headers.models import (
    AddrHeader,
    Header,
    importance_num_string,
    importance_string,
    importance_xprio_string,
    is_addr_header,
    is_gen_header,
    parse_importance,
)

logger = structlog.get_logger()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mail-headers", description="Mail header toolkit")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List the known generic and address headers")

    classify_parser = subparsers.add_parser(
        "classify",
        help="Tell whether header names are address, generic or custom headers",
    )
    classify_parser.add_argument("names", nargs="+", help="Header names (case-sensitive)")

    importance_parser = subparsers.add_parser(
        "importance",
        help="Show the header values written for an importance level",
    )
    importance_parser.add_argument(
        "level",
        help="Level name (non-urgent, low, normal, high, urgent) or ordinal",
    )

    route_parser = subparsers.add_parser(
        "route",
        help="Route NAME=VALUE pairs into a message and print the stored headers",
    )
    route_parser.add_argument("pairs", nargs="+", metavar="NAME=VALUE")
    route_parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject header names outside the known vocabulary",
    )

    return parser


def _classify(name: str) -> str:
    if is_addr_header(name):
        return "address"
    if is_gen_header(name):
        return "generic"
    return "custom"


def _cmd_list(args: argparse.Namespace) -> int:
    print("Address headers:")
    for addr in AddrHeader:
        print(f"  {addr}")
    print("\nGeneric headers:")
    for header in Header:
        print(f"  {header}")
    return 0


def _cmd_classify(args: argparse.Namespace) -> int:
    for name in args.names:
        print(f"{name}\t{_classify(name)}")
    return 0


def _cmd_importance(args: argparse.Namespace) -> int:
    try:
        level = parse_importance(args.level)
    except ValueError as e:
        logger.error("invalid_importance", level=args.level, error=str(e))
        print(str(e), file=sys.stderr)
        return 2

    print(f"{Header.IMPORTANCE}: {importance_string(level)}")
    print(f"{Header.PRIORITY}: {importance_num_string(level)}")
    print(f"{Header.X_PRIORITY}: {importance_xprio_string(level)}")
    print(f"{Header.X_MSMAIL_PRIORITY}: {importance_num_string(level)}")
    return 0


def _cmd_route(args: argparse.Namespace) -> int:
    message = MessageHeaders(allow_custom_headers=False) if args.strict else MessageHeaders()
    for pair in args.pairs:
        name, sep, value = pair.partition("=")
        if not sep:
            print(f"Expected NAME=VALUE, got {pair!r}", file=sys.stderr)
            return 2
        try:
            message.set_header(name, value)
        except MailHeadersError as e:
            logger.error("route_failed", header=name, error=str(e))
            print(str(e), file=sys.stderr)
            return 2

    for name, values in message.header_items():
        print(f"{name}: {', '.join(values)}")
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point for the mail-headers CLI.

    Args:
        args: Command-line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    if args is None:
        args = sys.argv[1:]

    settings = get_settings()
    configure_logging(settings.log_level)

    logger.debug("mail_headers_started", version=__version__, debug=settings.debug)

    parser = _build_parser()
    parsed = parser.parse_args(args)

    if parsed.command == "list":
        return _cmd_list(parsed)
    if parsed.command == "classify":
        return _cmd_classify(parsed)
    if parsed.command == "importance":
        return _cmd_importance(parsed)
    if parsed.command == "route":
        return _cmd_route(parsed)

    logger.error("unknown_command", command=parsed.command)
    return 2


if __name__ == "__main__":
    sys.exit(main())
