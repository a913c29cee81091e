"""Command-line options."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

_GUEST = "guest"

DEFAULT_ADDR = "http://localhost:15672"
DEFAULT_USER = _GUEST


@dataclass(frozen=True)
class Cli:
    """Parsed command-line options."""

    addr: str
    user: str
    password: str


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rabbitui",
        description="A TUI application for RabbitMQ management",
    )
    parser.add_argument(
        "-a",
        "--addr",
        default=DEFAULT_ADDR,
        help="Http(s) address of the API. Excludes trailing slash",
    )
    parser.add_argument(
        "-u",
        "--user",
        default=DEFAULT_USER,
        help="Username for the API auth",
    )
    parser.add_argument(
        "-p",
        "--pass",
        dest="password",
        default=_GUEST,
        help="Password for the API auth",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Cli:
    """Parse ``argv`` (or ``sys.argv``) into a :class:`Cli`."""
    namespace = _build_parser().parse_args(argv)
    return Cli(addr=namespace.addr, user=namespace.user, password=namespace.password)