"""Command-line entry point: check a Redis Sentinel and report the result."""

from __future__ import annotations

import argparse
import os
import sys

from .check import run_check
from .client import DEFAULT_HOST, DEFAULT_PORT, SentinelClient
from .log import get_logger
from .status import Severity


class ProbeArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors as an UNKNOWN status line."""

    def error(self, message):
        print(f"{Severity.UNKNOWN.name} - {message}")
        sys.exit(int(Severity.UNKNOWN))


def port_number(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}") from None
    if not 1 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range: {port}")
    return port


def parse_args(argv=None) -> argparse.Namespace:
    parser = ProbeArgumentParser(
        prog="check_redis_sentinel",
        description="Check the health of a Redis Sentinel",
    )
    parser.add_argument(
        "-H", "--host",
        default=os.environ.get("SENTINELPROBE_HOST", DEFAULT_HOST),
        help="Sentinel hostname or address (default: %(default)s)",
    )
    parser.add_argument(
        "-p", "--port",
        type=port_number,
        default=os.environ.get("SENTINELPROBE_PORT", str(DEFAULT_PORT)),
        help="Sentinel port (default: %(default)s)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log protocol details to stderr",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logger = get_logger(args.verbose)
    logger.debug("Checking sentinel at %s:%s", args.host, args.port)
    verdict = run_check(SentinelClient(args.host, args.port))
    print(verdict.summary())
    return verdict.exit_code


if __name__ == "__main__":
    sys.exit(main())
