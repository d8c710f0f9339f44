"""Command line front-end: ``wolgate AA:BB:CC:DD:EE:FF``."""

from __future__ import annotations

import argparse
import logging
import sys

from wolgate.exceptions import WolError
from wolgate.utils.log_setup import setup_logging
from wolgate.utils.wol import DEFAULT_DESTINATION, DEFAULT_SOURCE, send_wol

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="wolgate", description="Send a Wake-on-LAN magic packet")
    p.add_argument("mac", help="target MAC address, e.g. AA:BB:CC:DD:EE:FF")
    p.add_argument("--broadcast", default=DEFAULT_DESTINATION[0], help="destination address (default: %(default)s)")
    p.add_argument("--port", type=int, default=DEFAULT_DESTINATION[1], help="destination UDP port (default: %(default)s)")
    p.add_argument("--source", default=DEFAULT_SOURCE[0], help="address to bind the socket to (default: %(default)s)")
    p.add_argument("--source-port", type=int, default=DEFAULT_SOURCE[1], help="port to bind the socket to (default: OS chosen)")
    p.add_argument("--log-level", default="WARNING", help="logging level (default: %(default)s)")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)
    try:
        send_wol(args.mac, broadcast=args.broadcast, port=args.port, source=(args.source, args.source_port))
    except WolError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print("Done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
