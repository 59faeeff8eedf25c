"""
E-bike counts at the configured stations, or run the local server.

Usage: python start.py [--html] [--local] [--listen-addr HOST:PORT]
  e.g. python start.py
       python start.py --html > status.html
       python start.py --local --listen-addr 0.0.0.0:8080
"""

import argparse
import sys

from ebike_status.config import LISTEN_ADDR
from ebike_status.handler import StatusRequest, handle
from ebike_status.log import configure_logging


def listen_addr(addr):
    """'host:port' -> (host, port). A bare ':port' listens on 127.0.0.1; IPv6 goes in brackets."""
    host, sep, port = addr.rpartition(":")
    if not sep or not port.isdigit() or not 0 < int(port) < 65536:
        raise argparse.ArgumentTypeError(f"expected HOST:PORT, got {addr!r}")
    return host.strip("[]") or "127.0.0.1", int(port)


def main(argv=None):
    parser = argparse.ArgumentParser(description="E-bike availability at nearby stations.")
    parser.add_argument("--local", action="store_true", help="Run local server")
    parser.add_argument("--listen-addr", type=listen_addr, default=LISTEN_ADDR, help="Host/Port to listen on")
    parser.add_argument("--html", action="store_true", help="Print HTML instead of text")
    args = parser.parse_args(argv)

    configure_logging()

    if args.local:
        import uvicorn

        host, port = args.listen_addr
        uvicorn.run("ebike_status.server:app", host=host, port=port)
        return 0

    resp = handle(StatusRequest(fmt="html" if args.html else "text"))
    if resp.status_code != 200:
        print(resp.body, file=sys.stderr)
        return 1
    print(resp.body)
    return 0


if __name__ == "__main__":
    sys.exit(main())
