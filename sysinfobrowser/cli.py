"""Command line entry point: sample CPU usage and serve the web interface."""

import argparse
import threading

from .logger import DEFAULT_LOG_PATH, get_error_logger
from .server import run
from .usage_store import DEFAULT_DB_PATH, UsageStore

DEFAULT_ADDRESS = ":7052"
ANY_HOST = "0.0.0.0"


def parse_address(addr):
    """Split ``host:port`` into ``(host, port)``; an empty host means all interfaces."""
    host, sep, port_text = addr.rpartition(":")
    if not sep:
        raise ValueError(f"missing port in address {addr!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    elif ":" in host:
        raise ValueError(f"too many colons in address {addr!r}")
    if not port_text.isascii() or not port_text.isdigit():
        raise ValueError(f"invalid port in address {addr!r}")
    port = int(port_text)
    if port > 65535:
        raise ValueError(f"port out of range in address {addr!r}")
    return host or ANY_HOST, port


def _address(text):
    try:
        return parse_address(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def main(argv=None):
    """Start recording CPU usage in the background and run the HTTP server."""
    parser = argparse.ArgumentParser(
        prog="sysinfobrowser", description="Serve system information over HTTP."
    )
    parser.add_argument("--addr", type=_address, default=DEFAULT_ADDRESS,
                        help="address to listen on (default: %(default)s)")
    parser.add_argument("--db", default=DEFAULT_DB_PATH,
                        help="usage database file (default: %(default)s)")
    parser.add_argument("--log", default=DEFAULT_LOG_PATH,
                        help="error log file (default: %(default)s)")
    args = parser.parse_args(argv)

    get_error_logger(args.log)
    store = UsageStore(args.db)
    stop = threading.Event()
    worker = threading.Thread(target=store.run, args=(stop,), daemon=True)
    worker.start()
    try:
        run(args.addr, store)
    finally:
        stop.set()
    return 0