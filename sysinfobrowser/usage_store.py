"""SQLite history of per-CPU usage samples, one row per second."""

import logging
import math
import sqlite3
import struct
import threading
import time
from contextlib import contextmanager
from pathlib import Path

from .cpu import usage as sample_cpu_usage

DEFAULT_DB_PATH = "db/usage.db"
RETENTION_SECONDS = 86400

_STRIP = str.maketrans("", "", "[]{}")

log = logging.getLogger(__name__)


def _format_usage(values):
    return "[" + " ".join(str(value) for value in values) + "]"


def _to_float32(text):
    value = float(text)
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _parse_usage(text):
    values = []
    for field in text.translate(_STRIP).split(" "):
        try:
            values.append(_to_float32(field))
        except ValueError as exc:
            log.error("Cannot convert string to float64: %s", exc)
            values.append(0.0)
    return values


class UsageStore:
    """Stores CPU usage samples keyed by Unix time in the ``cpu_usages`` table."""

    def __init__(self, path=DEFAULT_DB_PATH):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self._connect() as conn:
            conn.execute(
                "CREATE TABLE IF NOT EXISTS cpu_usages "
                "(time INTEGER PRIMARY KEY, usage TEXT)"
            )

    @contextmanager
    def _connect(self):
        conn = sqlite3.connect(self.path)
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def record(self, usage, timestamp=None):
        """Store per-CPU usages under ``timestamp`` (now by default).

        Raises ``sqlite3.IntegrityError`` if that second is already stored.
        """
        stamp = int(time.time()) if timestamp is None else int(timestamp)
        with self._connect() as conn:
            conn.execute(
                "INSERT INTO cpu_usages (time, usage) VALUES (?, ?)",
                (stamp, _format_usage(usage)),
            )

    def prune(self, before):
        """Delete samples at or before ``before``; return how many were removed."""
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM cpu_usages WHERE time <= ?", (int(before),))
            return cursor.rowcount

    def usage_by_seconds(self, seconds, now=None):
        """Return the stored usages of the last ``seconds`` seconds, flattened.

        For 0 or 1 only the sample taken exactly that many seconds ago is used.
        """
        current = int(time.time()) if now is None else int(now)
        since = current - int(seconds)
        if seconds in (0, 1):
            query = "SELECT usage FROM cpu_usages WHERE time = ? ORDER BY time"
        else:
            query = "SELECT usage FROM cpu_usages WHERE time >= ? ORDER BY time"
        with self._connect() as conn:
            rows = conn.execute(query, (since,)).fetchall()
        return [value for (text,) in rows for value in _parse_usage(text or "")]

    def run(self, stop_event=None, interval=1.0, sampler=None):
        """Record a sample every ``interval`` seconds until ``stop_event`` is set.

        Samples older than a day are removed after each one is stored.
        """
        stop = threading.Event() if stop_event is None else stop_event
        sample = sampler if sampler is not None else (lambda: sample_cpu_usage()[0])
        while not stop.wait(interval):
            values = sample()
            now = int(time.time())
            try:
                self.record(values, now)
            except sqlite3.Error as exc:
                log.error("Error When creating data: %s", exc)
            try:
                self.prune(now - RETENTION_SECONDS)
            except sqlite3.Error as exc:
                log.error("Error when deleting old data: %s", exc)