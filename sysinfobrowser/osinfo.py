"""Host name, distribution, kernel, desktop session and uptime."""

import logging
import os
import socket
import subprocess
from pathlib import Path

OS_RELEASE_PATHS = ("/etc/os-release", "/usr/lib/os-release")
UPTIME_PATH = "/proc/uptime"

log = logging.getLogger(__name__)


def desktop():
    """Return the desktop session name, or "" when none is set."""
    return os.environ.get("DESKTOP_SESSION", "")


def hostname():
    """Return the host name of this machine."""
    try:
        return socket.gethostname()
    except OSError as exc:
        log.error("cannot get hostname: %s", exc)
        return ""


def kernel_name():
    """Return the output of ``uname -r`` as is, or "" if it cannot be run."""
    try:
        completed = subprocess.run(
            ["uname", "-r"], capture_output=True, text=True, check=False
        )
    except OSError:
        return ""
    return completed.stdout or ""


def _read_os_release(paths):
    last_error = None
    for path in paths:
        try:
            return Path(path).read_text(encoding="utf-8", errors="replace").splitlines()
        except OSError as exc:
            last_error = exc
    log.error("Cannot open files %s: %s", ", ".join(map(str, paths)), last_error)
    return []


def os_name(paths=OS_RELEASE_PATHS):
    """Return the distribution name from the first readable os-release file.

    The value of the first line mentioning NAME is used, without quotes.
    """
    for line in _read_os_release(paths):
        if "NAME" in line:
            parts = line.split("=")
            if len(parts) < 2:
                raise ValueError(f"malformed os-release line: {line!r}")
            return parts[1].replace('"', "")
    return ""


def format_uptime(seconds):
    """Render a number of seconds as days, hours and minutes."""
    days = seconds // 86400
    hours = seconds // 3600 % 24
    minutes = seconds // 60 % 60
    if days > 0:
        return f"{days} days, {hours} hours, {minutes} minutes"
    if hours > 0:
        return f"{hours} hours, {minutes} minutes"
    return f"{minutes} minutes"


def uptime(path=UPTIME_PATH):
    """Return the system uptime read from ``path`` as text."""
    seconds = 0
    for line in Path(path).read_text().splitlines():
        seconds = int(float(line.split(".")[0]))
    return format_uptime(seconds)