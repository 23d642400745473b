"""Memory figures from /proc/meminfo, in MiB."""

from .procfile import read_proc_file

MEMINFO_PATH = "/proc/meminfo"


def _field_mib(meminfo_path, key):
    lines = read_proc_file(meminfo_path, key)
    if not lines:
        raise ValueError(f"{key} not found in {meminfo_path}")
    fields = lines[0].split()
    if len(fields) < 2:
        raise ValueError(f"malformed line: {lines[0]!r}")
    return int(fields[1]) // 1024


def total(meminfo_path=MEMINFO_PATH):
    """Return total memory in MiB."""
    return _field_mib(meminfo_path, "MemTotal:")


def available(meminfo_path=MEMINFO_PATH):
    """Return available memory in MiB."""
    return _field_mib(meminfo_path, "MemAvailable:")


def usage_mb(meminfo_path=MEMINFO_PATH):
    """Return memory in use in MiB."""
    return total(meminfo_path) - available(meminfo_path)


def usage_percent(meminfo_path=MEMINFO_PATH):
    """Return memory in use as a whole percentage of the total."""
    return int(usage_mb(meminfo_path) / total(meminfo_path) * 100)