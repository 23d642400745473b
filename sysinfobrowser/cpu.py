"""CPU model name, usage sampling and confidence intervals."""

import math
import time

from .procfile import read_proc_file

CPUINFO_PATH = "/proc/cpuinfo"
STAT_PATH = "/proc/stat"
CONFIDENCE_LEVEL = 0.95
SAMPLE_INTERVAL = 0.25

_MODEL_PREFIX = "model name\t: "


def calculate_confidence_interval(samples):
    """Return ``(mean, [lowest, highest])`` for ``samples``.

    An empty sample gives NaN everywhere.
    """
    values = list(samples)
    count = len(values)
    if count == 0:
        return math.nan, [math.nan, math.nan]
    mean = sum(values) / count
    deviation = math.sqrt(sum((value - mean) ** 2 for value in values) / 10)
    margin = CONFIDENCE_LEVEL * (deviation / math.sqrt(count))
    return mean, [mean - margin, mean + margin]


def cpu_name(path=CPUINFO_PATH):
    """Return the CPU model name from a cpuinfo file, or "" if it has none."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        for line in handle:
            line = line.rstrip("\r\n")
            if line.startswith(_MODEL_PREFIX):
                return line[len(_MODEL_PREFIX):]
    return ""


def _to_int(text):
    try:
        return int(text)
    except ValueError:
        return 0


def _times(stat_path, index):
    """Return ``(idle, total)`` jiffies of the ``index``-th cpu line, or None."""
    lines = read_proc_file(stat_path, "cpu")
    if index >= len(lines):
        return None
    fields = lines[index].split()[1:]
    if len(fields) < 4:
        raise ValueError(f"malformed cpu line: {lines[index]!r}")
    return _to_int(fields[3]), sum(_to_int(field) for field in fields)


def usage_from_index(index, stat_path=STAT_PATH, interval=SAMPLE_INTERVAL):
    """Return the busy percentage of one cpu line measured over ``interval`` seconds.

    Index 0 is the aggregate line; an index past the last line gives 0.
    """
    if index < 0:
        raise ValueError("cpu index must not be negative")
    first = _times(stat_path, index)
    if first is None:
        return 0
    time.sleep(interval)
    second = _times(stat_path, index)
    if second is None:
        return 0
    delta_idle = second[0] - first[0]
    delta_total = second[1] - first[1]
    if delta_total == 0:
        return 0
    return int((1.0 - delta_idle / delta_total) * 100.0)


def usage(stat_path=STAT_PATH, interval=SAMPLE_INTERVAL):
    """Return ``(per_cpu_usages, average_usage)`` as integer percentages."""
    count = len(read_proc_file(stat_path, "cpu"))
    if count == 0:
        return [], 0
    average = usage_from_index(0, stat_path, interval)
    per_cpu = [usage_from_index(index, stat_path, interval) for index in range(1, count)]
    return per_cpu, average