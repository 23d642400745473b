"""Block devices and their sizes from sysfs."""

import os
from pathlib import Path

BLOCK_DIR = "/sys/block/"
SECTORS_PER_GB = 1953125


def disks(block_dir=BLOCK_DIR):
    """Return the names of block devices, sorted, leaving out zram devices."""
    with os.scandir(block_dir) as entries:
        return sorted(entry.name for entry in entries if "zram" not in entry.name)


def size(disk, block_dir=BLOCK_DIR):
    """Return the size of ``disk`` in whole gigabytes."""
    path = Path(block_dir) / disk / "size"
    result = 0
    for line in path.read_text().splitlines():
        result = int(line) // SECTORS_PER_GB
    return result