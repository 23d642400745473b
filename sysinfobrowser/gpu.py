"""Graphics adapter names taken from ``lspci``."""

import logging
import subprocess

log = logging.getLogger(__name__)

_PREFIX_LENGTH = 35
_SUFFIX_LENGTH = 9


def gpu_names(lspci_output):
    """Return the VGA device names in ``lspci_output``, each ended by a newline."""
    names = []
    for line in lspci_output.split("\n"):
        if "VGA" not in line:
            continue
        if len(line) < _PREFIX_LENGTH + _SUFFIX_LENGTH:
            raise ValueError(f"unexpected lspci line: {line!r}")
        names.append(line[_PREFIX_LENGTH:len(line) - _SUFFIX_LENGTH] + "\n")
    return "".join(names)


def gpu_name():
    """Run ``lspci`` and return the names of the graphics adapters it lists."""
    try:
        completed = subprocess.run(["lspci"], capture_output=True, text=True, check=False)
    except OSError as exc:
        log.error("Error: %s", exc)
        return ""
    if completed.returncode != 0:
        log.error("Error: lspci exited with status %d", completed.returncode)
    return gpu_names(completed.stdout or "")