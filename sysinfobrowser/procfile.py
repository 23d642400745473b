"""Reading lines from text files such as those under /proc."""


def read_proc_file(filename, prefix):
    """Return the lines of ``filename`` that start with ``prefix``, in order."""
    with open(filename, encoding="utf-8", errors="replace") as handle:
        lines = (line.rstrip("\r\n") for line in handle)
        return [line for line in lines if line.startswith(prefix)]