"""Report Linux system information over HTTP as JSON."""

__version__ = "0.1.0"