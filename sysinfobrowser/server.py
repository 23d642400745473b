"""HTTP server exposing system information as JSON."""

import logging
import math
import os
import re

from flask import Flask, Response, send_from_directory

from . import cpu, disk, gpu, mem, osinfo
from .response import build_response
from .usage_store import UsageStore

INDEX_FILE = "index.html"
STATIC_FILES = ("index.css", "index.mjs")

_INTEGER = re.compile(r"[+-]?[0-9]+")

log = logging.getLogger(__name__)


def _atoi(text):
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


def _whole(value):
    return int(value) if math.isfinite(value) else 0


def _reply(data, message):
    status, content_type, body = build_response(data, 200, "ok", message)
    return Response(body, status=status, content_type=content_type)


def _nothing():
    return Response(status=200)


def create_app(store=None, static_dir="."):
    """Build the Flask application serving the page and the ``/info`` routes.

    File locations used by the handlers are read from ``app.config``:
    ``CPUINFO_PATH``, ``MEMINFO_PATH``, ``BLOCK_DIR``, ``OS_RELEASE_PATHS``
    and ``UPTIME_PATH``.
    """
    usage_store = store if store is not None else UsageStore()
    static_root = os.path.abspath(os.fspath(static_dir))

    app = Flask(__name__)
    app.config.update(
        CPUINFO_PATH=cpu.CPUINFO_PATH,
        MEMINFO_PATH=mem.MEMINFO_PATH,
        BLOCK_DIR=disk.BLOCK_DIR,
        OS_RELEASE_PATHS=osinfo.OS_RELEASE_PATHS,
        UPTIME_PATH=osinfo.UPTIME_PATH,
    )

    @app.get("/")
    @app.get("/<file>")
    def serve_index(file=""):
        if file == "":
            return send_from_directory(static_root, INDEX_FILE)
        if file in STATIC_FILES:
            return send_from_directory(static_root, file)
        return _nothing()

    @app.get("/info/os/<info>")
    def serve_os_info(info):
        info = info.replace("/", "")
        if info == "hostname":
            return _reply(osinfo.hostname(), "Hostname")
        if info == "name":
            return _reply(osinfo.os_name(app.config["OS_RELEASE_PATHS"]), "Distro Name")
        if info == "kernel":
            return _reply(osinfo.kernel_name(), "Kernel")
        if info == "desktop":
            return _reply(osinfo.desktop(), "Desktop Environment")
        if info == "uptime":
            return _reply(osinfo.uptime(app.config["UPTIME_PATH"]), "Uptime")
        return _nothing()

    @app.get("/info/cpu/<info>")
    @app.get("/info/cpu/<info>/<seconds>/")
    @app.get("/info/cpu/<info>/<seconds>/<path:average>")
    def serve_cpu_info(info, seconds="", average=""):
        info = info.replace("/", "")
        average = average.replace("/", "")
        if info == "name":
            return _reply(cpu.cpu_name(app.config["CPUINFO_PATH"]), "CPU Name")
        if info != "usage":
            return _nothing()

        realtime = usage_store.usage_by_seconds(1)
        realtime_average, _ = cpu.calculate_confidence_interval(realtime)

        if seconds == "":
            return _reply(realtime, "CPU Usage in last 1 second")
        if seconds == "average":
            if average == "":
                return _reply(realtime_average, "Average CPU Usage in last 1 second")
            try:
                count = _atoi(average)
            except ValueError as exc:
                log.error("error when converting string to integar: %s", exc)
                return _nothing()
            mean, _ = cpu.calculate_confidence_interval(usage_store.usage_by_seconds(count))
            return _reply(_whole(mean), f"Average CPU Usage in last {count} seconds")
        if seconds == "cinterval":
            if average == "":
                return _nothing()
            try:
                count = _atoi(average)
            except ValueError as exc:
                log.error("error when converting string to integar: %s", exc)
                return _nothing()
            _, interval = cpu.calculate_confidence_interval(
                usage_store.usage_by_seconds(count)
            )
            return _reply([_whole(bound) for bound in interval], "confidence interval")
        if average != "":
            return _nothing()
        try:
            count = _atoi(seconds)
        except ValueError as exc:
            log.error("error when converting string to integar: %s", exc)
            return _nothing()
        return _reply(usage_store.usage_by_seconds(count), f"CPU Usage in last {count} seconds")

    @app.get("/info/gpu/<info>")
    def serve_gpu_info(info):
        if info.replace("/", "") == "name":
            return _reply(gpu.gpu_name(), "GPU Name")
        return _nothing()

    @app.get("/info/mem/<info>")
    def serve_mem_info(info):
        info = info.replace("/", "")
        path = app.config["MEMINFO_PATH"]
        if info == "total":
            return _reply(mem.total(path), "Memory Size(MiB)")
        if info == "usage":
            return _reply(mem.usage_mb(path), "Memory Usage (MiB)")
        if info == "usagepercent":
            return _reply(mem.usage_percent(path), "Memory Usage (Percent)")
        if info == "available":
            return _reply(mem.available(path), "Available Memory(MiB)")
        return _nothing()

    @app.get("/info/disks/")
    @app.get("/info/disks/<part>/<info>/")
    def serve_disks(part="", info=""):
        block_dir = app.config["BLOCK_DIR"]
        names = disk.disks(block_dir)
        if part == "":
            return _reply(names, "Disks")
        if part in names and info == "size":
            return _reply(disk.size(part, block_dir), "Disk Size(GiB)")
        return _nothing()

    return app


def run(addr, store=None):
    """Serve the application on ``addr``, a ``(host, port)`` pair."""
    host, port = addr
    create_app(store).run(host=host, port=port, threaded=True)