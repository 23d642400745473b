import socket
import time

import pytest

from sysinfobrowser import disk, mem, osinfo
from sysinfobrowser.cpu import calculate_confidence_interval
from sysinfobrowser.server import create_app
from sysinfobrowser.usage_store import UsageStore


@pytest.fixture
def env(tmp_path):
    static = tmp_path / "static"
    static.mkdir()
    (static / "index.html").write_text("<html>page</html>")
    (static / "index.css").write_text("body {}")
    (static / "notes.txt").write_text("hidden")

    meminfo = tmp_path / "meminfo"
    meminfo.write_text(
        "MemTotal:        2048000 kB\nMemFree:          512000 kB\n"
        "MemAvailable:    1024000 kB\n"
    )
    cpuinfo = tmp_path / "cpuinfo"
    cpuinfo.write_text("processor\t: 0\nmodel name\t: Example CPU 3000\n")
    block = tmp_path / "block"
    (block / "sda").mkdir(parents=True)
    (block / "sda" / "size").write_text("3906250\n")
    (block / "zram0").mkdir()
    os_release = tmp_path / "os-release"
    os_release.write_text('NAME="Example Linux"\nID=example\n')
    uptime_file = tmp_path / "uptime"
    uptime_file.write_text("90061.55 100.00\n")

    store = UsageStore(tmp_path / "db" / "usage.db")
    app = create_app(store, static)
    app.config.update(
        CPUINFO_PATH=str(cpuinfo),
        MEMINFO_PATH=str(meminfo),
        BLOCK_DIR=str(block),
        OS_RELEASE_PATHS=[str(os_release)],
        UPTIME_PATH=str(uptime_file),
    )
    return {
        "client": app.test_client(),
        "store": store,
        "meminfo": str(meminfo),
        "block": str(block),
    }


def test_index_served(env):
    response = env["client"].get("/")
    assert response.status_code == 200
    assert response.data == b"<html>page</html>"


def test_static_css_served(env):
    assert env["client"].get("/index.css").data == b"body {}"


def test_other_files_not_served(env):
    response = env["client"].get("/notes.txt")
    assert response.data == b""


def test_cpu_name(env):
    response = env["client"].get("/info/cpu/name")
    assert response.content_type == "application/json"
    body = response.get_json()
    assert body == {"result": "ok", "info": "CPU Name", "data": "Example CPU 3000"}


def test_realtime_usage_empty_store(env):
    body = env["client"].get("/info/cpu/usage").get_json()
    assert body["info"] == "CPU Usage in last 1 second"
    assert body["data"] == []


def _fill(store):
    now = int(time.time())
    store.record([10, 20], now - 2)
    store.record([30, 40], now - 3)


def test_usage_by_seconds(env):
    _fill(env["store"])
    body = env["client"].get("/info/cpu/usage/10/").get_json()
    assert body["info"] == "CPU Usage in last 10 seconds"
    assert body["data"] == [30, 40, 10, 20]


def test_average_usage(env):
    _fill(env["store"])
    body = env["client"].get("/info/cpu/usage/average/10").get_json()
    mean, _ = calculate_confidence_interval([30.0, 40.0, 10.0, 20.0])
    assert body["info"] == "Average CPU Usage in last 10 seconds"
    assert body["data"] == int(mean)


def test_confidence_interval(env):
    _fill(env["store"])
    body = env["client"].get("/info/cpu/usage/cinterval/10").get_json()
    _, interval = calculate_confidence_interval([30.0, 40.0, 10.0, 20.0])
    assert body["info"] == "confidence interval"
    assert body["data"] == [int(bound) for bound in interval]
    assert body["data"][0] <= body["data"][1]


def test_invalid_seconds_gives_empty_body(env):
    response = env["client"].get("/info/cpu/usage/abc/")
    assert response.status_code == 200
    assert response.data == b""


def test_mem_routes(env):
    client = env["client"]
    path = env["meminfo"]
    assert client.get("/info/mem/total").get_json()["data"] == 2000
    assert client.get("/info/mem/available").get_json()["data"] == mem.available(path)
    assert client.get("/info/mem/usage").get_json()["data"] == mem.usage_mb(path)
    body = client.get("/info/mem/usagepercent").get_json()
    assert body["info"] == "Memory Usage (Percent)"
    assert body["data"] == mem.usage_percent(path)


def test_unknown_mem_info_gives_empty_body(env):
    assert env["client"].get("/info/mem/bogus").data == b""


def test_disk_list(env):
    body = env["client"].get("/info/disks/").get_json()
    assert body["info"] == "Disks"
    assert body["data"] == ["sda"]


def test_disk_size(env):
    body = env["client"].get("/info/disks/sda/size/").get_json()
    assert body["info"] == "Disk Size(GiB)"
    assert body["data"] == disk.size("sda", env["block"])


def test_unknown_disk_gives_empty_body(env):
    assert env["client"].get("/info/disks/zram0/size/").data == b""


def test_os_name(env):
    body = env["client"].get("/info/os/name").get_json()
    assert body["data"] == "Example Linux"


def test_os_desktop(env, monkeypatch):
    monkeypatch.setenv("DESKTOP_SESSION", "plasma")
    body = env["client"].get("/info/os/desktop").get_json()
    assert body == {"result": "ok", "info": "Desktop Environment", "data": "plasma"}


def test_os_hostname(env):
    assert env["client"].get("/info/os/hostname").get_json()["data"] == socket.gethostname()


def test_os_uptime(env):
    body = env["client"].get("/info/os/uptime").get_json()
    assert body["data"] == osinfo.format_uptime(90061)