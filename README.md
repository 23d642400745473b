# sysinfobrowser

A small HTTP server for Linux hosts. It reports system information as JSON,
so a browser page or a script can show it. Data comes from `/proc`,
`/sys/block`, `/etc/os-release`, `lspci` and `uname`.

While it runs, the server samples the usage of each CPU core once a second
and stores it in a SQLite database. Samples older than one day are removed.
The stored history can be queried through the `/info/cpu/usage` endpoints.

## Installation

```
pip install .
```

## Running

```
sysinfobrowser
```

The server listens on all interfaces, port 7052, by default. Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--addr HOST:PORT` | `:7052` | address to listen on; an empty host means all interfaces, IPv6 hosts go in brackets |
| `--db PATH` | `db/usage.db` | SQLite file for the CPU usage history (its directory is created) |
| `--log PATH` | `htop.log` | file that errors are appended to; they are also printed to standard output |

For example:

```
sysinfobrowser --addr 127.0.0.1:8080 --db /tmp/usage.db
```

Requests for `/` serve `index.html` from the working directory. Requests for
`/index.css` and `/index.mjs` serve those files too. Other single-segment
paths answer with an empty response.

## Endpoints

Every information endpoint answers with a JSON object:

```json
{
    "result": "ok",
    "info": "Memory Size(MiB)",
    "data": 15872
}
```

| Path | Data |
| --- | --- |
| `/info/os/hostname` | host name |
| `/info/os/name` | distribution name from os-release |
| `/info/os/kernel` | output of `uname -r` |
| `/info/os/desktop` | desktop session (`DESKTOP_SESSION`) |
| `/info/os/uptime` | uptime, e.g. `2 days, 3 hours, 14 minutes` |
| `/info/cpu/name` | CPU model name |
| `/info/cpu/usage` | per-core usage stored one second ago |
| `/info/cpu/usage/<n>/` | every per-core value stored in the last *n* seconds |
| `/info/cpu/usage/average/` | mean of the values stored one second ago |
| `/info/cpu/usage/average/<n>` | mean over the last *n* seconds, as a whole number |
| `/info/cpu/usage/cinterval/<n>` | `[lowest, highest]` interval around that mean, as whole numbers |
| `/info/gpu/name` | VGA devices reported by `lspci`, one per line |
| `/info/mem/total` | total memory (MiB) |
| `/info/mem/usage` | used memory (MiB) |
| `/info/mem/usagepercent` | used memory (percent) |
| `/info/mem/available` | available memory (MiB) |
| `/info/disks/` | block devices, sorted, without zram |
| `/info/disks/<disk>/size/` | disk size (GB) |

Unknown names and values that are not integers answer with an empty
response rather than an error page.

## Using it as a library

The collectors can be called directly:

```python
from sysinfobrowser import cpu, mem, osinfo

print(cpu.cpu_name())
print(mem.usage_percent())
print(osinfo.uptime())
```

Each reader takes the path of the file it reads, so it can be pointed at
sample files: `cpu.cpu_name(path)`, `cpu.usage(stat_path, interval)`,
`mem.total(meminfo_path)`, `disk.disks(block_dir)`, `disk.size(disk, block_dir)`,
`osinfo.os_name(paths)` and `osinfo.uptime(path)`. `gpu.gpu_names(text)`
parses `lspci` output given as a string. `cpu.calculate_confidence_interval`
returns `(mean, [lowest, highest])` for a list of samples.

`sysinfobrowser.usage_store.UsageStore(path)` holds the usage history:
`record(usage, timestamp)`, `prune(before)`, `usage_by_seconds(seconds, now)`,
and `run(stop_event, interval, sampler)` to sample in a loop until the event
is set.

`sysinfobrowser.server.create_app(store, static_dir)` builds the Flask
application. The files it reads are taken from `app.config`:
`CPUINFO_PATH`, `MEMINFO_PATH`, `BLOCK_DIR`, `OS_RELEASE_PATHS` and
`UPTIME_PATH`. `sysinfobrowser.response.build_response` builds the JSON
bodies shown above.

## Limits

The server does not measure CPU usage when a request arrives; the usage
endpoints only return what the background sampler has stored. Until it has
run for a few seconds they return empty lists, and the average of no samples
is reported as `NaN` (or `0` where a whole number is returned). The history
lives only in the SQLite file; there is no export, authentication or TLS.

## Tests

```
pip install ".[test]"
pytest
```