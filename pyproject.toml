[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sysinfobrowser"
version = "0.1.0"
description = "A small web server that reports Linux system information (CPU, memory, disks, GPU, OS) as JSON"
requires-python = ">=3.10"
keywords = ["system", "monitoring", "cpu", "memory", "procfs", "http", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sysinfobrowser = "sysinfobrowser.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sysinfobrowser"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
