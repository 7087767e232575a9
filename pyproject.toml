[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hoptrace"
version = "0.1.0"
description = "Trace the route of ICMP echo probes to a network host"
requires-python = ">=3.10"
dependencies = []
keywords = ["traceroute", "icmp", "network", "diagnostics", "ttl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hoptrace = "hoptrace.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hoptrace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
