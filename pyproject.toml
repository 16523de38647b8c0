[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netlab"
version = "0.1.0"
description = "Small network tools: Quote of the Day client and servers over UDP and TCP, and a one-shot ICMP echo ping"
requires-python = ">=3.10"
dependencies = []
keywords = ["qotd", "quote of the day", "udp", "tcp", "icmp", "ping", "sockets"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
qotd-udp-client = "netlab.udp_client:main"
qotd-udp-server = "netlab.udp_server:main"
qotd-tcp-server = "netlab.tcp_server:main"
miping = "netlab.ping:main"

[tool.hatch.build.targets.wheel]
packages = ["netlab"]

[tool.pytest.ini_options]
addopts = "-ra"
