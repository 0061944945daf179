[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taifex_replay"
version = "0.1.0"
description = "Replay TAIFEX market data messages from PCAP-like capture log files"
requires-python = ">=3.10"
dependencies = []
keywords = ["taifex", "market-data", "pcap", "replay", "futures", "options"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["taifex_replay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
