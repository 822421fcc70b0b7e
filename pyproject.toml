[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bcprotocol"
version = "0.1.0"
description = "Configuration value types and ZeroMQ helpers: authorities, endpoints, Z85 keys, CURVE certificates and restartable contexts."
requires-python = ">=3.10"
dependencies = [
    "pyzmq",
]
keywords = ["zeromq", "zmq", "curve", "z85", "endpoint", "authority", "networking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bcprotocol"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
