[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "subpub"
version = "0.1.0"
description = "In-process publish/subscribe event bus with per-subscriber FIFO delivery, plus environment-based gRPC address configuration"
requires-python = ">=3.10"
keywords = ["pubsub", "publish-subscribe", "event-bus", "messaging", "queue", "dotenv"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["subpub"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
