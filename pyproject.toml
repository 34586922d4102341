[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unifistats"
version = "0.1.0"
description = "Turn UniFi controller measurements into DogStatsD gauges, counts and events."
requires-python = ">=3.10"
dependencies = []
keywords = ["unifi", "datadog", "dogstatsd", "statsd", "metrics", "monitoring", "network"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
    "Topic :: System :: Networking :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["unifistats"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
