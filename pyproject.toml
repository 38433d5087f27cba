[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "promlite"
version = "0.1.0"
description = "A small, dependency-free Prometheus metrics client: counters, gauges, histograms and text exposition."
requires-python = ">=3.10"
dependencies = []
keywords = ["prometheus", "metrics", "monitoring", "instrumentation", "exposition"]
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
    "Topic :: System :: Monitoring",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["promlite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
