[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voyageplan"
version = "0.1.0"
description = "In-memory catalogue of travel offers with discounts, currency conversion and a registry of reservations"
requires-python = ">=3.10"
dependencies = []
keywords = ["travel", "reservation", "booking", "planning", "offers", "discounts", "currency"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["voyageplan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
