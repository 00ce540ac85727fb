[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "restodesk"
version = "0.1.0"
description = "A small console desk for restaurant table reservations, orders and order reports."
requires-python = ">=3.10"
dependencies = []
keywords = ["restaurant", "reservations", "orders", "console", "menu"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Romanian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
restodesk = "restodesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["restodesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
