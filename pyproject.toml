[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "classkit"
version = "0.1.0"
description = "Small teaching classes: calendar dates, intervals, big integers, fixed-size arrays, a plain HTTP client and a directory scanner."
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "dates", "interval arithmetic", "big integer", "arrays", "http", "directory"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
classkit-date-demo = "classkit.date_demo:main"
classkit-interval-calc = "classkit.interval_calc:main"
classkit-bigint-demo = "classkit.bigint_demo:main"
classkit-array-demo = "classkit.arrays:main"
classkit-httpget = "classkit.httpget:main"
classkit-dirscan = "classkit.dirscan:main"

[tool.setuptools.packages.find]
include = ["classkit*"]

[tool.pytest.ini_options]
addopts = "-ra"
