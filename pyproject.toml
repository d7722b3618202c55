[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iptskit"
version = "0.1.0"
description = "Touch heatmap processing helpers and a uinput device writer for IPTS touchscreens"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["ipts", "touchscreen", "heatmap", "convolution", "uinput", "hid"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["iptskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
