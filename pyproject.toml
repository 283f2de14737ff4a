[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glasscockpit"
version = "0.0.1"
description = "Glass cockpit gauge components (attitude, heading, altitude, dials, bar graphs) drawn onto a recording canvas"
requires-python = ">=3.10"
dependencies = []
keywords = ["avionics", "glass cockpit", "pfd", "gauges", "flight instruments"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["glasscockpit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
