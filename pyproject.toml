[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rmcontrol"
version = "0.1.0"
description = "Referee-system serial protocol, CRC checksums and operator client UI framing for competition robots"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "referee", "serial", "crc", "protocol", "hud", "ramp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rmcontrol"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
