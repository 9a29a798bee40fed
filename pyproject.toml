[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sfxdisabler"
version = "1.0.0"
description = "Disable or restore note hit effects and stage background animations in a game installation"
requires-python = ">=3.10"
dependencies = []
keywords = ["rhythm game", "effects", "background animation", "tkinter"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.gui-scripts]
sfxdisabler = "sfxdisabler.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sfxdisabler"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
