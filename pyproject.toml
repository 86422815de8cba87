[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pomodoro-timer"
version = "0.1.0"
description = "A Pomodoro timer with short and long breaks, configurable durations and per-mode stylesheets."
requires-python = ">=3.10"
dependencies = []
keywords = ["pomodoro", "timer", "productivity", "focus", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pomodoro-timer = "pomodoro_timer.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["pomodoro_timer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
