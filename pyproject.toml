[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamepad-events"
version = "0.1.0"
description = "Gamepad event model, cached input state and controller mapping helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["gamepad", "joystick", "input", "events", "xinput", "sdl"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gamepad-controllerdb = "gamepad_events.controllerdb:main"

[tool.hatch.build.targets.wheel]
packages = ["gamepad_events"]

[tool.pytest.ini_options]
addopts = "-ra"
