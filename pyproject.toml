[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coinrunner"
version = "0.1.0"
description = "A side-scrolling platformer where coins drain away while you run: it costs money to be alive."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "platformer", "side-scroller", "pygame", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
coinrunner = "coinrunner.app:main"

[tool.hatch.build.targets.wheel]
packages = ["coinrunner"]

[tool.pytest.ini_options]
addopts = "-ra"
