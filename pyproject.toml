[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lailusion"
version = "0.1.0"
description = "A side-scrolling runner where only the platforms of the chosen colour are solid"
requires-python = ">=3.10"
keywords = ["game", "runner", "platformer", "pygame", "arcade"]
classifiers = [
    "Development Status :: 4 - Beta",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lailusion = "lailusion.game:main"

[tool.hatch.build.targets.wheel]
packages = ["lailusion"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
