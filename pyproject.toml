[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shelltools"
version = "0.1.0"
description = "Small command-line utilities: comm, tail, fortune, cal and ls work-alikes, an ASCII table and a random text generator"
requires-python = ">=3.10"
dependencies = []
keywords = ["comm", "tail", "fortune", "cal", "ls", "ascii", "command-line", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
commr = "shelltools.comm:main"
tailr = "shelltools.tail:main"
fortuner = "shelltools.fortune:main"
calr = "shelltools.cal:main"
lsr = "shelltools.ls:main"
ascii = "shelltools.ascii:main"
biggie = "shelltools.biggie:main"

[tool.hatch.build.targets.wheel]
packages = ["shelltools"]

[tool.pytest.ini_options]
addopts = "-ra"
