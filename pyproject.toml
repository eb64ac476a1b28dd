[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labprojects"
version = "0.1.0"
description = "Sorting algorithms with a timing comparison, a console library manager and a console card game"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "algorithms", "library", "card game", "console", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labprojects-gnome-trace = "labprojects.sorting:main"
labprojects-benchmark = "labprojects.benchmark:main"
labprojects-library = "labprojects.library_app:main"
labprojects-cards = "labprojects.cardgame:main"

[tool.hatch.build.targets.wheel]
packages = ["labprojects"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
