[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "buraq"
version = "0.0.16"
description = "Application support toolkit: opened-file store, XML configuration, theme selection, background tasks, HTTP download and an update helper."
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["configuration", "updater", "themes", "sqlite", "plugins"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
buraq-updater = "buraq.updater:main"

[tool.hatch.build.targets.wheel]
packages = ["buraq"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
