[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pustaka"
version = "0.1.0"
description = "A small JSON HTTP API for managing a catalogue of books"
requires-python = ">=3.10"
keywords = ["books", "rest", "api", "crud", "flask", "sqlalchemy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
    "sqlalchemy",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pustaka = "pustaka.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pustaka"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
