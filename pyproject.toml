[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pustaka"
version = "0.1.0"
description = "A small JSON REST API for managing a catalogue of books."
requires-python = ">=3.10"
keywords = ["books", "rest", "api", "flask", "sqlalchemy", "crud"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
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
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
