[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "salarysplit"
version = "0.1.0"
description = "Divide a monthly salary across fixed and varying expenses and produce a PDF report"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["budget", "salary", "expenses", "finance", "pdf", "report"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
salarysplit-divider = "salarysplit.divider_service:main"
salarysplit-builder = "salarysplit.builder_service:main"
salarysplit-report = "salarysplit.report_service:main"
salarysplit-hub = "salarysplit.hub:main"
salarysplit-view = "salarysplit.view_service:main"

[tool.hatch.build.targets.wheel]
packages = ["salarysplit"]

[tool.hatch.build.targets.sdist]
include = ["salarysplit", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
