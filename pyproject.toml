[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simulab"
version = "1.0.0"
description = "Small interactive simulators and data-structure exercises: traffic light, memory pool, linked list, phonebook and dynamic arrays."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "simulation",
    "traffic-light",
    "memory-pool",
    "linked-list",
    "state-machine",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Italian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
simulab-traffic-light = "simulab.traffic_console:main"
simulab-memory-pool = "simulab.memory_pool:main"
simulab-linked-list = "simulab.linked_list:main"
simulab-phonebook = "simulab.phonebook:main"
simulab-arrays = "simulab.arrays:main"

[tool.hatch.build.targets.wheel]
packages = ["simulab"]

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
