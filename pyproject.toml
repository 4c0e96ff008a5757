[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsaworks"
version = "0.1.0"
description = "Classic data structures and algorithms: graphs, heaps, linked lists, queues and small math helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "graph", "heap", "linked-list", "queue"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsaworks-graph = "dsaworks.graph:main"

[tool.hatch.build.targets.wheel]
packages = ["dsaworks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
