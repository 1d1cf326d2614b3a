[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spellkit"
version = "0.1.0"
description = "A hash-table spell checker with small queue, stack and blood-type inheritance utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["spell-checker", "dictionary", "hash-table", "queue", "stack", "inheritance"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
speller = "spellkit.speller:main"
inheritance = "spellkit.inheritance:main"
queue-demo = "spellkit.fifo:main"
stack-demo = "spellkit.stacks:main"
stack-array-demo = "spellkit.stacks:array_demo"

[tool.hatch.build.targets.wheel]
packages = ["spellkit"]

[tool.pytest.ini_options]
addopts = "-ra"
