[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "forkcheck"
version = "0.1.0"
description = "A small unit-check runner that reports OK, KO or crash results, with the string helpers and printf-style formatter it checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "unit-test", "runner", "printf", "atoi", "itoa"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing :: Unit",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
forkcheck = "forkcheck.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["forkcheck"]

[tool.pytest.ini_options]
addopts = "-ra"
