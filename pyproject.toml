[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hcsbench"
version = "0.1.0"
description = "Benchmark console for sequential and parallel array summation, with timing statistics, speed-up figures and small on-disk repositories"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "parallel", "threads", "speedup", "efficiency", "statistics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hcsbench = "hcsbench.app:main"

[tool.hatch.build.targets.wheel]
packages = ["hcsbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
