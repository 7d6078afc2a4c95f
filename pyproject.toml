[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arraybench"
version = "0.1.0"
description = "Small timing benchmarks of array summation, quicksort and element-wise arithmetic, run on one thread or a thread pool"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "quicksort", "threads", "arrays", "timing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
arraybench-sum = "arraybench.summation:main"
arraybench-sort = "arraybench.quicksort:main"
arraybench-ops = "arraybench.elementwise:main"
arraybench-grid = "arraybench.grid:main"

[tool.hatch.build.targets.wheel]
packages = ["arraybench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
