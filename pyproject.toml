[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polykernels"
version = "0.1.0"
description = "Polyhedral benchmark kernels (stencils and medley) in NumPy with a small timing and array-dump harness"
requires-python = ">=3.10"
keywords = ["benchmark", "stencil", "polyhedral", "kernels", "numpy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Benchmark",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = ["numpy"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
polykernels = "polykernels.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["polykernels"]

[tool.pytest.ini_options]
addopts = "-ra"
