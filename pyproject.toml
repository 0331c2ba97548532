[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mobilekit"
version = "0.1.0"
description = "Helpers for mobile Rust project tooling: paths, version parsing, reports, prompts, links and cargo command lines"
requires-python = ">=3.10"
dependencies = []
keywords = ["mobile", "cargo", "rustc", "build", "symlink", "version", "tooling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mobilekit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
