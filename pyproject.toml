[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starprompt"
version = "0.33.0"
description = "Building blocks for an informative cross-shell prompt: tool versions, project versions, repository state, clock, session and layout helpers."
requires-python = ">=3.11"
keywords = ["prompt", "shell", "bash", "fish", "zsh", "git"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]
dependencies = [
    "pyyaml",
    "regex",
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["starprompt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
