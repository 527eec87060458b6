[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vlcarchiver"
version = "0.1.0"
description = "A small text archiver using a fixed variable-length prefix code"
requires-python = ">=3.10"
dependencies = []
keywords = ["archiver", "compression", "variable-length code", "prefix code", "vlc"]
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
    "Topic :: System :: Archiving :: Compression",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vlcarchiver = "vlcarchiver.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vlcarchiver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
