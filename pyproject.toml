[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "buup"
version = "0.23.0"
description = "Text transformers: encoders, decoders, hashes, formatters and minifiers with no external dependencies"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "text",
    "transform",
    "encoding",
    "hashing",
    "sha1",
    "sha256",
    "crc32",
    "url",
    "uuid",
    "sql",
    "xml",
    "slugify",
    "color",
]
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
    "Topic :: Utilities",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["buup"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
