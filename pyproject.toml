[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "konoparse"
version = "0.1.0"
description = "Tokenizer, quote handling and variable expansion for a small interactive shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "tokenizer", "parser", "quoting", "environment"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["konoparse"]

[tool.pytest.ini_options]
addopts = "-ra"
