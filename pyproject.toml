[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "innotools"
version = "0.1.0"
description = "Checksums, block hashes and the ARC4 cipher used by Inno Setup installers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "inno-setup",
    "installer",
    "checksum",
    "adler32",
    "crc32",
    "md5",
    "sha1",
    "sha256",
    "arc4",
    "rc4",
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
    "Topic :: System :: Archiving :: Packaging",
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["innotools"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
