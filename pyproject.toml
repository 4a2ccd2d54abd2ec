[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simpledes"
version = "0.1.0"
description = "Simplified DES (S-DES): encrypt an 8-bit block with a 10-bit key"
requires-python = ">=3.10"
dependencies = []
keywords = ["s-des", "simplified des", "cipher", "cryptography", "teaching"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
simpledes = "simpledes.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["simpledes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
