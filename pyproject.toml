[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mwckit"
version = "7.5.0"
description = "Encoding and cryptographic primitives for MimbleWimble Coin wallets: base32, base58check, BLAKE2b and ChaCha20-Poly1305"
requires-python = ">=3.10"
dependencies = []
keywords = ["mimblewimble", "base32", "base58", "blake2b", "chacha20", "poly1305", "cryptography"]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mwckit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
