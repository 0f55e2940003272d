[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enigmacrack"
version = "0.1.0"
description = "A three-rotor Enigma machine simulator with brute-force key recovery"
requires-python = ">=3.10"
dependencies = []
keywords = ["enigma", "cipher", "cryptanalysis", "brute-force", "rotor-machine"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
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

[project.scripts]
enigma-encrypt = "enigmacrack.encrypt_cli:main"
enigma-decrypt = "enigmacrack.decrypt_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["enigmacrack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
