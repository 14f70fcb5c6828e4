[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "loadscale"
version = "0.1.0"
description = "Load-cell scale building blocks: framed serial protocol with CRC-16, HX711 decoding, Kalman filtering and LCD formatting"
requires-python = ">=3.10"
dependencies = []
keywords = ["load cell", "hx711", "scale", "kalman", "serial protocol", "crc16", "hd44780"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["loadscale"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
