[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rawacpi"
version = "0.0.2"
description = "Parse and build raw ACPI system description tables."
requires-python = ">=3.10"
dependencies = []
keywords = ["acpi", "firmware", "fadt", "facs", "dsdt", "sdt", "uefi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rawacpi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
