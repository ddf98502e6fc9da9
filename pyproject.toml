[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spital"
version = "0.1.0"
description = "An in-memory hospital register of doctors, patients, consultations and prescriptions, with an interactive console menu."
requires-python = ">=3.10"
dependencies = []
keywords = ["hospital", "clinic", "patients", "doctors", "consultations", "prescriptions"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Romanian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spital = "spital.cli:main"
spital-demo = "spital.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["spital"]

[tool.pytest.ini_options]
addopts = "-ra"
