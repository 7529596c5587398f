[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taxengine"
version = "0.1.0"
description = "Cascading tax calculation, inclusive-price back-solving and ledger entries in integer cents"
requires-python = ">=3.10"
dependencies = []
keywords = ["tax", "accounting", "ledger", "invoice", "gst", "vat"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
taxengine-demo = "taxengine.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["taxengine"]

[tool.pytest.ini_options]
addopts = "-ra"
