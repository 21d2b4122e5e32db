[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shopsys"
version = "0.1.0"
description = "A small console shopping system with customers, sellers, a product catalog and receipts"
requires-python = ">=3.10"
dependencies = []
keywords = ["shopping", "cart", "catalog", "point-of-sale", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shopsys = "shopsys.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shopsys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
