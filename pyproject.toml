[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ninetools"
version = "0.1.0"
description = "Bitcoin price lookup, RPN calculator and Ford-Johnson merge-insertion sort"
requires-python = ">=3.10"
dependencies = []
keywords = ["rpn", "calculator", "merge-insertion", "ford-johnson", "bitcoin", "exchange-rate"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
btc = "ninetools.exchange:main"
rpn = "ninetools.rpn:main"
pmergeme = "ninetools.pmergeme:main"

[tool.hatch.build.targets.wheel]
packages = ["ninetools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
