[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "feedmerge"
version = "0.1.0"
description = "RFC 822 date handling and RSS 0.91 item parsing for feed processing"
requires-python = ">=3.10"
dependencies = []
keywords = ["rss", "feed", "rfc822", "date", "syndication"]
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
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["feedmerge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
