[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "webserv"
version = "0.1.0"
description = "A small poll-driven HTTP server that serves files and runs CGI scripts, with a load-testing client"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "cgi", "poll", "webserver", "load-testing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
webserv = "webserv.cli:main"
webserv-tester = "webserv.tester:main"

[tool.setuptools.packages.find]
include = ["webserv*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
