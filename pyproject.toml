[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hellostream"
version = "0.1.0"
description = "A small gRPC hello service in unary, server-streaming and client-streaming forms, each with an HTTP gateway"
requires-python = ">=3.10"
keywords = ["grpc", "streaming", "rpc", "gateway", "http", "flask"]
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
    "Topic :: System :: Distributed Computing",
    "Framework :: Flask",
]
dependencies = [
    "grpcio",
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hellostream-server = "hellostream.services:main"
hellostream-gateway = "hellostream.gateways:main"

[tool.hatch.build.targets.wheel]
packages = ["hellostream"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
