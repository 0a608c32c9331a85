[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "digitcode"
version = "0.1.0"
description = "Model of a multi-cell input widget for fixed-length codes such as TOTP, with profiles, focus handling and control flags"
requires-python = ">=3.10"
keywords = ["totp", "otp", "digit code", "input", "widget", "one-time password"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]
dependencies = [
    "regex",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["digitcode"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
