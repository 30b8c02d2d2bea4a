[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mapt"
version = "1.0.0"
description = "Helpers for provisioning cloud test machines: spot selection, image references, networking defaults and kind port mappings"
requires-python = ">=3.10"
dependencies = [
    "jinja2",
]
keywords = ["cloud", "provisioning", "azure", "aws", "spot", "kind", "cloud-init"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["mapt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
