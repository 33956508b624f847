[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "officialdom"
version = "0.1.0"
description = "Bureaucrats with grades, forms that need signing, and the paperwork to execute them"
requires-python = ">=3.10"
dependencies = []
keywords = ["bureaucrat", "forms", "exceptions", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
officialdom = "officialdom.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["officialdom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
