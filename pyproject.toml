[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cofftodef"
version = "1.0.0"
description = "Extract external symbols from COFF object files and generate a linker DEF file"
requires-python = ">=3.10"
dependencies = []
keywords = ["coff", "def", "linker", "exports", "symbols", "windows", "object-file"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cofftodef = "cofftodef.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cofftodef"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
