[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nbrtool"
version = "0.1.0"
description = "Convert textures, cubemaps and shaders into NBR (binary resource) files"
requires-python = ">=3.10"
keywords = ["nbr", "texture", "cubemap", "shader", "asset-conversion"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pillow",
]

[project.scripts]
nbr = "nbrtool.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nbrtool"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
