[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fbxdom"
version = "0.1.0"
description = "Object-level access to FBX 7.4 node trees: object metadata, object classification and property loaders"
requires-python = ">=3.10"
dependencies = []
keywords = ["fbx", "3d", "scene", "mesh", "material", "texture", "properties"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fbxdom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
