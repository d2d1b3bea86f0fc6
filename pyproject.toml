[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raitrace"
version = "0.1.0"
description = "Scene description, OBJ mesh loading, camera model and render settings for a path-traced Cornell box"
requires-python = ">=3.10"
keywords = ["raytracing", "path tracing", "3d", "rendering", "obj", "camera", "cornell box"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
raitrace = "raitrace.scenes:main"

[tool.hatch.build.targets.wheel]
packages = ["raitrace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
