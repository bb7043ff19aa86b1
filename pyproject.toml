[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spherecast"
version = "0.1.0"
description = "A small real-time ray caster that shades a bouncing sphere under a rotating light"
requires-python = ">=3.10"
keywords = ["raycasting", "rendering", "phong", "sphere", "pygame", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
spherecast = "spherecast.app:main"

[tool.hatch.build.targets.wheel]
packages = ["spherecast"]

[tool.pytest.ini_options]
addopts = "-ra"
