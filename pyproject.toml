[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "omnikin"
version = "0.1.0"
description = "Inverse kinematics and odometry for omni-wheel mobile robots with evenly spaced wheels"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "kinematics", "odometry", "omni-wheel", "mobile-robot"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
omnikin-demo = "omnikin.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["omnikin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
