[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wireview"
version = "0.1.0"
description = "Interactive wireframe viewer for height-map (.fdf) files"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pygame",
]
keywords = ["wireframe", "heightmap", "fdf", "isometric", "viewer", "3d"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wireview = "wireview.app:main"

[tool.hatch.build.targets.wheel]
packages = ["wireview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
