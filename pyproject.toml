[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hpclab"
version = "0.1.0"
description = "Heat diffusion, Jacobi relaxation, perceptual colormaps and DCT image steganography"
requires-python = ">=3.10"
keywords = ["heat equation", "jacobi", "laplace", "colormap", "steganography", "dct"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hpclab-heat = "hpclab.heat:main"
hpclab-jacobi = "hpclab.jacobi:main"
hpclab-stegano = "hpclab.stegano:main"

[tool.hatch.build.targets.wheel]
packages = ["hpclab"]

[tool.pytest.ini_options]
addopts = "-ra"
