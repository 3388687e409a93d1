"""Heat diffusion, Jacobi relaxation, perceptual colormaps and DCT image steganography."""

__version__ = "0.1.0"