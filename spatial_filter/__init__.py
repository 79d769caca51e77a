"""Host-side spatial filtering (Gaussian blur / Laplacian) for 8-bit grayscale images."""

__version__ = "1.0.0"
