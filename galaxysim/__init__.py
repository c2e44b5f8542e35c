"""Density models, Simpson's-rule mass integration and star sampling for spherical stellar systems."""

__version__ = "0.1.0"
__all__ = ["density", "integration", "sampling"]