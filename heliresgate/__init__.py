"""Terminal helicopter rescue game with concurrently moving batteries and rockets."""

__version__ = "0.1.0"
__all__ = ["__version__"]