"""Classic array algorithms: searching, rearranging and subarray problems."""

__version__ = "0.1.0"
__all__ = ["__version__"]