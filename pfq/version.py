"""Central version declaration for petfinder-quicksearch.

Update this file when cutting a new release tag. Keep semantic versioning.
"""

__version__ = "0.3.0"

__all__ = ["__version__"]
