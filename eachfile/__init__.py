"""Scan directories of test inputs and derive unique identifiers from file names."""

__version__ = "0.3.5"
__all__ = ["naming", "tree"]