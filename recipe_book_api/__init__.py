"""
Top-level package for the Recipe Book.

The HTTP service lives in ``app``; the Python client and form
controller used by the command line front end live in ``client``.
"""

__all__ = []
