"""python-ianazone version."""

__version__ = "0.3.0"
