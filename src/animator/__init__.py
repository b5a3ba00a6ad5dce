"""Frame-driven animation curves."""

__version__ = "0.1.0"
