"""Weather map console tool: configuration, city locations and grid display."""

__version__ = "0.1.0"
__all__ = ["__version__"]