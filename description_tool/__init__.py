"""Product description generator tool for the Opal custom-tool protocol."""

__version__ = "1.0.0"
