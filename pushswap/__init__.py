"""Two-stack integer sorting with a fixed instruction set, plus small string, byte and list helpers."""

__version__ = "1.0.0"