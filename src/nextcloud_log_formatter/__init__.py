"""Reformat JSON-lines application logs into readable text files."""

__version__ = "0.1.0"
