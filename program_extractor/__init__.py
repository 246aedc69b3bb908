"""Conference program extractor - agenda and speaker records from program text."""

__version__ = "0.1.0"
