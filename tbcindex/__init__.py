"""Models, validation and encoding helpers for a TBC blockchain indexer API."""

__version__ = "0.1.0"