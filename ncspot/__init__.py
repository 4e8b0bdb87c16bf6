"""Media models and share-link parsing for a terminal music streaming client."""

__version__ = "0.1.0"