"""Local full-text search over files listed in a JSON configuration."""

__version__ = "1.0.0"

__all__ = ["converter", "inverted_index", "search_server", "cli"]