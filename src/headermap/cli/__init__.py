"""Command-line interface for headermap."""
