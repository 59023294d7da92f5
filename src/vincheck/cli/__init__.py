"""Command-line interface for vincheck."""
