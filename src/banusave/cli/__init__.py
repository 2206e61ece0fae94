"""Command-line interface for banusave."""
