"""Command-line interface for socialsheet."""
