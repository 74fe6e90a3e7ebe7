"""Command-line interface for pledgebook."""
