"""Command line interface for aletheia."""
