"""Shared utilities for aletheia."""

from aletheia.util.logging import setup_logging

__all__ = ["setup_logging"]
