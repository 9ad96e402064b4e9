# src/aletheia/config.py

"""Centralized configuration for aletheia.

This module provides the constants used by the client and the command line
interface: the API host, header names, and transport defaults.
"""


class Config:
    """Application-wide configuration settings."""

    API_BASE_URL: str = "https://content.guardianapis.com"
    """Base URL for the Guardian content API."""

    API_KEY_HEADER: str = "api-key"
    """Header carrying the API key on every request."""

    API_KEY_ENV_VAR: str = "GUARDIAN_API_KEY"
    """Environment variable read by the CLI when --api-key is not given.

    The client itself never reads the environment; the key is always
    supplied programmatically.
    """

    DEFAULT_TIMEOUT: float = 10.0
    """Default timeout for HTTP requests in seconds."""

    MAX_PAGE_SIZE: int = 200
    """Largest page size accepted upstream. Not enforced locally."""
