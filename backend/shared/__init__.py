"""Shared utilities package for configuration and logging setup."""

from .config import configure_logging, get_env_var, get_search_index

__all__ = [
    "configure_logging",
    "get_env_var",
    "get_search_index",
]
