"""
Shared configuration module for the data abstraction layer.

Provides required environment variables, the search index name used by
the abstraction layer when no index is passed explicitly, and the logging
setup applications call once at startup (configure_logging).
"""

import os
import sys
import logging

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

# Search index queried when SEARCH_INDEX is not set
DEFAULT_SEARCH_INDEX = "firebase"


def configure_logging(level: int = logging.INFO) -> None:
    """
    Configure logging to send INFO and DEBUG to stdout, WARNING+ to stderr.

    Args:
        level: Minimum logging level (default: logging.INFO)
    """
    root_logger = logging.getLogger()

    # Clear any existing handlers to avoid duplicates
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Handler for INFO and DEBUG -> stdout
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(level)
    stdout_handler.addFilter(lambda record: record.levelno < logging.WARNING)
    stdout_handler.setFormatter(formatter)

    # Handler for WARNING and above -> stderr
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(formatter)

    root_logger.addHandler(stdout_handler)
    root_logger.addHandler(stderr_handler)


def get_search_index() -> str:
    """
    Get the search index name queried by the abstraction layer.

    Returns:
        str: Value of SEARCH_INDEX, or DEFAULT_SEARCH_INDEX when unset
    """
    return os.environ.get("SEARCH_INDEX") or DEFAULT_SEARCH_INDEX


def get_env_var(key: str) -> str:
    """
    Get a required environment variable or raise an error.

    Args:
        key: Environment variable name

    Returns:
        str: Environment variable value

    Raises:
        ValueError: If the environment variable is not set
    """
    value = os.getenv(key)
    if not value:
        raise ValueError(f"{key} not found in environment variables")
    return value
