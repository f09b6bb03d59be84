"""
confload - Core Package

Locate a configuration file, read it, unmarshal it into a caller-owned object
and validate the result.
"""

from .config import (
    ConfigError,
    ConfigNotFoundError,
    ConfigInaccessibleError,
    ConfigReadError,
    ConfigUnmarshalError,
    ConfigValidationError,
    ConfigLoader,
    LoadResult,
    read_config,
    read_found_config,
    load_config
)
from .tools import find_config, default_search_paths

__version__ = "0.1.0"
__author__ = "confload Team"
