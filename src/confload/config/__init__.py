"""
Configuration loading package for confload.

This package provides the find, read, unmarshal and validate pipeline along
with its error types and stock format adapters.
"""

from .errors import (
    ConfigError,
    ConfigNotFoundError,
    ConfigInaccessibleError,
    ConfigReadError,
    ConfigUnmarshalError,
    ConfigValidationError
)
from .loader import (
    ConfigLoader,
    LoadResult,
    read_config,
    read_found_config,
    load_config
)
from .formats import (
    unmarshal_yaml,
    unmarshal_json,
    unmarshaller_for,
    validate_model,
    model_errors
)

__all__ = [
    'ConfigError',
    'ConfigNotFoundError',
    'ConfigInaccessibleError',
    'ConfigReadError',
    'ConfigUnmarshalError',
    'ConfigValidationError',
    'ConfigLoader',
    'LoadResult',
    'read_config',
    'read_found_config',
    'load_config',
    'unmarshal_yaml',
    'unmarshal_json',
    'unmarshaller_for',
    'validate_model',
    'model_errors'
]
