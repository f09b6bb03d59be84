"""
Configuration loading pipeline.

This module ties path resolution to reading, unmarshalling and validating a
configuration file. The caller owns the configuration object and supplies the
functions that parse and check it; the loader only runs the stages in order
and reports which one failed.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Generic, Iterable, Optional, Type, TypeVar, Union
import logging

from pydantic import BaseModel

from .errors import (
    ConfigReadError,
    ConfigUnmarshalError,
    ConfigValidationError
)
from .formats import unmarshaller_for, validate_model
from ..models.outcome import SingleError, outcome_from
from ..models.settings import LoaderSettings
from ..tools.path_resolver import candidate_paths, find_config


logger = logging.getLogger(__name__)

T = TypeVar('T')
M = TypeVar('M', bound=BaseModel)

PathLike = Union[str, os.PathLike]
UnmarshalFunc = Callable[[bytes, T], None]
ValidateFunc = Callable[[T], Any]


@dataclass
class LoadResult(Generic[M]):
    """
    Result of loading a pydantic configuration model.

    Attributes:
        config: The populated and validated configuration
        config_path: Path of the configuration file that was read
    """
    config: M
    config_path: str


def read_config(path: Optional[PathLike],
                search_paths: Iterable[PathLike],
                target: T,
                unmarshal: UnmarshalFunc,
                validate: ValidateFunc) -> str:
    """
    Locate, read, unmarshal and validate a configuration file.

    If ``path`` is empty the file is searched for in ``search_paths``; see
    ``find_config`` for the resolution rules.

    Args:
        path: Explicit configuration file path, or empty/None to search
        search_paths: Ordered fallback candidates
        target: Configuration object populated in place
        unmarshal: Function that parses file bytes into ``target``
        validate: Function that checks the populated ``target``

    Returns:
        The path of the configuration file that was used

    Raises:
        ConfigNotFoundError: If no fallback candidate exists
        ConfigInaccessibleError: If the explicit path cannot be stat'ed
        ConfigReadError: If the file cannot be read
        ConfigUnmarshalError: If ``unmarshal`` fails
        ConfigValidationError: If ``validate`` reports violations
    """
    resolved = find_config(path, search_paths)
    read_found_config(resolved, target, unmarshal, validate)
    return resolved


def read_found_config(path: PathLike,
                      target: T,
                      unmarshal: UnmarshalFunc,
                      validate: ValidateFunc) -> None:
    """
    Read, unmarshal and validate a configuration file at a known path.

    A failed unmarshal may leave ``target`` partially populated; nothing is
    rolled back.

    Args:
        path: Configuration file path
        target: Configuration object populated in place
        unmarshal: Function that parses file bytes into ``target``
        validate: Function that checks the populated ``target``. It may return
            None, one exception, or a sequence of violations, or it may raise.

    Raises:
        ConfigReadError: If the file cannot be read
        ConfigUnmarshalError: If ``unmarshal`` fails
        ConfigValidationError: If ``validate`` reports violations
    """
    path = os.fspath(path)

    try:
        content = Path(path).read_bytes()
    except OSError as e:
        raise ConfigReadError(path, e) from e

    try:
        unmarshal(content, target)
    except Exception as e:
        raise ConfigUnmarshalError(path, e) from e

    _validate(path, target, validate)
    logger.info(f"Configuration loaded successfully from {path}")


def _validate(path: str, target: Any, validate: ValidateFunc) -> None:
    try:
        result = validate(target)
    except ConfigValidationError:
        raise
    except Exception as e:
        raise ConfigValidationError(path, SingleError(e)) from e

    # Lazy iterables run validator code here, and unsupported result types raise TypeError.
    try:
        outcome = outcome_from(result)
    except ConfigValidationError:
        raise
    except Exception as e:
        raise ConfigValidationError(path, SingleError(e)) from e

    if outcome.is_ok:
        return

    cause = outcome.error if isinstance(outcome, SingleError) else None
    if isinstance(cause, BaseException):
        raise ConfigValidationError(path, outcome) from cause
    raise ConfigValidationError(path, outcome)


class ConfigLoader(Generic[T]):
    """
    Reusable configuration loader.

    Binds an unmarshal function, a validate function and a fallback search list
    so an application can load its configuration with a single call.
    """

    def __init__(self,
                 unmarshal: UnmarshalFunc,
                 validate: ValidateFunc,
                 search_paths: Optional[Iterable[PathLike]] = None,
                 default_path: Optional[PathLike] = None):
        """
        Initialize the loader.

        Args:
            unmarshal: Function that parses file bytes into a target
            validate: Function that checks a populated target
            search_paths: Ordered fallback candidates, least preferred first
            default_path: Explicit path used when a call does not pass one
        """
        self.unmarshal = unmarshal
        self.validate = validate
        self.search_paths = list(search_paths or [])
        self.default_path = default_path
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @classmethod
    def from_settings(cls,
                      settings: LoaderSettings,
                      unmarshal: UnmarshalFunc,
                      validate: ValidateFunc) -> "ConfigLoader":
        """Create a loader whose search list and default path come from settings."""
        return cls(
            unmarshal,
            validate,
            search_paths=candidate_paths(settings),
            default_path=settings.config_path
        )

    def find_config(self, path: Optional[PathLike] = None) -> str:
        """Resolve the configuration file path without reading it."""
        return find_config(path or self.default_path, self.search_paths)

    def read_config(self, target: T, path: Optional[PathLike] = None) -> str:
        """
        Locate and load configuration into ``target``.

        Args:
            target: Configuration object populated in place
            path: Explicit path overriding the loader's default

        Returns:
            The path of the configuration file that was used
        """
        resolved = self.find_config(path)
        self.logger.debug(f"Reading configuration from {resolved}")
        self.read_found_config(target, resolved)
        return resolved

    def read_found_config(self, target: T, path: PathLike) -> None:
        """Load configuration into ``target`` from a path resolved elsewhere."""
        read_found_config(path, target, self.unmarshal, self.validate)


def load_config(model_cls: Type[M],
                path: Optional[PathLike] = None,
                search_paths: Iterable[PathLike] = (),
                validate: Optional[ValidateFunc] = None) -> LoadResult[M]:
    """
    Convenience function to load a pydantic configuration model.

    The file format is chosen from the resolved file's suffix (YAML or JSON).
    The model is instantiated with its defaults, so every field must have one.

    Args:
        model_cls: Pydantic model class describing the configuration
        path: Explicit configuration file path (optional)
        search_paths: Ordered fallback candidates
        validate: Extra validator; defaults to re-validating the model

    Returns:
        LoadResult holding the model instance and the path it was loaded from

    Raises:
        ConfigError: If any stage of the pipeline fails
    """
    resolved = find_config(path, search_paths)

    try:
        unmarshal = unmarshaller_for(resolved)
    except ValueError as e:
        raise ConfigUnmarshalError(resolved, e) from e

    config = model_cls()
    read_found_config(resolved, config, unmarshal, validate or validate_model)
    return LoadResult(config=config, config_path=resolved)
