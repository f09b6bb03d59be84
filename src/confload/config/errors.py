"""
Error types raised by the configuration loading pipeline.

Each error records the pipeline stage that failed and, where one exists, the
path of the configuration file involved. Underlying causes are attached with
exception chaining so callers can inspect ``__cause__``.
"""

from typing import List, Optional

from ..models.outcome import ValidationOutcome, MultiError


class ConfigError(Exception):
    """Base class for all configuration loading failures."""

    stage = "config"

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ConfigNotFoundError(ConfigError):
    """Raised when no explicit path was given and no fallback candidate exists."""

    stage = "locate"

    def __init__(self, message: str = "could not locate configuration file"):
        super().__init__(message)


class ConfigInaccessibleError(ConfigError):
    """Raised when an explicitly requested configuration file cannot be stat'ed."""

    stage = "stat"

    def __init__(self, path: str, cause: BaseException):
        super().__init__(f"could not stat configuration file {path}: {cause}", path)


class ConfigReadError(ConfigError):
    """Raised when the resolved configuration file cannot be read."""

    stage = "read"

    def __init__(self, path: str, cause: BaseException):
        super().__init__(f"unable to read configuration file {path}: {cause}", path)


class ConfigUnmarshalError(ConfigError):
    """Raised when the unmarshal function rejects the file contents."""

    stage = "unmarshal"

    def __init__(self, path: str, cause: BaseException):
        super().__init__(f"unable to unmarshal configuration file {path}: {cause}", path)


class ConfigValidationError(ConfigError):
    """
    Raised when a populated configuration object fails validation.

    Attributes:
        errors: Every violation reported by the validator, in the order produced
        outcome: The validation outcome the errors were taken from
    """

    stage = "validate"

    def __init__(self, path: Optional[str], outcome: ValidationOutcome):
        self.outcome = outcome
        self.errors: List = outcome.errors
        if len(self.errors) == 1:
            detail = str(self.errors[0])
        else:
            detail = "; ".join(str(e) for e in self.errors)
            detail = f"{len(self.errors)} errors: {detail}"
        super().__init__(f"invalid configuration file {path}: {detail}", path)

    @classmethod
    def from_errors(cls, path: Optional[str], errors: List) -> "ConfigValidationError":
        """Build an error from a list of violations."""
        return cls(path, MultiError(errors))
