"""
Validation outcome types.

Validators come in two shapes: single-error validators return ``None`` or one
exception, multi-error validators return a possibly empty sequence of
violations. ``outcome_from`` folds both shapes into one tagged union so the
loader handles them the same way.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, List, Union


@dataclass(frozen=True)
class Ok:
    """Validation passed."""

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def errors(self) -> List[Any]:
        return []


@dataclass(frozen=True)
class SingleError:
    """
    Validation failed with exactly one error.

    Attributes:
        error: The violation reported by the validator
    """
    error: Any

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def errors(self) -> List[Any]:
        return [self.error]


@dataclass(frozen=True)
class MultiError:
    """
    Validation failed with a collection of errors.

    Attributes:
        violations: Every violation, in the order the validator produced them
    """
    violations: List[Any] = field(default_factory=list)

    @property
    def is_ok(self) -> bool:
        return not self.violations

    @property
    def errors(self) -> List[Any]:
        return self.violations


ValidationOutcome = Union[Ok, SingleError, MultiError]


def outcome_from(result: Any) -> ValidationOutcome:
    """
    Convert a validator's return value into a ValidationOutcome.

    Args:
        result: ``None``, a single exception or message, any iterable of
            violations (list, tuple, deque, set, generator), or an existing
            outcome

    Returns:
        The matching outcome. Empty collections map to ``Ok``.

    Raises:
        TypeError: If ``result`` is none of the above (e.g. a bool or a mapping)
    """
    if result is None:
        return Ok()

    if isinstance(result, (Ok, SingleError, MultiError)):
        if not result.errors:
            return Ok()
        return result

    if isinstance(result, BaseException):
        return SingleError(result)

    if isinstance(result, str):
        return SingleError(result) if result else Ok()

    if isinstance(result, Iterable) and not isinstance(result, (Mapping, bytes)):
        violations = result if isinstance(result, list) else list(result)
        if not violations:
            return Ok()
        return MultiError(violations)

    raise TypeError(f"Unsupported validator result type: {type(result).__name__}")
