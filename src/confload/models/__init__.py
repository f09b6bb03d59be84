"""
Data models for confload.

This module contains the validation outcome types and the loader settings model.
"""

from .outcome import Ok, SingleError, MultiError, ValidationOutcome, outcome_from
from .settings import LoaderSettings

__all__ = [
    'Ok',
    'SingleError',
    'MultiError',
    'ValidationOutcome',
    'outcome_from',
    'LoaderSettings'
]
