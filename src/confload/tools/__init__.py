"""
Filesystem helpers for confload.

This module contains the path resolution used to locate configuration files.
"""

from .path_resolver import find_config, default_search_paths, candidate_paths

__all__ = ['find_config', 'default_search_paths', 'candidate_paths']
