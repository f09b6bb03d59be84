"""
Configuration file path resolution.

This module decides which file a loader should read: either an explicit path
given by the caller, or one of an ordered list of fallback candidates. It
also builds conventional fallback lists for an application name.
"""

import os
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union
import logging

from ..config.errors import ConfigInaccessibleError, ConfigNotFoundError
from ..models.settings import LoaderSettings


logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

DEFAULT_FILENAMES = [
    'config.yaml',
    'config.yml',
    'config.json'
]


def find_config(path: Optional[PathLike], search_paths: Iterable[PathLike] = ()) -> str:
    """
    Determine the configuration file to use.

    A non-empty ``path`` must exist and is returned unchanged; the fallbacks are
    not consulted. With an empty ``path`` every candidate in ``search_paths`` is
    stat'ed in order and the last one that exists wins, so lists should be
    ordered from least to most preferred.

    Args:
        path: Explicit configuration file path, or empty/None to search
        search_paths: Ordered fallback candidates

    Returns:
        The resolved configuration file path

    Raises:
        ConfigInaccessibleError: If ``path`` is given but cannot be stat'ed
        ConfigNotFoundError: If no fallback candidate can be stat'ed
    """
    if path:
        path = os.fspath(path)
        try:
            os.stat(path)
        except OSError as e:
            raise ConfigInaccessibleError(path, e) from e
        logger.debug(f"Using explicit configuration file: {path}")
        return path

    found = None
    for candidate in search_paths:
        candidate = os.fspath(candidate)
        try:
            os.stat(candidate)
        except OSError as e:
            logger.debug(f"Skipping configuration candidate {candidate}: {e}")
            continue

        # Keep scanning: a later candidate overrides an earlier one.
        found = candidate

    if found is None:
        raise ConfigNotFoundError()

    logger.debug(f"Resolved configuration file from search paths: {found}")
    return found


def default_search_paths(app_name: str,
                         filenames: Optional[Sequence[str]] = None,
                         include_cwd: bool = True) -> List[str]:
    """
    Build the conventional fallback list for an application.

    Locations are ordered least specific first, matching the last-match-wins
    rule of ``find_config``:

    1. ``/etc/<app_name>/``
    2. ``$XDG_CONFIG_HOME/<app_name>/`` (``~/.config/<app_name>/`` if unset)
    3. ``~/.<app_name>/``
    4. the current working directory, if ``include_cwd``

    Args:
        app_name: Application name used as the directory name
        filenames: File names tried in each location, in order
        include_cwd: Whether to add the working directory last

    Returns:
        List of candidate file paths as strings
    """
    if not app_name:
        raise ValueError("app_name is required to build search paths")

    names = list(filenames) if filenames else list(DEFAULT_FILENAMES)

    xdg_home = os.environ.get('XDG_CONFIG_HOME')
    config_home = Path(xdg_home) if xdg_home else Path.home() / '.config'

    directories = [
        Path('/etc') / app_name,
        config_home / app_name,
        Path.home() / f'.{app_name}',
    ]
    if include_cwd:
        directories.append(Path.cwd())

    return [str(directory / name) for directory in directories for name in names]


def candidate_paths(settings: LoaderSettings) -> List[str]:
    """
    Build the full fallback list described by loader settings.

    Args:
        settings: Loader settings

    Returns:
        Default locations for ``settings.app_name`` (if set) followed by the
        explicit ``settings.search_paths``, least preferred first
    """
    candidates: List[str] = []
    if settings.app_name:
        candidates.extend(default_search_paths(
            settings.app_name,
            filenames=settings.filenames,
            include_cwd=settings.include_cwd
        ))
    candidates.extend(settings.search_paths)
    return candidates
