"""
Settings model for configuring a ConfigLoader.

Applications usually describe where their configuration may live once, at
startup. LoaderSettings captures that description and validates it before any
file lookup happens.
"""

from typing import List, Optional
import re

from pydantic import BaseModel, Field, field_validator


class LoaderSettings(BaseModel):
    """
    Where and how a ConfigLoader looks for configuration files.

    Attributes:
        app_name: Application name used to build default search locations
        filenames: Candidate file names tried in each search location
        search_paths: Explicit fallback candidates, least preferred first
        config_path: Explicit configuration file, bypasses the fallback search
        include_cwd: Whether the working directory is searched last
    """

    app_name: Optional[str] = Field(None, description="Application name for default locations")
    filenames: List[str] = Field(
        default_factory=lambda: ['config.yaml', 'config.yml', 'config.json'],
        description="Candidate configuration file names"
    )
    search_paths: List[str] = Field(default_factory=list, description="Fallback candidate paths")
    config_path: Optional[str] = Field(None, description="Explicit configuration file path")
    include_cwd: bool = Field(True, description="Search the working directory")

    @field_validator('app_name')
    @classmethod
    def validate_app_name(cls, v: Optional[str]) -> Optional[str]:
        """Application names become directory names, so keep them path-safe."""
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("app_name cannot be empty")
        if not re.match(r'^[A-Za-z0-9._-]+$', v):
            raise ValueError(f"app_name contains invalid characters: {v}")
        return v

    @field_validator('filenames')
    @classmethod
    def validate_filenames(cls, v: List[str]) -> List[str]:
        """Ensure file names are bare names, not paths."""
        if not v:
            raise ValueError("At least one configuration file name must be specified")
        for name in v:
            if not name or '/' in name or '\\' in name:
                raise ValueError(f"Invalid configuration file name: {name!r}")
        return v

    @field_validator('search_paths')
    @classmethod
    def validate_search_paths(cls, v: List[str]) -> List[str]:
        """Drop blank entries, keep order."""
        return [p for p in v if p and p.strip()]
