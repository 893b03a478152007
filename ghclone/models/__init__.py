"""Data models for ghclone."""

from ghclone.models.config import CloneConfig, ConfigDefaults, RepoPaths
from ghclone.models.descriptor import RepoDescriptor
from ghclone.models.result import CloneResult, CloneStatus

__all__ = [
    # Repository data
    "RepoDescriptor",
    # Run configuration
    "CloneConfig",
    "ConfigDefaults",
    "RepoPaths",
    # Outcomes
    "CloneResult",
    "CloneStatus",
]
