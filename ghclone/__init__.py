"""ghclone - Batch-clone repositories from a GitHub-style JSON listing."""

from ghclone.cloner import RepoCloner
from ghclone.extract import extract_descriptors
from ghclone.models.descriptor import RepoDescriptor

__version__ = "0.1.0"
__all__ = ["RepoCloner", "RepoDescriptor", "extract_descriptors"]
