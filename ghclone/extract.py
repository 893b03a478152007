"""Find repository descriptors in a decoded JSON document.

Three shapes are understood, tried in order:

1. A single repository object, e.g. a metadata file saved by a previous run.
2. A flat list of repository objects (``/users/{user}/repos``).
3. A search-style envelope with the list under ``items``
   (``/search/repositories``).
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from ghclone.errors import FormatError
from ghclone.models.descriptor import RepoDescriptor

logger = logging.getLogger(__name__)

ShapeMatcher = Callable[[Any], list[Any] | None]

# Lookup failures while probing mean "not this shape"
PROBE_ERRORS = (KeyError, IndexError, TypeError, AttributeError)


def _is_repo(value: Any) -> bool:
    return isinstance(value, dict) and "clone_url" in value


def single_object(doc: Any) -> list[Any] | None:
    """Match a document that is itself one repository."""
    if _is_repo(doc):
        return [doc]
    return None


def flat_list(doc: Any) -> list[Any] | None:
    """Match a list whose first element is a repository."""
    if isinstance(doc, list) and _is_repo(doc[0]):
        return doc
    return None


def items_envelope(doc: Any) -> list[Any] | None:
    """Match an object holding a repository list under ``items``."""
    items = doc["items"]
    if isinstance(items, list) and _is_repo(items[0]):
        return items
    return None


SHAPE_MATCHERS: tuple[ShapeMatcher, ...] = (single_object, flat_list, items_envelope)


def find_fragments(doc: Any) -> list[Any]:
    """Return the raw repository fragments from the first matching shape."""
    for matcher in SHAPE_MATCHERS:
        try:
            fragments = matcher(doc)
        except PROBE_ERRORS:
            continue
        if fragments is not None:
            logger.debug(f"JSON matched shape '{matcher.__name__}' ({len(fragments)} entries)")
            return fragments
    raise FormatError("not sure how to find items in that JSON")


def extract_descriptors(doc: Any) -> list[RepoDescriptor]:
    """Normalize a decoded JSON document into repository descriptors."""
    return [RepoDescriptor.from_fragment(fragment) for fragment in find_fragments(doc)]
