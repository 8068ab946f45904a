"""Anchor identifiers for section headings."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from bs4.element import Tag

from .constants import EMPTY_SLUG_FALLBACK
from .slugify import generate_slug

logger = logging.getLogger(__name__)

Hierarchy = tuple[Tag, ...]


class AnchorAllocator:
    """Allocate DOM-unique ids for headings in one document.

    The first heading with a given slug keeps the short id. When the slug is
    seen again, the earlier heading is re-keyed with its parent's id as a
    prefix (when it has a parent) and the new heading is qualified the same
    way, so duplicates under different chapters read ``getting-started-setup``
    and ``deployment-setup``. Keys that would still collide get the first free
    numeric suffix (``-2``, ``-3``, ...).

    The registry maps every allocated id to the hierarchy that produced it and
    lives only as long as the allocator; create one per rendered document.
    """

    def __init__(self) -> None:
        self._registry: dict[str, Hierarchy] = {}

    def __contains__(self, anchor_id: str) -> bool:
        return anchor_id in self._registry

    @property
    def registry(self) -> dict[str, Hierarchy]:
        return dict(self._registry)

    def allocate(self, hierarchy: Sequence[Tag]) -> str:
        """Return a unique id for the innermost heading of `hierarchy`.

        May change the id of a previously allocated heading whose slug
        collides with the current one.

        Args:
            hierarchy: Open headings from the outermost chapter down to the
                current heading.

        Returns:
            str: Identifier to assign to ``hierarchy[-1]``.

        Raises:
            ValueError: If `hierarchy` is empty.
        """
        if not hierarchy:
            raise ValueError("Cannot allocate an anchor for an empty hierarchy")

        hierarchy = tuple(hierarchy)
        base = generate_slug(hierarchy[-1].get_text()) or EMPTY_SLUG_FALLBACK

        if base not in self._registry:
            self._registry[base] = hierarchy
            return base

        previous = self._registry[base]
        if len(previous) > 1:
            del self._registry[base]
            rekeyed = self._unique(f"{_parent_id(previous)}-{base}")
            previous[-1]["id"] = rekeyed
            self._registry[rekeyed] = previous
            logger.debug("Re-keyed anchor %r to %r", base, rekeyed)

        if len(hierarchy) > 1:
            anchor_id = self._unique(f"{_parent_id(hierarchy)}-{base}")
        else:
            anchor_id = self._unique(base)

        self._registry[anchor_id] = hierarchy
        return anchor_id

    def _unique(self, candidate: str) -> str:
        if candidate not in self._registry:
            return candidate

        suffix = 2
        while f"{candidate}-{suffix}" in self._registry:
            suffix += 1
        return f"{candidate}-{suffix}"


def _parent_id(hierarchy: Hierarchy) -> str:
    return hierarchy[-2].get("id") or EMPTY_SLUG_FALLBACK
