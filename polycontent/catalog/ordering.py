"""Group ordering policies.

Posts use display order: pinned first, pinned posts by ascending priority
(posts with a priority before those without), then newest first. Ties on
the publish timestamp fall back to the canonical id so the order is fully
reproducible.

Specification pages are ordered by canonical id.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time, timezone
from typing import Any, Callable, Dict, Optional, Tuple, Union

from polycontent.variants.types import VariantGroup

GroupSortKey = Callable[[VariantGroup], Tuple[Any, ...]]


def publish_timestamp(value: Optional[Union[datetime, date, str]]) -> float:
    """Comparable POSIX timestamp for a publish date.

    Naive values are taken as UTC; a missing or unparsable value maps to
    negative infinity so it sorts after every dated document under newest-first.
    """
    if value is None or value == "":
        return -math.inf
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return -math.inf
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()


def display_sort_key(group: VariantGroup) -> Tuple[Any, ...]:
    data = group.default_entry.data
    pinned = bool(getattr(data, "pinned", False))
    priority = getattr(data, "priority", None)
    newest_first = -publish_timestamp(getattr(data, "published", None))

    if pinned:
        if priority is not None:
            rank: Tuple[Any, ...] = (0, 0, priority)
        else:
            rank = (0, 1, 0)
    else:
        # Priority only applies among pinned posts
        rank = (1, 0, 0)
    return rank + (newest_first, group.canonical_id)


def canonical_id_sort_key(group: VariantGroup) -> Tuple[Any, ...]:
    return (group.canonical_id,)


ORDERINGS: Dict[str, GroupSortKey] = {
    "display": display_sort_key,
    "canonical": canonical_id_sort_key,
}


__all__ = [
    "ORDERINGS",
    "GroupSortKey",
    "publish_timestamp",
    "display_sort_key",
    "canonical_id_sort_key",
]
