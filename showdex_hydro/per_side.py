"""Per-side record coercer (``auth/p1/p2/p3/p4``)."""

from __future__ import annotations

from typing import Any, List, Mapping

from .model import PER_SIDE_SLOTS, PerSide
from .primitives import (
    ARRAY_DELIMITER,
    PER_SIDE_DELIMITER,
    contains_unescaped,
    dehydrate_array,
    dehydrate_boolean,
    hydrate_array,
    hydrate_boolean,
    split_unescaped,
)


def hydrate_per_side(token: Any, delimiter: str = PER_SIDE_DELIMITER, array_delimiter: str = ARRAY_DELIMITER) -> PerSide:
    """Hydrate e.g. ``"y/n/y,n/n/y"`` into a :class:`PerSide`.

    Sub-tokens holding an (unescaped) array delimiter become tuples, all others
    booleans. Missing or empty sub-tokens leave their slot ``None``.
    """

    if not isinstance(token, str) or not token:
        return PerSide()

    parts = split_unescaped(token, delimiter)[: len(PER_SIDE_SLOTS)]
    values = {}
    for slot, part in zip(PER_SIDE_SLOTS, parts):
        if not part:
            continue
        if contains_unescaped(part, array_delimiter):
            values[slot] = tuple(hydrate_array(part, array_delimiter))
        else:
            values[slot] = hydrate_boolean(part)
    return PerSide(**values)


def _slot_value(record: Any, slot: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(slot)
    return getattr(record, slot, None)


def dehydrate_per_side(record: Any, delimiter: str = PER_SIDE_DELIMITER, array_delimiter: str = ARRAY_DELIMITER) -> str:
    parts: List[str] = []
    for slot in PER_SIDE_SLOTS:
        value = _slot_value(record, slot)
        if value is None:
            parts.append("")
        elif isinstance(value, (list, tuple)):
            # terminated so one-item and empty arrays don't read back as booleans
            parts.append(dehydrate_array(value, array_delimiter, terminate=True))
        else:
            parts.append(dehydrate_boolean(value))

    while parts and not parts[-1]:
        parts.pop()
    return delimiter.join(parts)
