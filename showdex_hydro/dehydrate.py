"""Dehydration: :class:`ShowdexSettings` -> compact settings string."""

from __future__ import annotations

from typing import Any, List, Optional

from . import __build_date__, __version__
from .header import HEADER_DELIMITER, build_header
from .model import ShowdexSettings, default_settings
from .per_side import dehydrate_per_side
from .primitives import (
    FIELD_DELIMITER,
    PAIR_DELIMITER,
    SECTION_DELIMITER,
    SUB_DELIMITER,
    dehydrate_array,
    dehydrate_boolean,
    dehydrate_value,
)
from .schema import ROOT_SCHEMA, SCHEMA_VERSION, SECTION_SCHEMAS, FieldSpec, SectionSchema


def encode_field(spec: FieldSpec, value: Any) -> str:
    """Inverse of :func:`showdex_hydro.hydrate.coerce_field`."""

    if spec.kind == "boolean":
        return dehydrate_boolean(value)
    if spec.kind == "array":
        return dehydrate_array(value)
    if spec.kind == "per_side":
        return dehydrate_per_side(value)
    return dehydrate_value(value)


def _changed_fields(schema: SectionSchema, current: Any, defaults: Any, separator: str) -> List[str]:
    out: List[str] = []
    for spec in schema.fields:
        if not spec.persisted:
            continue
        value = getattr(current, spec.name)
        if not spec.always_write and value == getattr(defaults, spec.name):
            continue
        out.append(f"{spec.code}{separator}{encode_field(spec, value)}")
    return out


def dehydrate_settings(settings: ShowdexSettings, *, defaults: Optional[ShowdexSettings] = None) -> str:
    """Dehydrate ``settings`` for storage.

    Only values differing from ``defaults`` (the plain defaults when omitted)
    are written, plus ``always_write`` fields such as the colour scheme.
    """

    if not isinstance(settings, ShowdexSettings):
        raise TypeError(f"expected ShowdexSettings, got {type(settings).__name__}")
    base = defaults or default_settings()

    tokens = _changed_fields(ROOT_SCHEMA, settings, base, PAIR_DELIMITER)
    for schema in SECTION_SCHEMAS:
        section_fields = _changed_fields(
            schema,
            getattr(settings, schema.name),
            getattr(base, schema.name),
            SUB_DELIMITER,
        )
        if section_fields:
            tokens.append(f"{schema.code}{PAIR_DELIMITER}{FIELD_DELIMITER.join(section_fields)}")

    header = build_header(SCHEMA_VERSION, __version__, __build_date__)
    return header + HEADER_DELIMITER + SECTION_DELIMITER.join(tokens)
