"""Hydration: dehydrated settings string -> :class:`ShowdexSettings`.

Hydration never fails. Anything missing, unknown or malformed falls back to
the default value of the affected field (or of the whole tree).
"""

from __future__ import annotations

import logging
from dataclasses import fields, replace
from typing import Any, Dict, Optional, Tuple

from .header import split_header
from .model import ShowdexSettings, default_settings
from .per_side import hydrate_per_side
from .primitives import (
    FIELD_DELIMITER,
    PAIR_DELIMITER,
    SUB_DELIMITER,
    hydrate_array,
    hydrate_boolean,
    hydrate_value,
    is_boolean_token,
    split_unescaped,
)
from .schema import ROOT_SCHEMA, SCHEMA_VERSION, FieldSpec, SectionSchema, section_for_code

logger = logging.getLogger(__name__)


def coerce_field(spec: FieldSpec, raw: str, default: Any) -> Any:
    """Coerce one wire value according to its field's declared kind."""

    if spec.kind == "boolean":
        # tokens other than y/n keep the field default, not False (DESIGN.md)
        return hydrate_boolean(raw) if is_boolean_token(raw) else default
    if spec.kind == "array":
        return tuple(hydrate_array(raw))
    if spec.kind == "per_side":
        return hydrate_per_side(raw)

    value = hydrate_value(raw)
    if spec.boolean_aliases is not None and isinstance(value, bool):
        when_true, when_false = spec.boolean_aliases
        return when_true if value else when_false
    return value


def _resolve(schema: SectionSchema, code: str, raw: str, defaults: Any) -> Optional[Tuple[str, Any]]:
    key = code.strip().lower()
    if not key:
        return None

    spec = schema.by_code(key)
    if spec is None or spec.name not in {f.name for f in fields(defaults)}:
        logger.debug("Ignoring unknown %s setting %r", schema.name or "root", key)
        return None
    if not spec.restorable:
        return None
    return spec.name, coerce_field(spec, raw, getattr(defaults, spec.name))


def hydrate_section(schema: SectionSchema, body: str, defaults: Any) -> Any:
    """Apply the ``code~value|code~value`` tokens in ``body`` to ``defaults``.

    Returns a new section value; ``defaults`` itself is left untouched.
    """

    updates: Dict[str, Any] = {}
    for token in split_unescaped(body or "", FIELD_DELIMITER):
        code, sep, raw = token.partition(SUB_DELIMITER)
        if not sep:
            continue
        resolved = _resolve(schema, code, raw, defaults)
        if resolved is not None:
            updates[resolved[0]] = resolved[1]
    return replace(defaults, **updates) if updates else defaults


def hydrate_settings(value: Optional[str] = None, *, color_scheme: Optional[str] = None) -> ShowdexSettings:
    """Hydrate a dehydrated settings string, typically read from storage.

    * Falsy or improperly formatted ``value`` returns the default settings.
    * ``color_scheme`` seeds the default colour scheme (the host's current one).
    """

    settings = default_settings(color_scheme=color_scheme)

    if not value or not isinstance(value, str):
        return settings

    header, tokens = split_header(value)
    if header.is_empty():
        logger.debug("Dehydrated settings may be improperly formatted, returning defaults (value=%r)", value)
        return settings
    if not tokens:
        return settings

    if header.schema_version > SCHEMA_VERSION:
        logger.debug(
            "Settings were written by a newer schema (v%s > v%s, package %s); unknown keys will be dropped",
            header.schema_version,
            SCHEMA_VERSION,
            header.package_version or "?",
        )

    updates: Dict[str, Any] = {}
    for token in tokens:
        code, sep, raw = token.partition(PAIR_DELIMITER)
        if not sep:
            continue

        section = section_for_code(code)
        if section is not None:
            current = updates.get(section.name, getattr(settings, section.name))
            updates[section.name] = hydrate_section(section, raw, current)
            continue

        resolved = _resolve(ROOT_SCHEMA, code, raw, settings)
        if resolved is not None:
            updates[resolved[0]] = resolved[1]

    return replace(settings, **updates) if updates else settings
