"""Key-alias tables: long field names <-> short wire codes, per section."""

from __future__ import annotations

from dataclasses import dataclass, fields as dataclass_fields
from typing import Any, Dict, List, Literal, Optional, Tuple

from .model import (
    CalcdexSettings,
    Gen3PredictorSettings,
    HellodexSettings,
    HonkdexSettings,
    ShowdexSettings,
    ShowdownSettings,
)

FieldKind = Literal["boolean", "scalar", "array", "per_side"]

# Bumped whenever a code is reused with a different meaning.
SCHEMA_VERSION = 1


@dataclass(frozen=True)
class FieldSpec:
    name: str
    code: str
    kind: FieldKind = "scalar"
    # persisted=False: never written by the dehydrator
    persisted: bool = True
    # restorable=False: ignored by the hydrator even when present
    restorable: bool = True
    # legacy bool values are mapped to (value_for_true, value_for_false)
    boolean_aliases: Optional[Tuple[Any, Any]] = None
    # default is seeded from the host at load time, so there is no fixed
    # default to compare against; always written
    always_write: bool = False


@dataclass(frozen=True)
class SectionSchema:
    name: str
    code: str
    model: type
    fields: Tuple[FieldSpec, ...]

    def by_code(self, code: str) -> Optional[FieldSpec]:
        name = self.hydrated_map().get(str(code or "").strip().lower())
        return self.by_name(name) if name else None

    def by_name(self, name: str) -> Optional[FieldSpec]:
        for item in self.fields:
            if item.name == name:
                return item
        return None

    def hydrated_map(self) -> Dict[str, str]:
        """wire code -> field name"""
        return {item.code: item.name for item in self.fields}


ROOT_SCHEMA = SectionSchema(
    name="",
    code="",
    model=ShowdexSettings,
    fields=(
        FieldSpec("color_scheme", "cs", always_write=True),
        FieldSpec("color_theme", "ct"),
        FieldSpec("forced_color_scheme", "fc"),
        FieldSpec("locale", "lc"),
        FieldSpec("glassy_terrain", "gt", "boolean"),
        # not released yet
        FieldSpec("developer_mode", "dm", "boolean", restorable=False),
        # build info
        FieldSpec("package_version", "pv", persisted=False, restorable=False),
        FieldSpec("build_date", "bd", persisted=False, restorable=False),
    ),
)

HELLODEX_SCHEMA = SectionSchema(
    name="hellodex",
    code="hd",
    model=HellodexSettings,
    fields=(
        FieldSpec("open_on_start", "os", "boolean"),
        FieldSpec("focus_rooms_room", "fr", "boolean"),
        FieldSpec("show_battle_record", "br", "boolean"),
        FieldSpec("show_donate_button", "db", "boolean"),
    ),
)

CALCDEX_SCHEMA = SectionSchema(
    name="calcdex",
    code="cd",
    model=CalcdexSettings,
    fields=(
        FieldSpec("open_on_start", "os"),
        FieldSpec("open_as", "oa"),
        FieldSpec("open_on_panel", "op"),
        FieldSpec("close_on", "co"),
        FieldSpec("destroy_on_close", "dc", "boolean"),
        # was a boolean before 'always'/'teams'/'never'
        FieldSpec("include_teambuilder", "it", boolean_aliases=("always", "never")),
        FieldSpec("include_presets_bundles", "ib", "array"),
        FieldSpec("default_auto_select", "as", "per_side"),
        FieldSpec("default_auto_preset", "ap", "per_side"),
        FieldSpec("default_auto_moves", "am", "per_side"),
        FieldSpec("lock_genetics_visibility", "lg", "per_side"),
        FieldSpec("nhko_colors", "nc", "array"),
        FieldSpec("nhko_labels", "nl", "array"),
        FieldSpec("show_nicknames", "sn", "boolean"),
        FieldSpec("reverse_icon_name", "ri", "boolean"),
        FieldSpec("show_field_tooltips", "ft", "boolean"),
        FieldSpec("prioritize_usage_stats", "pu", "boolean"),
    ),
)

GEN3PREDICTOR_SCHEMA = SectionSchema(
    name="gen3predictor",
    code="g3",
    model=Gen3PredictorSettings,
    fields=(
        FieldSpec("open_on_start", "os"),
        FieldSpec("open_as", "oa"),
        FieldSpec("close_on", "co"),
        FieldSpec("destroy_on_close", "dc", "boolean"),
    ),
)

HONKDEX_SCHEMA = SectionSchema(
    name="honkdex",
    code="hk",
    model=HonkdexSettings,
    fields=(
        FieldSpec("visually_enabled", "ve", "boolean"),
        FieldSpec("show_all_formats", "af", "boolean"),
        FieldSpec("always_edit_types", "et", "boolean"),
        FieldSpec("always_show_genetics", "ag", "boolean"),
    ),
)

SHOWDOWN_SCHEMA = SectionSchema(
    name="showdown",
    code="sd",
    model=ShowdownSettings,
    fields=(
        FieldSpec("auto_accept_sheets", "as", "boolean"),
        FieldSpec("show_sheet_prompts", "sp", "boolean"),
        FieldSpec("hide_replay_button", "hr", "boolean"),
    ),
)

SECTION_SCHEMAS: Tuple[SectionSchema, ...] = (
    HELLODEX_SCHEMA,
    CALCDEX_SCHEMA,
    GEN3PREDICTOR_SCHEMA,
    HONKDEX_SCHEMA,
    SHOWDOWN_SCHEMA,
)


def section_for_code(code: str) -> Optional[SectionSchema]:
    key = str(code or "").strip().lower()
    for schema in SECTION_SCHEMAS:
        if schema.code == key:
            return schema
    return None


def _table_problems(schema: SectionSchema, reserved_codes: Tuple[str, ...] = ()) -> List[str]:
    label = schema.name or "root"
    problems: List[str] = []
    seen_codes: Dict[str, str] = {code: "section" for code in reserved_codes}
    seen_names = set()

    for item in schema.fields:
        if item.code != item.code.lower() or not item.code:
            problems.append(f"{label}.{item.name}: code {item.code!r} must be non-empty lower case")
        if item.code in seen_codes:
            problems.append(f"{label}.{item.name}: code {item.code!r} already used by {seen_codes[item.code]}")
        seen_codes[item.code] = item.name
        if item.name in seen_names:
            problems.append(f"{label}.{item.name}: listed twice")
        seen_names.add(item.name)

    model_names = {f.name for f in dataclass_fields(schema.model)}
    section_names = {s.name for s in SECTION_SCHEMAS} if schema is ROOT_SCHEMA else set()
    for name in sorted(seen_names - model_names):
        problems.append(f"{label}.{name}: no such field on {schema.model.__name__}")
    for name in sorted(model_names - seen_names - section_names):
        problems.append(f"{label}.{name}: field has no wire code")
    return problems


def check_schema() -> List[str]:
    """Coverage contract between the alias tables and the settings model."""

    section_codes = tuple(s.code for s in SECTION_SCHEMAS)
    problems = _table_problems(ROOT_SCHEMA, reserved_codes=section_codes)
    if len(set(section_codes)) != len(section_codes):
        problems.append(f"duplicate section codes: {section_codes}")
    for schema in SECTION_SCHEMAS:
        problems.extend(_table_problems(schema))
    return problems
