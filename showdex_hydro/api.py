"""Public API surface.

Re-exports the codec, the settings model and the store so consumers (the UI
layer, scripts) can import a single module.
"""

from __future__ import annotations

from . import __build_date__, __version__

# Settings model
from .model import (
    PER_SIDE_SLOTS,
    CalcdexSettings,
    Gen3PredictorSettings,
    HellodexSettings,
    HonkdexSettings,
    PerSide,
    ShowdexSettings,
    ShowdownSettings,
    default_settings,
    settings_from_dict,
    settings_to_dict,
)

# Alias tables
from .schema import (
    ROOT_SCHEMA,
    SCHEMA_VERSION,
    SECTION_SCHEMAS,
    FieldSpec,
    SectionSchema,
    check_schema,
    section_for_code,
)

# Coercers
from .primitives import (
    dehydrate_array,
    dehydrate_boolean,
    dehydrate_value,
    hydrate_array,
    hydrate_boolean,
    hydrate_value,
)
from .per_side import dehydrate_per_side, hydrate_per_side
from .header import HeaderMetadata, build_header, parse_header, split_header

# Codec
from .hydrate import hydrate_section, hydrate_settings
from .dehydrate import dehydrate_settings

# Storage
from .storage import SETTINGS_STORAGE_KEY, SettingsStore

__all__ = [
    "__version__",
    "__build_date__",
    # model
    "PER_SIDE_SLOTS",
    "PerSide",
    "HellodexSettings",
    "CalcdexSettings",
    "Gen3PredictorSettings",
    "HonkdexSettings",
    "ShowdownSettings",
    "ShowdexSettings",
    "default_settings",
    "settings_to_dict",
    "settings_from_dict",
    # schema
    "SCHEMA_VERSION",
    "FieldSpec",
    "SectionSchema",
    "ROOT_SCHEMA",
    "SECTION_SCHEMAS",
    "section_for_code",
    "check_schema",
    # coercers
    "hydrate_boolean",
    "hydrate_value",
    "hydrate_array",
    "dehydrate_boolean",
    "dehydrate_value",
    "dehydrate_array",
    "hydrate_per_side",
    "dehydrate_per_side",
    "HeaderMetadata",
    "build_header",
    "parse_header",
    "split_header",
    # codec
    "hydrate_section",
    "hydrate_settings",
    "dehydrate_settings",
    # storage
    "SETTINGS_STORAGE_KEY",
    "SettingsStore",
]
