"""Immutable Showdex settings tree.

The dataclass defaults here *are* the default-value table; the wire codes and
value kinds live in :mod:`showdex_hydro.schema`.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields, is_dataclass, replace
from typing import Any, Dict, Mapping, Optional, Tuple

from . import __build_date__, __version__

PER_SIDE_SLOTS: Tuple[str, ...] = ("auth", "p1", "p2", "p3", "p4")


@dataclass(frozen=True)
class PerSide:
    """One value for the logged-in ("auth") user plus each player slot.

    A slot holds a bool, a tuple of scalars, or ``None`` when unset.
    """

    auth: Any = None
    p1: Any = None
    p2: Any = None
    p3: Any = None
    p4: Any = None


def _all_sides(value: Any) -> PerSide:
    return PerSide(auth=value, p1=value, p2=value, p3=value, p4=value)


@dataclass(frozen=True)
class HellodexSettings:
    open_on_start: bool = True
    focus_rooms_room: bool = False
    show_battle_record: bool = True
    show_donate_button: bool = True


@dataclass(frozen=True)
class CalcdexSettings:
    open_on_start: str = "always"
    open_as: str = "showdown"
    open_on_panel: str = "showdown"
    close_on: str = "battle-end"
    destroy_on_close: bool = True
    # used to be a bool; see the boolean_aliases on its FieldSpec
    include_teambuilder: Any = "always"
    include_presets_bundles: Tuple[Any, ...] = ()
    default_auto_select: PerSide = field(default_factory=lambda: _all_sides(True))
    default_auto_preset: PerSide = field(default_factory=lambda: _all_sides(True))
    default_auto_moves: PerSide = field(
        default_factory=lambda: PerSide(auth=False, p1=True, p2=True, p3=True, p4=True)
    )
    lock_genetics_visibility: PerSide = field(default_factory=lambda: _all_sides(("base",)))
    nhko_colors: Tuple[Any, ...] = ("#4CAF50", "#FF9800", "#FF9800", "#F44336", "#F44336")
    nhko_labels: Tuple[Any, ...] = ("1HKO", "2HKO", "3HKO", "4HKO")
    show_nicknames: bool = False
    reverse_icon_name: bool = False
    show_field_tooltips: bool = True
    prioritize_usage_stats: bool = False


@dataclass(frozen=True)
class Gen3PredictorSettings:
    open_on_start: str = "always"
    open_as: str = "panel"
    close_on: str = "battle-tab"
    destroy_on_close: bool = True


@dataclass(frozen=True)
class HonkdexSettings:
    visually_enabled: bool = True
    show_all_formats: bool = False
    always_edit_types: bool = False
    always_show_genetics: bool = True


@dataclass(frozen=True)
class ShowdownSettings:
    auto_accept_sheets: bool = False
    show_sheet_prompts: bool = True
    hide_replay_button: bool = False


@dataclass(frozen=True)
class ShowdexSettings:
    color_scheme: str = "light"
    color_theme: str = "sic"
    forced_color_scheme: str = "showdown"
    locale: str = "en"
    glassy_terrain: bool = False
    developer_mode: bool = False
    package_version: str = __version__
    build_date: str = __build_date__

    hellodex: HellodexSettings = field(default_factory=HellodexSettings)
    calcdex: CalcdexSettings = field(default_factory=CalcdexSettings)
    gen3predictor: Gen3PredictorSettings = field(default_factory=Gen3PredictorSettings)
    honkdex: HonkdexSettings = field(default_factory=HonkdexSettings)
    showdown: ShowdownSettings = field(default_factory=ShowdownSettings)


def default_settings(color_scheme: Optional[str] = None) -> ShowdexSettings:
    """Full default tree.

    ``color_scheme`` stands in for the host page's current scheme, which the
    hydrator uses as the default when nothing was persisted.
    """

    settings = ShowdexSettings()
    if color_scheme:
        settings = replace(settings, color_scheme=color_scheme)
    return settings


# dict conversion -------------------------------------------------------------
def settings_to_dict(settings: ShowdexSettings) -> Dict[str, Any]:
    return asdict(settings)


def _freeze(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(value)
    return value


def _per_side_from(value: Any, default: PerSide) -> PerSide:
    if isinstance(value, PerSide):
        return value
    if not isinstance(value, Mapping):
        return default
    return PerSide(**{slot: _freeze(value.get(slot)) for slot in PER_SIDE_SLOTS})


def _record_from(record_type: Any, data: Mapping[str, Any], base: Any) -> Any:
    updates: Dict[str, Any] = {}
    for f in fields(record_type):
        if f.name not in data:
            continue
        value = data[f.name]
        default = getattr(base, f.name)
        if isinstance(default, PerSide):
            updates[f.name] = _per_side_from(value, default)
        elif is_dataclass(default):
            if isinstance(value, Mapping):
                updates[f.name] = _record_from(type(default), value, default)
        else:
            updates[f.name] = _freeze(value)
    return replace(base, **updates)


def settings_from_dict(data: Mapping[str, Any], base: Optional[ShowdexSettings] = None) -> ShowdexSettings:
    """Build a settings tree from a (JSON-style) mapping.

    Known keys are merged over ``base`` (the defaults when omitted); unknown
    keys are ignored.
    """

    if not isinstance(data, Mapping):
        raise ValueError("settings data must be a mapping")
    return _record_from(ShowdexSettings, data, base or default_settings())
