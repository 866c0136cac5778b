from __future__ import annotations

from dataclasses import replace

import pytest

from showdex_hydro import __build_date__, __version__
from showdex_hydro.dehydrate import dehydrate_settings
from showdex_hydro.header import split_header
from showdex_hydro.hydrate import hydrate_settings
from showdex_hydro.model import PerSide, default_settings


def _edited_settings():
    base = default_settings()
    return replace(
        base,
        color_scheme="dark",
        color_theme="glassy",
        glassy_terrain=True,
        hellodex=replace(base.hellodex, focus_rooms_room=True, show_donate_button=False),
        calcdex=replace(
            base.calcdex,
            open_as="overlay",
            include_teambuilder="teams",
            include_presets_bundles=("smogon-gen9", "usage"),
            default_auto_select=PerSide(auth=True, p1=False, p2=True, p3=None, p4=None),
            lock_genetics_visibility=PerSide(auth=(), p1=("iv",), p2=("base", "ev"), p3=("base",), p4=()),
            nhko_colors=("#FFF",),
            nhko_labels=(),
            show_nicknames=True,
        ),
        gen3predictor=replace(base.gen3predictor, open_as="overlay", destroy_on_close=False),
        honkdex=replace(base.honkdex, always_edit_types=True),
        showdown=replace(base.showdown, auto_accept_sheets=True),
    )


def test_defaults_dehydrate_to_header_and_color_scheme() -> None:
    value = dehydrate_settings(default_settings())
    assert value == f"sdx,1,{__version__},{__build_date__}#cs:light"
    assert hydrate_settings(value) == default_settings()


def test_roundtrip_edited_settings() -> None:
    settings = _edited_settings()
    assert hydrate_settings(dehydrate_settings(settings)) == settings


def test_only_changed_fields_are_written() -> None:
    base = default_settings()
    value = dehydrate_settings(replace(base, hellodex=replace(base.hellodex, focus_rooms_room=True)))
    _, tokens = split_header(value)
    assert tokens == ["cs:light", "hd:fr~y"]


@pytest.mark.parametrize(
    "text",
    ["a~b", "~~", "x:y:z", "semi;colon", "pipe|pipe", "a,b", "a/b", "\\", "'", "", "12", "null", "#hash"],
)
def test_delimiters_in_scalar_values_roundtrip(text: str) -> None:
    base = default_settings()
    settings = replace(base, color_theme=text, calcdex=replace(base.calcdex, open_as=text))
    hydrated = hydrate_settings(dehydrate_settings(settings))
    assert hydrated.color_theme == text
    assert hydrated.calcdex.open_as == text


def test_array_items_with_delimiters_roundtrip() -> None:
    base = default_settings()
    labels = ("a,b", "c/d", "e|f", "g;h", "", "1")
    settings = replace(base, calcdex=replace(base.calcdex, nhko_labels=labels))
    assert hydrate_settings(dehydrate_settings(settings)).calcdex.nhko_labels == labels


def test_unreleased_field_is_written_but_not_restored() -> None:
    settings = replace(default_settings(), developer_mode=True)
    value = dehydrate_settings(settings)
    assert "dm:y" in value
    assert hydrate_settings(value).developer_mode is False


def test_build_fields_are_never_written() -> None:
    settings = replace(default_settings(), package_version="0.0.1", build_date="1999-01-01")
    _, tokens = split_header(dehydrate_settings(settings))
    assert tokens == ["cs:light"]


def test_dehydrate_rejects_non_settings() -> None:
    with pytest.raises(TypeError):
        dehydrate_settings({"color_scheme": "dark"})


def test_color_scheme_is_written_even_when_default() -> None:
    settings = default_settings()
    value = dehydrate_settings(settings)
    assert hydrate_settings(value, color_scheme="dark").color_scheme == "light"

    dark = default_settings(color_scheme="dark")
    assert hydrate_settings(dehydrate_settings(dark, defaults=dark)).color_scheme == "dark"
