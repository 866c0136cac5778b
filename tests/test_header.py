from __future__ import annotations

import pytest

from showdex_hydro.header import HeaderMetadata, build_header, parse_header, split_header


def test_split_header_tokenizes_body() -> None:
    header, tokens = split_header("sdx,1,1.2.6,2024-06-02#cs:dark;cd:nc~#FFF,#000|oa~overlay;")
    assert header == HeaderMetadata("sdx", 1, "1.2.6", "2024-06-02")
    assert tokens == ["cs:dark", "cd:nc~#FFF,#000|oa~overlay"]


def test_split_header_respects_escaped_section_delimiter() -> None:
    _, tokens = split_header("sdx,1,,#ct:a\\;b;lc:fr")
    assert tokens == ["ct:a\\;b", "lc:fr"]


@pytest.mark.parametrize("raw", [None, "", 42, "cs:dark;lc:en", "nope,1#cs:dark"])
def test_split_header_unrecognised_input_is_empty(raw) -> None:
    header, tokens = split_header(raw)
    assert header.is_empty()
    assert tokens == []


def test_parse_header_is_lenient() -> None:
    assert parse_header("SDX") == HeaderMetadata("sdx", 0, "", "")
    assert parse_header("sdx,abc,2.0.0").schema_version == 0
    assert parse_header("other,1") is None


def test_build_header_rejects_reserved_characters() -> None:
    assert build_header(1, "1.2.6", "2024-06-02") == "sdx,1,1.2.6,2024-06-02"
    with pytest.raises(ValueError):
        build_header(1, "1#2", "")
