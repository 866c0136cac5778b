"""Header tier of the dehydrated settings string.

Wire grammar::

    sdx,<schema_version>,<package_version>,<build_date>#<body>
    body    := token (";" token)*
    token   := code ":" value          (root field)
             | code ":" field ("|" field)*   (section)
    field   := code "~" value

The header never contains ``#``, so the body is everything after the first
``#`` and may itself contain ``#`` (e.g. hex colours).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from .primitives import SECTION_DELIMITER, split_unescaped

logger = logging.getLogger(__name__)

HEADER_DESCRIPTOR = "sdx"
HEADER_DELIMITER = "#"
HEADER_FIELD_DELIMITER = ","


@dataclass(frozen=True)
class HeaderMetadata:
    descriptor: str = ""
    schema_version: int = 0
    package_version: str = ""
    build_date: str = ""

    def is_empty(self) -> bool:
        return not self.descriptor


def build_header(schema_version: int, package_version: str, build_date: str) -> str:
    parts = [HEADER_DESCRIPTOR, str(int(schema_version)), str(package_version or ""), str(build_date or "")]
    for part in parts:
        if HEADER_DELIMITER in part or HEADER_FIELD_DELIMITER in part:
            raise ValueError(f"header field {part!r} contains a reserved character")
    return HEADER_FIELD_DELIMITER.join(parts)


def parse_header(prefix: str) -> Optional[HeaderMetadata]:
    """Parse the header prefix; None when it isn't a settings header."""

    parts = str(prefix or "").split(HEADER_FIELD_DELIMITER)
    descriptor = parts[0].strip().lower()
    if descriptor != HEADER_DESCRIPTOR:
        return None

    parts += [""] * (4 - len(parts))
    try:
        schema_version = int(parts[1])
    except ValueError:
        schema_version = 0
    return HeaderMetadata(
        descriptor=descriptor,
        schema_version=schema_version,
        package_version=parts[2].strip(),
        build_date=parts[3].strip(),
    )


def split_header(raw: Any) -> Tuple[HeaderMetadata, List[str]]:
    """Split ``raw`` into its header metadata and section-tier tokens.

    Returns ``(HeaderMetadata(), [])`` for anything without a recognisable
    header.
    """

    if not raw or not isinstance(raw, str):
        return HeaderMetadata(), []

    prefix, sep, body = raw.partition(HEADER_DELIMITER)
    if not sep:
        logger.debug("No header delimiter in dehydrated settings")
        return HeaderMetadata(), []

    header = parse_header(prefix)
    if header is None:
        logger.debug("Unrecognised settings header %r", prefix)
        return HeaderMetadata(), []

    tokens = [token for token in split_unescaped(body, SECTION_DELIMITER) if token]
    return header, tokens
