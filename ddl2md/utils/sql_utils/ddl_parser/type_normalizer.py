# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Column type normalization.

Dialect spellings of the same base type collapse to one keyword while the
parameter suffix (length, precision, array brackets) is kept exactly as it was
written.
"""

import re
from typing import Mapping, Optional

from ddl2md.utils.constants import TYPE_SYNONYMS

_TYPE_PARTS_RE = re.compile(
    r"^(?P<base>\w+(?:\s+\w+)*?)\s*(?P<params>\([^)]*\))?(?P<array>(?:\s*\[\d*\])*)\s*$",
    re.DOTALL,
)
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_type(type_token: str, synonyms: Optional[Mapping[str, str]] = None) -> str:
    """
    Normalize a raw type token.

    Example: "integer" -> "INT", "varchar(50)" -> "VARCHAR(50)",
    "character varying(20)" -> "VARCHAR(20)", "decimal(10, 2)" -> "DECIMAL(10, 2)"

    Args:
        type_token: Type text as written in the column definition
        synonyms: Base keyword mapping; defaults to the built-in table

    Returns:
        Canonical base keyword followed by the original suffix
    """
    type_token = type_token.strip()
    mapping = TYPE_SYNONYMS if synonyms is None else synonyms

    match = _TYPE_PARTS_RE.match(type_token)
    if not match:
        return type_token.upper()

    base = _WHITESPACE_RE.sub(" ", match.group("base")).upper()
    params = match.group("params") or ""
    array = match.group("array") or ""

    return mapping.get(base, base) + params + array.strip()
