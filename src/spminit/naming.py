"""Identifier normalisation for generated package sources."""

from __future__ import annotations

import re

__all__ = ["FALLBACK_IDENTIFIER", "is_valid_identifier", "mangle_identifier"]


FALLBACK_IDENTIFIER = "_"

_INVALID_IDENTIFIER = re.compile(r"[^0-9a-zA-Z_]")
_VALID_IDENTIFIER = re.compile(r"[A-Za-z_][0-9A-Za-z_]*")


def mangle_identifier(name: str) -> str:
    """Return a valid source identifier derived from ``name``.

    Every character outside ``[0-9A-Za-z_]`` is replaced by a single
    underscore, so the result has the same length as ``name``. A leading
    digit is prefixed with an underscore.
    """

    candidate = _INVALID_IDENTIFIER.sub("_", name)

    if not candidate:
        return FALLBACK_IDENTIFIER

    if candidate[0].isdigit():
        candidate = f"_{candidate}"

    return candidate


def is_valid_identifier(value: str) -> bool:
    return _VALID_IDENTIFIER.fullmatch(value) is not None
