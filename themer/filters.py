"""Template filters for formatting hex colour codes."""

from __future__ import annotations

import math
import re
from typing import Any

_HEX_COMPONENT = re.compile(r"\+?[0-9A-Fa-f]+")
_EPSILON = 1e-10


class ColorFilterError(ValueError):
    """Raised when a colour filter gets a value it cannot format."""


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def hex_hash(value: Any) -> str:
    """Prefix a hex colour string with ``#``."""
    if not isinstance(value, str):
        raise ColorFilterError("Invalid type, expected string")
    return f"#{value}"


def _parse_component(hex_bytes: bytes, start: int, component: str) -> int:
    piece = hex_bytes[start:start + 2].decode("utf-8", errors="replace")
    if not _HEX_COMPONENT.fullmatch(piece):
        raise ColorFilterError(
            f"Invalid hex value for {component} component: '{piece}'"
        )
    return int(piece, 16)


def rgb(value: Any, a: Any = 1.0) -> str:
    """Convert a six-digit hex colour to ``rgb(...)`` or, with alpha ``a``, ``rgba(...)``."""
    alpha = float(a) if isinstance(a, (int, float)) and not isinstance(a, bool) else 1.0
    if not 0.0 <= alpha <= 1.0:
        raise ColorFilterError(
            f"Alpha value {_format_float(alpha)} must be between 0.0 and 1.0"
        )

    if not isinstance(value, str):
        raise ColorFilterError("Invalid type, expected string")

    hex_code = value.removeprefix("#").encode("utf-8")
    if len(hex_code) != 6:
        raise ColorFilterError(
            f"Invalid hex code length: expected 6 characters, got {len(hex_code)}"
        )

    r = _parse_component(hex_code, 0, "Red")
    g = _parse_component(hex_code, 2, "Green")
    b = _parse_component(hex_code, 4, "Blue")

    if abs(alpha - 1.0) < _EPSILON:
        return f"rgb({r}, {g}, {b})"
    return f"rgba({r}, {g}, {b}, {alpha:.2f})"