"""Colour palettes in the base16 and base30 schemes."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Iterator, Mapping


class ColorError(ValueError):
    """Raised for a colour string that is not a valid hex code."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid hex color format: {value}")
        self.value = value


class PaletteError(Exception):
    """Raised when a palette lacks a colour set that is asked for."""


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"invalid type for {what}: expected an object")
    return data


def _require_str(data: Mapping[str, Any], key: str) -> str:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"invalid type for field `{key}`: expected a string")
    return value


_BASE16_KEYS = {
    "base0a": "base0A",
    "base0b": "base0B",
    "base0c": "base0C",
    "base0d": "base0D",
    "base0e": "base0E",
    "base0f": "base0F",
}


@dataclass
class Base16:
    """The sixteen colours of a base16 scheme."""

    base00: str
    base01: str
    base02: str
    base03: str
    base04: str
    base05: str
    base06: str
    base07: str
    base08: str
    base09: str
    base0a: str
    base0b: str
    base0c: str
    base0d: str
    base0e: str
    base0f: str

    def colors(self) -> Iterator[str]:
        """The colours in order, base00 to base0F."""
        return (getattr(self, f.name) for f in fields(self))

    def to_dict(self) -> dict[str, str]:
        return {_BASE16_KEYS.get(f.name, f.name): getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Any) -> Base16:
        table = _require_mapping(data, "base_16")
        return cls(
            **{
                f.name: _require_str(table, _BASE16_KEYS.get(f.name, f.name))
                for f in fields(cls)
            }
        )


@dataclass
class Base30:
    """The named colours of a base30 scheme."""

    white: str
    darker_black: str
    black: str
    black2: str
    one_bg: str
    one_bg2: str
    one_bg3: str
    grey: str
    grey_fg: str
    grey_fg2: str
    light_grey: str
    red: str
    baby_pink: str
    pink: str
    line: str
    green: str
    vibrant_green: str
    nord_blue: str
    blue: str
    yellow: str
    sun: str
    purple: str
    dark_purple: str
    teal: str
    orange: str
    cyan: str
    lightbg: str

    def to_dict(self) -> dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Any) -> Base30:
        table = _require_mapping(data, "base_30")
        return cls(**{f.name: _require_str(table, f.name) for f in fields(cls)})


@dataclass
class Palette:
    """A named palette with optional base30 and base16 colour sets."""

    name: str
    base_30: Base30 | None = None
    base_16: Base16 | None = None

    def base16(self) -> Base16:
        if self.base_16 is None:
            raise PaletteError("Palette is missing base_16 colors")
        return self.base_16

    def base30(self) -> Base30:
        if self.base_30 is None:
            raise PaletteError("Palette is missing base_30 colors")
        return self.base_30

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"name": self.name}
        if self.base_30 is not None:
            result["base_30"] = self.base_30.to_dict()
        if self.base_16 is not None:
            result["base_16"] = self.base_16.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: Any) -> Palette:
        table = _require_mapping(data, "palette")
        base_30 = table.get("base_30")
        base_16 = table.get("base_16")
        return cls(
            name=_require_str(table, "name"),
            base_30=None if base_30 is None else Base30.from_dict(base_30),
            base_16=None if base_16 is None else Base16.from_dict(base_16),
        )