"""Data model of the themer configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class Mode(Enum):
    """How a rendered theme is applied to its output file."""

    INCLUDE = "include"
    REPLACE = "replace"

    @property
    def _rank(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Mode):
            return NotImplemented
        return self._rank < other._rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Mode):
            return NotImplemented
        return self._rank <= other._rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Mode):
            return NotImplemented
        return self._rank > other._rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Mode):
            return NotImplemented
        return self._rank >= other._rank


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"invalid type for {what}: expected a table")
    return data


def _require_str(data: Mapping[str, Any], key: str) -> str:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"invalid type for field `{key}`: expected a string")
    return value


@dataclass
class Target:
    """A file that a palette is rendered into."""

    name: str
    template: str
    output: str
    mode: Mode
    reload_cmd: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "template": self.template,
            "output": self.output,
            "mode": self.mode.value,
            "reload_cmd": self.reload_cmd,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Target:
        table = _require_mapping(data, "target")
        mode_text = _require_str(table, "mode")
        try:
            mode = Mode(mode_text)
        except ValueError:
            raise ValueError(
                f"unknown variant `{mode_text}`, expected `include` or `replace`"
            ) from None
        return cls(
            name=_require_str(table, "name"),
            template=_require_str(table, "template"),
            output=_require_str(table, "output"),
            mode=mode,
            reload_cmd=_require_str(table, "reload_cmd"),
        )


@dataclass
class Config:
    """The whole configuration: the active palette and its targets."""

    active_pallette: str
    targets: list[Target] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "active_pallette": self.active_pallette,
            "targets": [target.to_dict() for target in self.targets],
        }

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        table = _require_mapping(data, "config")
        active = _require_str(table, "active_pallette")
        if "targets" not in table:
            raise ValueError("missing field `targets`")
        targets = table["targets"]
        if not isinstance(targets, list):
            raise ValueError("invalid type for field `targets`: expected an array")
        return cls(
            active_pallette=active,
            targets=[Target.from_dict(item) for item in targets],
        )