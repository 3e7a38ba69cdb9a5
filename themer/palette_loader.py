"""Finding and loading palette files from the configuration directory."""

from __future__ import annotations

import json
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from themer.palette_models import Palette

_PALETTES_DIR = "palettes"
_EXTENSION = ".json"


class PaletteLoadError(Exception):
    """Raised when a palette file or directory cannot be read or parsed."""


@dataclass(frozen=True)
class PaletteInfo:
    """A palette file's stem and, if it could be read, its display name."""

    filename: str
    name: str | None = None

    def __str__(self) -> str:
        if self.name is not None:
            return f"{self.name} ({self.filename})"
        return f"{self.filename} (invalid)"


def extract_palette_name(path: str | PathLike[str]) -> str:
    """Read only the ``name`` field of a palette JSON file."""
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PaletteLoadError(f"Failed to read file: {path}: {exc}") from exc
    try:
        data = json.loads(content)
    except ValueError as exc:
        raise PaletteLoadError(
            f"Failed to parse name from palette JSON: {exc}"
        ) from exc
    if not isinstance(data, dict):
        raise PaletteLoadError(
            "Failed to parse name from palette JSON: expected an object"
        )
    name = data.get("name")
    if not isinstance(name, str):
        raise PaletteLoadError(
            "Failed to parse name from palette JSON: missing or invalid field `name`"
        )
    return name


class PaletteLoader:
    """Loads palettes from the ``palettes`` directory of a config directory."""

    def __init__(self, config_dir: str | PathLike[str]) -> None:
        self.palettes_dir = Path(config_dir) / _PALETTES_DIR

    def load(self, palette_name: str) -> Palette:
        """Load a palette by name, with or without its ``.json`` extension."""
        filename = (
            palette_name
            if palette_name.endswith(_EXTENSION)
            else f"{palette_name}{_EXTENSION}"
        )
        path = self.palettes_dir / filename
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise PaletteLoadError(f"Failed to read palette: {path}: {exc}") from exc
        try:
            return Palette.from_dict(json.loads(content))
        except ValueError as exc:
            raise PaletteLoadError(f"Failed to parse palette JSON: {exc}") from exc

    def list_all(self) -> list[PaletteInfo]:
        """Describe every ``.json`` file in the palettes directory."""
        try:
            entries = sorted(self.palettes_dir.iterdir())
        except OSError as exc:
            raise PaletteLoadError(
                f"Failed to read directory: {self.palettes_dir}: {exc}"
            ) from exc

        palettes = []
        for path in entries:
            if path.suffix != _EXTENSION or not path.stem:
                continue
            try:
                name: str | None = extract_palette_name(path)
            except PaletteLoadError:
                name = None
            palettes.append(PaletteInfo(filename=path.stem, name=name))
        return palettes