import json
from dataclasses import fields

import pytest

from themer.palette_models import Base16, Base30, ColorError, Palette, PaletteError


def make_base16():
    return Base16(
        base00="000000",
        base01="111111",
        base02="222222",
        base03="333333",
        base04="444444",
        base05="555555",
        base06="666666",
        base07="777777",
        base08="888888",
        base09="999999",
        base0a="aaaaaa",
        base0b="bbbbbb",
        base0c="cccccc",
        base0d="dddddd",
        base0e="eeeeee",
        base0f="ffffff",
    )


def make_base30():
    return Base30(**{f.name: f.name.upper() for f in fields(Base30)})


def test_colors_in_order():
    base = make_base16()
    colors = list(base.colors())
    assert len(colors) == 16
    assert colors[0] == base.base00
    assert colors[10] == base.base0a
    assert colors[-1] == base.base0f


def test_base16_to_dict_uses_uppercase_keys():
    data = make_base16().to_dict()
    assert data["base0A"] == "aaaaaa"
    assert data["base0F"] == "ffffff"
    assert "base0a" not in data


def test_base16_roundtrip():
    base = make_base16()
    assert Base16.from_dict(json.loads(json.dumps(base.to_dict()))) == base


def test_base16_missing_field():
    data = make_base16().to_dict()
    del data["base0C"]
    with pytest.raises(ValueError, match="base0C"):
        Base16.from_dict(data)


def test_base30_roundtrip():
    base = make_base30()
    assert Base30.from_dict(base.to_dict()) == base


def test_palette_accessors():
    palette = Palette(name="p", base_30=make_base30(), base_16=make_base16())
    assert palette.base16() is palette.base_16
    assert palette.base30() is palette.base_30


def test_palette_missing_base16():
    with pytest.raises(PaletteError, match="Palette is missing base_16 colors"):
        Palette(name="p").base16()


def test_palette_missing_base30():
    with pytest.raises(PaletteError, match="Palette is missing base_30 colors"):
        Palette(name="p", base_16=make_base16()).base30()


def test_palette_to_dict_skips_absent_sets():
    assert Palette(name="only").to_dict() == {"name": "only"}


def test_palette_roundtrip_full():
    palette = Palette(name="full", base_30=make_base30(), base_16=make_base16())
    assert Palette.from_dict(json.loads(json.dumps(palette.to_dict()))) == palette


def test_palette_ignores_unknown_fields():
    palette = Palette.from_dict({"name": "Test Palette", "colors": {"primary": "ffffff"}})
    assert palette.name == "Test Palette"
    assert palette.base_16 is None
    assert palette.base_30 is None


def test_palette_requires_name():
    with pytest.raises(ValueError, match="missing field `name`"):
        Palette.from_dict({"base_16": make_base16().to_dict()})


def test_color_error_message():
    err = ColorError("zzz")
    assert str(err) == "Invalid hex color format: zzz"
    assert err.value == "zzz"