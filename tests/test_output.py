import pytest

from themer import output


@pytest.fixture
def plain(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@pytest.fixture
def coloured(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("ANSI_COLORS_DISABLED", raising=False)
    monkeypatch.setenv("FORCE_COLOR", "1")


def test_header(plain, capsys):
    output.header("Palettes")
    assert capsys.readouterr().out == "\nPalettes\n"


def test_success(plain, capsys):
    output.success("applied")
    assert capsys.readouterr().out == "✓ applied\n"


def test_error_goes_to_stderr(plain, capsys):
    output.error("broken")
    captured = capsys.readouterr()
    assert captured.err == "✗ broken\n"
    assert captured.out == ""


def test_warning(plain, capsys):
    output.warning("careful")
    assert capsys.readouterr().out == "⚠ careful\n"


def test_info(plain, capsys):
    output.info("note")
    assert capsys.readouterr().out == "ℹ note\n"


def test_item_without_badge_or_description(plain, capsys):
    output.item(None, "nord", None)
    assert capsys.readouterr().out == "  • nord\n"


def test_item_with_badge_and_description(plain, capsys):
    output.item("active", "nord", "Nord Palette")
    assert capsys.readouterr().out == "  • [active] nord Nord Palette\n"


def test_coloured_success_contains_escape(coloured, capsys):
    output.success("applied")
    out = capsys.readouterr().out
    assert "\x1b[" in out
    assert out.rstrip("\n").endswith(" applied")
    assert output.ICON_SUCCESS in out