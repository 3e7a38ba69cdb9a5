# themer

themer is a library for keeping the colours of your tools in step. You
describe a colour palette once, as a JSON file, and write a small Jinja
template for each program you want to theme. themer loads the palette and
renders the templates with its colours.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Configuration

`themer.config_loader.ConfigLoader` reads and writes `config.toml` in a
configuration directory. `ConfigLoader.default()` uses the `themer`
directory under your user config directory (as found by `platformdirs`,
for example `~/.config/themer` on Linux); `ConfigLoader(path)` uses any
directory you give it.

```toml
active_pallette = "nord"

[[targets]]
name = "alacritty"
template = "alacritty.tmpl"
output = "~/.config/alacritty/colors.toml"
mode = "include"
reload_cmd = "touch ~/.config/alacritty/alacritty.toml"
```

Both `active_pallette` and `targets` are required, and every target needs
all five fields. `mode` is either `include` or `replace`
(`themer.config_models.Mode.INCLUDE` / `Mode.REPLACE`; `INCLUDE` sorts
before `REPLACE`).

```python
from themer.config_loader import ConfigLoader

loader = ConfigLoader.default()
config = loader.load()            # a themer.config_models.Config
print(config.active_pallette, [t.name for t in config.targets])
loader.save(config)
```

A file that cannot be read, is not valid TOML or lacks a field raises
`ConfigError`, as does a failed write. `Config` and `Target` also offer
`to_dict()` and `from_dict()`.

## Palettes

Palettes live in the `palettes/` subdirectory of the config directory, one
JSON file each. A palette has a `name`, and may have a `base_16` object
(`base00` to `base09`, then `base0A` to `base0F`) and a `base_30` object of
named colours (`white`, `darker_black`, `black`, `red`, `nord_blue`,
`lightbg`, ...). Colours are hex strings without the `#`.

```python
from themer.palette_loader import PaletteLoader

palettes = PaletteLoader(loader.config_dir)
for info in palettes.list_all():
    print(info)              # "Nord (nord)", or "broken (invalid)"

palette = palettes.load("nord")   # "nord.json" works too
colours = list(palette.base16().colors())
```

`list_all()` returns a `PaletteInfo` for every `.json` file, sorted by
file name; its `name` is `None` when the file's `name` could not be read.
`load()` and `list_all()` raise `PaletteLoadError` for missing files or
directories and for malformed JSON. `Palette.base16()` and
`Palette.base30()` raise `PaletteError` when that colour set is absent.

## Templates

`themer.engine.TemplateEngine` renders Jinja templates. In
`render_palette`, every base16 colour and, when the palette has them,
every base30 colour is available by name, along with `name`. Two filters
help you write colours:

- `hex_hash`: `{{ base00 | hex_hash }}` gives `#2e3440` for a `base00` of
  `2e3440`
- `rgb`: `{{ base08 | rgb }}` gives `rgb(191, 97, 106)` for `bf616a`, and
  `{{ base08 | rgb(a=0.5) }}` gives `rgba(191, 97, 106, 0.50)`; a leading
  `#` is accepted

```python
from themer.engine import TemplateEngine

engine = TemplateEngine()
text = engine.render_palette(
    "alacritty",
    "background = '{{ base00 | hex_hash }}'",
    palette,
)
```

`render(name, content, context)` renders with any mapping of variables,
and `create_context(palette)` gives the variables `render_palette` uses.
Template syntax errors, undefined variables and bad filter input (not a
string, not six hex digits, alpha outside 0 to 1) raise `TemplateError`. A
palette without base16 colours raises `PaletteError` from
`create_context` and `render_palette`. The filters themselves, in
`themer.filters`, raise `ColorFilterError`.

## Console output

`themer.output` offers `header`, `success`, `warning`, `info`, `error`
(printed to standard error) and `item(badge, name, description=None)` for
coloured, iconed messages.

## What themer does not do

themer has no command-line program. It reads configuration, palettes and
templates and returns rendered text, but it does not write that text to a
target's `output` file, does not act on a target's `mode`, and does not
run `reload_cmd`; that is left to the code that uses it.