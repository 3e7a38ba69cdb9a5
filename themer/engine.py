"""Rendering palette templates with Jinja2."""

from __future__ import annotations

from typing import Any, Mapping

import jinja2

from themer.filters import ColorFilterError, hex_hash, rgb
from themer.palette_models import Palette, PaletteError


class TemplateError(Exception):
    """Raised when a template cannot be parsed or rendered."""


def _autoescape(template_name: str | None) -> bool:
    if template_name is None:
        return False
    return template_name.endswith((".html", ".htm", ".xml"))


class TemplateEngine:
    """Renders named templates with the colour filters registered."""

    def __init__(self) -> None:
        self._templates: dict[str, str] = {}
        self._env = jinja2.Environment(
            loader=jinja2.DictLoader(self._templates),
            undefined=jinja2.StrictUndefined,
            keep_trailing_newline=True,
            autoescape=_autoescape,
        )
        self._env.filters["hex_hash"] = hex_hash
        self._env.filters["rgb"] = rgb

    @property
    def filters(self) -> Mapping[str, Any]:
        """The filters available to templates."""
        return self._env.filters

    def create_context(self, palette: Palette) -> dict[str, str]:
        """Template variables for a palette: its name, base16 and, if present, base30 colours.

        Raises PaletteError when the palette has no base16 colours.
        """
        context = {"name": palette.name}
        context.update(palette.base16().to_dict())
        try:
            base30 = palette.base30()
        except PaletteError:
            return context
        context.update(base30.to_dict())
        return context

    def render(
        self,
        template_name: str,
        template_content: str,
        context: Mapping[str, Any],
    ) -> str:
        """Register ``template_content`` under ``template_name`` and render it."""
        previous = self._templates.get(template_name)
        self._templates[template_name] = template_content
        try:
            template = self._env.get_template(template_name)
        except jinja2.TemplateError as exc:
            if previous is None:
                self._templates.pop(template_name, None)
            else:
                self._templates[template_name] = previous
            raise TemplateError(
                f"Failed to parse template '{template_name}': {exc}"
            ) from exc
        try:
            return template.render(dict(context))
        except (jinja2.TemplateError, ColorFilterError) as exc:
            raise TemplateError(
                f"Failed to render '{template_name}': {exc}"
            ) from exc

    def render_palette(
        self,
        template_name: str,
        template_content: str,
        palette: Palette,
    ) -> str:
        """Render a template with the variables of ``palette``."""
        context = self.create_context(palette)
        return self.render(template_name, template_content, context)