"""Load colour palettes and configuration, and render palettes through Jinja templates."""

__version__ = "0.1.0"