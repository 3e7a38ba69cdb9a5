"""Coloured status messages for the terminal."""

from __future__ import annotations

import sys

from termcolor import colored

ICON_SUCCESS = "✓"
ICON_ERROR = "✗"
ICON_WARNING = "⚠"
ICON_INFO = "ℹ"
ICON_BULLET = "•"


def _bold(text: str, color: str) -> str:
    return colored(text, color, attrs=["bold"])


def header(text: str) -> None:
    print(f"\n{_bold(text, 'cyan')}")


def success(text: str) -> None:
    print(f"{_bold(ICON_SUCCESS, 'green')} {text}")


def error(text: str) -> None:
    print(f"{_bold(ICON_ERROR, 'red')} {text}", file=sys.stderr)


def warning(text: str) -> None:
    print(f"{_bold(ICON_WARNING, 'yellow')} {text}")


def info(text: str) -> None:
    print(f"{_bold(ICON_INFO, 'blue')} {text}")


def item(badge: str | None, name: str, description: str | None = None) -> None:
    """Print a bulleted list entry with an optional badge and description."""
    bullet = colored(ICON_BULLET, attrs=["dark"])
    badge_str = f"[{colored(badge, 'cyan')}] " if badge is not None else ""
    name_str = colored(name, "green")
    if description is not None:
        print(f"  {bullet} {badge_str}{name_str} {colored(description, attrs=['dark'])}")
    else:
        print(f"  {bullet} {badge_str}{name_str}")