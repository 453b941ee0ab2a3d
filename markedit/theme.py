"""A light colour theme modelled on GitHub's interface."""

from __future__ import annotations

from enum import Enum
from typing import Dict, NamedTuple, Union


class RGBA(NamedTuple):
    """A non-premultiplied colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int


class ColorName(str, Enum):
    """Names of the colours a theme provides."""

    BACKGROUND = "background"
    BUTTON = "button"
    DISABLED = "disabled"
    DISABLED_BUTTON = "disabledButton"
    ERROR = "error"
    FOCUS = "focus"
    FOREGROUND = "foreground"
    HOVER = "hover"
    INPUT_BACKGROUND = "inputBackground"
    INPUT_BORDER = "inputBorder"
    PLACEHOLDER = "placeholder"
    PRESSED = "pressed"
    PRIMARY = "primary"
    SCROLL_BAR = "scrollBar"
    SELECTION = "selection"
    SEPARATOR = "separator"
    SHADOW = "shadow"
    SUCCESS = "success"
    WARNING = "warning"
    MENU_BACKGROUND = "menuBackground"
    OVERLAY_BACKGROUND = "overlayBackground"


_PALETTE: Dict[ColorName, RGBA] = {
    ColorName.BACKGROUND: RGBA(0xE6, 0xEA, 0xED, 0xFF),
    ColorName.BUTTON: RGBA(0xD0, 0xD7, 0xDE, 0xFF),
    ColorName.DISABLED: RGBA(0x95, 0x9D, 0xA5, 0xFF),
    ColorName.DISABLED_BUTTON: RGBA(0xF6, 0xF8, 0xFA, 0x80),
    ColorName.ERROR: RGBA(0xCB, 0x24, 0x31, 0xFF),
    ColorName.FOCUS: RGBA(0x03, 0x66, 0xD6, 0xFF),
    ColorName.FOREGROUND: RGBA(0x24, 0x29, 0x2E, 0xFF),
    ColorName.HOVER: RGBA(0xC8, 0xD3, 0xDE, 0xFF),
    ColorName.INPUT_BACKGROUND: RGBA(0xFF, 0xFF, 0xFF, 0xFF),
    ColorName.INPUT_BORDER: RGBA(0xD1, 0xD5, 0xDA, 0xFF),
    ColorName.PLACEHOLDER: RGBA(0x6A, 0x73, 0x7D, 0xFF),
    ColorName.PRESSED: RGBA(0xB0, 0xB7, 0xBE, 0xFF),
    ColorName.PRIMARY: RGBA(0x03, 0x66, 0xD6, 0xFF),
    ColorName.SCROLL_BAR: RGBA(0xD1, 0xD5, 0xDA, 0xFF),
    ColorName.SELECTION: RGBA(0x03, 0x66, 0xD6, 0x40),
    ColorName.SEPARATOR: RGBA(0xE1, 0xE4, 0xE8, 0xFF),
    ColorName.SHADOW: RGBA(0x00, 0x00, 0x00, 0x20),
    ColorName.SUCCESS: RGBA(0x2E, 0xA4, 0x4F, 0xFF),
    ColorName.WARNING: RGBA(0xD1, 0x9A, 0x66, 0xFF),
    ColorName.MENU_BACKGROUND: RGBA(0xD0, 0xD7, 0xDE, 0xFF),
    ColorName.OVERLAY_BACKGROUND: RGBA(0xD0, 0xD7, 0xDE, 0xFF),
}


class GitHubTheme:
    """Fixed light palette; there is no dark variant."""

    def color(self, name: Union[ColorName, str]) -> RGBA:
        """Return the colour for a name; raises ValueError for unknown names."""
        return _PALETTE[ColorName(name)]

    def hex_color(self, name: Union[ColorName, str]) -> str:
        """Return the colour as ``#rrggbb``; the alpha channel is dropped."""
        rgba = self.color(name)
        return f"#{rgba.r:02x}{rgba.g:02x}{rgba.b:02x}"