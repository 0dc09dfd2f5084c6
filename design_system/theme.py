"""
Design System - Design Tokens
=============================
Single source of truth for button and gallery styling.
Colors follow the iOS system palette; dimensions are in pixels.
"""

from dataclasses import dataclass
from typing import Tuple
import platform


# =============================================================================
# COLOR TOKENS
# =============================================================================

@dataclass(frozen=True)
class ButtonPalette:
    """
    Main/detail color pair per button type.

    The main color fills a filled button and strokes/tints the bordered and
    text buttons. The detail color is the foreground on a filled button.
    """

    # Primary (system blue)
    PRIMARY_MAIN: str = "#007AFF"
    PRIMARY_DETAIL: str = "#FFFFFF"

    # Secondary (system cyan)
    SECONDARY_MAIN: str = "#32ADE6"
    SECONDARY_DETAIL: str = "#FFFFFF"

    # Tertiary (system teal)
    TERTIARY_MAIN: str = "#30B0C7"
    TERTIARY_DETAIL: str = "#FFFFFF"

    # Surfaces, as customtkinter (light, dark) pairs
    TRANSPARENT: str = "transparent"
    BG: Tuple[str, str] = ("#F2F2F7", "#000000")        # Grouped background
    SURFACE: Tuple[str, str] = ("#FFFFFF", "#1C1C1E")   # Gallery card
    DIVIDER: Tuple[str, str] = ("#C6C6C8", "#38383A")   # Separator
    TEXT: Tuple[str, str] = ("#000000", "#FFFFFF")      # Header text


BUTTON_PALETTE = ButtonPalette()


# =============================================================================
# SIZE TOKENS
# =============================================================================

@dataclass(frozen=True)
class ButtonMetrics:
    """Button sizing per ButtonSize row (large / small)."""

    HEIGHT_LG: int = 48
    HEIGHT_SM: int = 42

    ICON_SIZE_LG: int = 22
    ICON_SIZE_SM: int = 18

    BORDER_WIDTH_LG: int = 2
    BORDER_WIDTH_SM: int = 1

    FONT_SIZE_LG: int = 17
    FONT_SIZE_SM: int = 15
    FONT_WEIGHT: str = "semibold"

    ICON_SPACING: int = 8


BUTTON_METRICS = ButtonMetrics()


# =============================================================================
# TYPOGRAPHY TOKENS
# =============================================================================

def get_system_font() -> str:
    """Get the appropriate system font for the current platform."""
    system = platform.system()
    if system == "Windows":
        return "Segoe UI"
    elif system == "Darwin":  # macOS
        return "SF Pro Text"
    else:
        return "Ubuntu"  # Linux fallback


# Tk only knows "normal" and "bold"
TK_FONT_WEIGHTS = {
    "regular": "normal",
    "medium": "normal",
    "semibold": "bold",
    "bold": "bold",
}


@dataclass(frozen=True)
class Typography:
    """Font family and the gallery's heading sizes."""

    FAMILY: str = get_system_font()
    SIZE_TITLE: int = 28
    SIZE_CAPTION: int = 13


TYPOGRAPHY = Typography()


def tk_font(size: int, weight: str = "regular") -> tuple:
    """Build a Tk font tuple (family, size, weight) from a design weight."""
    return (TYPOGRAPHY.FAMILY, size, TK_FONT_WEIGHTS.get(weight, "normal"))


# =============================================================================
# GALLERY TOKENS
# =============================================================================

@dataclass(frozen=True)
class GalleryConfig:
    """Layout of the button gallery screen."""

    TITLE: str = "Button Library"
    ROW_HEIGHT: int = 56
    DIVIDER_HEIGHT: int = 1
    PADDING_X: int = 16
    PADDING_Y: int = 16


GALLERY_CONFIG = GalleryConfig()
