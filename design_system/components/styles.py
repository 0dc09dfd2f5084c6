"""
Button Style Resolver
=====================
Maps a (type, style, size) variant to concrete visual attributes.

Colors come from the type, dimensions from the size and the treatment
(which color goes where) from the style. Every table is keyed by the full
enum, so the mapping is total.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from ..theme import BUTTON_METRICS, BUTTON_PALETTE, ButtonMetrics, ButtonPalette
from .variants import ButtonSize, ButtonStyle, ButtonType


@dataclass(frozen=True)
class ResolvedButtonStyle:
    """Concrete rendering attributes for one button variant."""

    treatment: ButtonStyle
    primary_color: str
    secondary_color: str
    height: int
    border_width: int
    icon_size: int
    font_size: int
    font_weight: str
    background_color: str
    foreground_color: str
    border_color: str
    stroke_width: int
    corner_radius: int
    expands: bool


def type_colors(button_type: ButtonType, palette: ButtonPalette = BUTTON_PALETTE) -> Tuple[str, str]:
    """(main, detail) color pair for a button type."""
    table = {
        ButtonType.PRIMARY: (palette.PRIMARY_MAIN, palette.PRIMARY_DETAIL),
        ButtonType.SECONDARY: (palette.SECONDARY_MAIN, palette.SECONDARY_DETAIL),
        ButtonType.TERTIARY: (palette.TERTIARY_MAIN, palette.TERTIARY_DETAIL),
    }
    return table[button_type]


def size_metrics(size: ButtonSize, metrics: ButtonMetrics = BUTTON_METRICS) -> Dict[str, int]:
    """Height, icon size, border width and font size for a button size."""
    table = {
        ButtonSize.LARGE: {
            "height": metrics.HEIGHT_LG,
            "icon_size": metrics.ICON_SIZE_LG,
            "border_width": metrics.BORDER_WIDTH_LG,
            "font_size": metrics.FONT_SIZE_LG,
        },
        ButtonSize.SMALL: {
            "height": metrics.HEIGHT_SM,
            "icon_size": metrics.ICON_SIZE_SM,
            "border_width": metrics.BORDER_WIDTH_SM,
            "font_size": metrics.FONT_SIZE_SM,
        },
    }
    return dict(table[size])


# =============================================================================
# TREATMENTS
# =============================================================================

def _filled(main: str, detail: str, border_width: int, palette: ButtonPalette) -> dict:
    return dict(
        background_color=main,
        foreground_color=detail,
        border_color=main,
        stroke_width=0,
        expands=True,
    )


def _bordered(main: str, detail: str, border_width: int, palette: ButtonPalette) -> dict:
    return dict(
        background_color=palette.TRANSPARENT,
        foreground_color=main,
        border_color=main,
        stroke_width=border_width,
        expands=True,
    )


def _text(main: str, detail: str, border_width: int, palette: ButtonPalette) -> dict:
    return dict(
        background_color=palette.TRANSPARENT,
        foreground_color=main,
        border_color=main,
        stroke_width=0,
        expands=False,
    )


TREATMENTS: Dict[ButtonStyle, Callable[..., dict]] = {
    ButtonStyle.FILLED: _filled,
    ButtonStyle.BORDERED: _bordered,
    ButtonStyle.TEXT: _text,
}

if set(TREATMENTS) != set(ButtonStyle):
    raise RuntimeError("Every ButtonStyle needs exactly one treatment")


def resolve_button_style(
    button_type: ButtonType,
    style: ButtonStyle,
    size: ButtonSize,
    palette: ButtonPalette = BUTTON_PALETTE,
    metrics: ButtonMetrics = BUTTON_METRICS,
) -> ResolvedButtonStyle:
    """
    Resolve a button variant to its rendering attributes.

    Args:
        button_type: Picks the main/detail color pair
        style: Picks filled, bordered or text treatment
        size: Picks height, icon size, border width and font size
        palette: Color tokens (defaults to BUTTON_PALETTE)
        metrics: Size tokens (defaults to BUTTON_METRICS)

    Returns:
        ResolvedButtonStyle; border_width is reported for every style even
        where the treatment draws no border (stroke_width is what is drawn).
    """
    main, detail = type_colors(button_type, palette)
    dims = size_metrics(size, metrics)
    treatment = TREATMENTS[style](main, detail, dims["border_width"], palette)

    return ResolvedButtonStyle(
        treatment=style,
        primary_color=main,
        secondary_color=detail,
        height=dims["height"],
        border_width=dims["border_width"],
        icon_size=dims["icon_size"],
        font_size=dims["font_size"],
        font_weight=metrics.FONT_WEIGHT,
        corner_radius=dims["height"] // 2,
        **treatment,
    )
