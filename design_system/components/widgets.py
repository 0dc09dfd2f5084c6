"""
Button Widgets - customtkinter
==============================
Mounts a rendered ButtonElement as a CTkButton.

Includes:
- mount_button() for an already rendered element
- make_button() factory that renders and mounts a ButtonConfig
"""

from typing import Optional

import customtkinter as ctk

from ..config import get_logger
from ..theme import BUTTON_METRICS, BUTTON_PALETTE, ButtonMetrics, ButtonPalette, tk_font
from .icons import IconProvider, get_icon_provider
from .rendering import ButtonElement, render_button
from .variants import ButtonConfig, IconPlacement

log = get_logger("widgets")

COMPOUND = {
    IconPlacement.LEADING: "left",
    IconPlacement.TRAILING: "right",
}


def make_icon_image(element: ButtonElement, icons: IconProvider) -> Optional[ctk.CTkImage]:
    """CTkImage for the element's icon, tinted to the foreground color."""
    icon = element.icon
    if icon is None:
        return None
    image = icons.get(icon.name).tinted(icon.tint, size=icon.size * 2)
    return ctk.CTkImage(light_image=image, dark_image=image, size=(icon.size, icon.size))


def mount_button(parent, element: ButtonElement, icons: Optional[IconProvider] = None) -> ctk.CTkButton:
    """
    Create a CTkButton from a rendered element.

    Args:
        parent: Parent widget
        element: Output of render_button()
        icons: Icon provider (defaults to the shared provider)

    Returns:
        CTkButton bound to element.activate; caller handles geometry
        (pack with fill="x" when element.style.expands)
    """
    icons = icons or get_icon_provider()
    style = element.style
    title = element.title

    config = dict(
        master=parent,
        text=title.text,
        command=element.activate,
        height=style.height,
        width=0,
        corner_radius=style.corner_radius,
        font=tk_font(title.font_size, title.font_weight),
        text_color=style.foreground_color,
        fg_color=style.background_color,
        border_color=style.border_color,
        border_width=style.stroke_width,
        hover=False,
    )

    image = make_icon_image(element, icons)
    if image is not None:
        config.update(image=image, compound=COMPOUND[element.placement])

    log.debug(f"Mounting {style.treatment.value} button {title.text!r}")
    return ctk.CTkButton(**config)


def make_button(
    parent,
    config: ButtonConfig,
    palette: ButtonPalette = BUTTON_PALETTE,
    metrics: ButtonMetrics = BUTTON_METRICS,
    icons: Optional[IconProvider] = None,
) -> ctk.CTkButton:
    """Render and mount a ButtonConfig in one step."""
    return mount_button(parent, render_button(config, palette, metrics), icons)
