"""
Button Library
==============
Gallery of every button variant for visual review.
Run: python -m design_system.button_library
"""

from typing import Callable, List, Optional

import customtkinter as ctk

from .catalog import enumerate_button_configs
from .components.icons import IconProvider, get_icon_provider
from .components.variants import ButtonConfig, ButtonStyle
from .components.widgets import make_button
from .config import (
    WINDOW_GEOMETRY,
    WINDOW_MIN_SIZE,
    WINDOW_TITLE,
    get_appearance_mode,
    get_logger,
)
from .theme import BUTTON_PALETTE, GALLERY_CONFIG, TYPOGRAPHY, tk_font

log = get_logger("button_library")


class ButtonLibrary(ctk.CTkFrame):
    """Titled, scrollable list with one fixed-height row per button variant."""

    def __init__(
        self,
        parent,
        configs: Optional[List[ButtonConfig]] = None,
        icons: Optional[IconProvider] = None,
        on_press: Optional[Callable[[ButtonConfig], None]] = None,
        **kwargs
    ):
        super().__init__(parent, fg_color=BUTTON_PALETTE.BG, corner_radius=0, **kwargs)

        self._icons = icons or get_icon_provider()
        self._on_press = on_press
        self.configs = configs if configs is not None else enumerate_button_configs()
        self.buttons = []

        # Title
        title = ctk.CTkLabel(
            self,
            text=GALLERY_CONFIG.TITLE,
            font=tk_font(TYPOGRAPHY.SIZE_TITLE, "bold"),
            text_color=BUTTON_PALETTE.TEXT,
            anchor="w",
        )
        title.pack(fill="x", padx=GALLERY_CONFIG.PADDING_X, pady=(GALLERY_CONFIG.PADDING_Y, 8))

        # Scrollable body
        self.body = ctk.CTkScrollableFrame(self, fg_color=BUTTON_PALETTE.SURFACE)
        self.body.pack(fill="both", expand=True)

        for config in self.configs:
            self.buttons.append(add_button_row(self.body, config, self._icons, self._on_press))

        log.info(f"Button library built with {len(self.configs)} variants")


def bind_press(config: ButtonConfig, on_press: Callable[[ButtonConfig], None]) -> ButtonConfig:
    """Copy of ``config`` whose action reports the original config to ``on_press``."""
    return ButtonConfig(
        type=config.type,
        style=config.style,
        size=config.size,
        icon=config.icon,
        title=config.title,
        action=lambda: on_press(config),
    )


def add_button_row(
    body,
    config: ButtonConfig,
    icons: IconProvider,
    on_press: Optional[Callable[[ButtonConfig], None]] = None,
):
    """
    Append one fixed-height row holding the button, followed by a divider.

    Text buttons hug their content; filled and bordered buttons fill the row.
    Returns the mounted button.
    """
    row = ctk.CTkFrame(body, height=GALLERY_CONFIG.ROW_HEIGHT, fg_color="transparent")
    row.pack(fill="x", padx=GALLERY_CONFIG.PADDING_X)
    row.pack_propagate(False)

    if on_press is not None:
        config = bind_press(config, on_press)

    button = make_button(row, config, icons=icons)
    if config.style is ButtonStyle.TEXT:
        button.pack(expand=True)
    else:
        button.pack(fill="x", expand=True)

    divider = ctk.CTkFrame(
        body,
        height=GALLERY_CONFIG.DIVIDER_HEIGHT,
        fg_color=BUTTON_PALETTE.DIVIDER,
        corner_radius=0,
    )
    divider.pack(fill="x", padx=GALLERY_CONFIG.PADDING_X)
    return button


def launch_button_library():
    """Open the gallery in its own window and run the Tk main loop."""
    ctk.set_appearance_mode(get_appearance_mode())

    root = ctk.CTk()
    root.title(WINDOW_TITLE)
    root.geometry(WINDOW_GEOMETRY)
    root.minsize(*WINDOW_MIN_SIZE)

    library = ButtonLibrary(root, on_press=lambda c: log.info(f"Pressed {c.title!r}"))
    library.pack(fill="both", expand=True)

    root.mainloop()


if __name__ == "__main__":
    launch_button_library()
