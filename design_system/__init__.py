"""
Design System
=============
Button components, design tokens and a gallery of every button variant.
"""

from .theme import (
    BUTTON_PALETTE,
    BUTTON_METRICS,
    GALLERY_CONFIG,
    TYPOGRAPHY,
    ButtonPalette,
    ButtonMetrics,
    tk_font,
)
from .catalog import button_label, enumerate_button_configs


# Gallery window - only import if needed so the pure modules load without Tk
def launch_button_library():
    """Launch the button library window."""
    from .button_library import launch_button_library as _launch
    _launch()


__all__ = [
    "BUTTON_PALETTE",
    "BUTTON_METRICS",
    "GALLERY_CONFIG",
    "TYPOGRAPHY",
    "ButtonPalette",
    "ButtonMetrics",
    "tk_font",
    "button_label",
    "enumerate_button_configs",
    "launch_button_library",
]
