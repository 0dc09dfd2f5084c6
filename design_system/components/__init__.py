"""
Button Components
=================
Variant model, style resolver, renderer and icon provider.

The customtkinter binding lives in ``design_system.components.widgets`` and
is imported on demand.
"""

from .variants import (
    PROFILE_ICON,
    ButtonConfig,
    ButtonIcon,
    ButtonSize,
    ButtonStyle,
    ButtonType,
    IconPlacement,
)

from .styles import (
    TREATMENTS,
    ResolvedButtonStyle,
    resolve_button_style,
    size_metrics,
    type_colors,
)

from .rendering import (
    ButtonElement,
    IconElement,
    TitleElement,
    render_button,
)

from .icons import (
    IconImage,
    IconProvider,
    get_icon_provider,
)
