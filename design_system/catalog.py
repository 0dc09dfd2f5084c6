"""
Button Catalog
==============
Enumerates every button variant for the gallery, in declaration order.
"""

from typing import Callable, List, Optional

from .components.variants import (
    PROFILE_ICON,
    ButtonConfig,
    ButtonIcon,
    ButtonSize,
    ButtonStyle,
    ButtonType,
    IconPlacement,
)

# Per (type, style, size): leading, none, trailing
PLACEMENT_ORDER = (IconPlacement.LEADING, None, IconPlacement.TRAILING)


def button_label(
    button_type: ButtonType,
    style: ButtonStyle,
    size: ButtonSize,
    placement: Optional[IconPlacement] = None,
) -> str:
    """Human readable label, e.g. "Primary Filled Large Leading"."""
    parts = [button_type.value, style.value, size.value]
    if placement is not None:
        parts.append(placement.value)
    return " ".join(p.capitalize() for p in parts)


def enumerate_button_configs(
    icon_name: str = PROFILE_ICON,
    action: Optional[Callable[[], None]] = None,
) -> List[ButtonConfig]:
    """
    Full cross-product of type x style x size x icon placement.

    Order is stable: each enum in declaration order, placements as
    leading, none, trailing.
    """
    configs = []
    for button_type in ButtonType:
        for style in ButtonStyle:
            for size in ButtonSize:
                for placement in PLACEMENT_ORDER:
                    icon = ButtonIcon(placement, icon_name) if placement is not None else None
                    kwargs = dict(
                        type=button_type,
                        style=style,
                        size=size,
                        icon=icon,
                        title=button_label(button_type, style, size, placement),
                    )
                    if action is not None:
                        kwargs["action"] = action
                    configs.append(ButtonConfig(**kwargs))
    return configs
