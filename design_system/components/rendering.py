"""
Button Renderer
===============
Pure conversion of a ButtonConfig into an immutable element tree.

The tree is what gets mounted as a widget: children are laid out
horizontally, wrapped in the resolved treatment and bound to the action.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple, Union

from ..theme import BUTTON_METRICS, BUTTON_PALETTE, ButtonMetrics, ButtonPalette
from .styles import ResolvedButtonStyle, resolve_button_style
from .variants import ButtonConfig, IconPlacement


@dataclass(frozen=True)
class IconElement:
    name: str
    size: int
    tint: str


@dataclass(frozen=True)
class TitleElement:
    text: str
    font_size: int
    font_weight: str
    color: str


Child = Union[IconElement, TitleElement]


@dataclass(frozen=True)
class ButtonElement:
    """A displayable button: horizontal children inside a styled capsule."""

    style: ResolvedButtonStyle
    children: Tuple[Child, ...]
    spacing: int
    action: Callable[[], None] = field(compare=False, repr=False)

    @property
    def placement(self) -> Optional[IconPlacement]:
        if len(self.children) < 2:
            return None
        if isinstance(self.children[0], IconElement):
            return IconPlacement.LEADING
        return IconPlacement.TRAILING

    @property
    def title(self) -> TitleElement:
        return next(c for c in self.children if isinstance(c, TitleElement))

    @property
    def icon(self) -> Optional[IconElement]:
        return next((c for c in self.children if isinstance(c, IconElement)), None)

    def activate(self) -> None:
        """Invoke the bound action once."""
        self.action()


def render_button(
    config: ButtonConfig,
    palette: ButtonPalette = BUTTON_PALETTE,
    metrics: ButtonMetrics = BUTTON_METRICS,
) -> ButtonElement:
    """
    Build the element tree for one button.

    Leading icon -> (icon, title); trailing icon -> (title, icon);
    no icon -> (title,).
    """
    style = resolve_button_style(config.type, config.style, config.size, palette, metrics)

    title = TitleElement(
        text=config.title,
        font_size=style.font_size,
        font_weight=style.font_weight,
        color=style.foreground_color,
    )

    children: Tuple[Child, ...] = (title,)
    if config.icon is not None:
        icon = IconElement(name=config.icon.name, size=style.icon_size, tint=style.foreground_color)
        if config.icon.placement is IconPlacement.LEADING:
            children = (icon, title)
        else:
            children = (title, icon)

    return ButtonElement(
        style=style,
        children=children,
        spacing=metrics.ICON_SPACING,
        action=config.action,
    )
