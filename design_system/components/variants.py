"""
Button Variants
===============
Closed option sets that describe one button, and the ButtonConfig composite.

Variant table:

    axis        values                      drives
    ----        ------                      ------
    type        primary|secondary|tertiary  main/detail color pair
    style       filled|bordered|text        fill vs. outline vs. plain text
    size        large|small                 height, icon, border, font
    icon        leading|trailing|None       icon position around the title
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional


class ButtonType(str, Enum):
    """Determines the base color pairing."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"


class ButtonStyle(str, Enum):
    """Determines the visual treatment."""

    FILLED = "filled"
    BORDERED = "bordered"
    TEXT = "text"


class ButtonSize(str, Enum):
    """Determines height, icon size, border width and font."""

    LARGE = "large"
    SMALL = "small"


class IconPlacement(str, Enum):
    """Where the icon sits relative to the title."""

    LEADING = "leading"
    TRAILING = "trailing"


PROFILE_ICON = "person.fill"


@dataclass(frozen=True)
class ButtonIcon:
    """An icon name plus its placement. "No icon" is ``None`` on the config."""

    placement: IconPlacement
    name: str = PROFILE_ICON

    @classmethod
    def leading(cls, name: str = PROFILE_ICON) -> "ButtonIcon":
        return cls(IconPlacement.LEADING, name)

    @classmethod
    def trailing(cls, name: str = PROFILE_ICON) -> "ButtonIcon":
        return cls(IconPlacement.TRAILING, name)


def _noop():
    return None


@dataclass(frozen=True)
class ButtonConfig:
    """
    Everything needed to render one button.

    Equality and hashing use (type, style, size, title); the action callback
    and the icon take no part in identity.
    """

    type: ButtonType
    title: str
    action: Callable[[], None] = field(default=_noop, compare=False, repr=False)
    style: ButtonStyle = ButtonStyle.FILLED
    size: ButtonSize = ButtonSize.LARGE
    icon: Optional[ButtonIcon] = field(default=None, compare=False)

    def __post_init__(self):
        if not isinstance(self.title, str):
            raise TypeError(f"Button title must be a string, got {type(self.title).__name__}")
        if not callable(self.action):
            raise TypeError("Button action must be callable")

    @property
    def placement(self) -> Optional[IconPlacement]:
        """Icon placement, or None when the button has no icon."""
        return self.icon.placement if self.icon is not None else None
