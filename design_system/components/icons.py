"""
Icon Provider
=============
Resolves symbolic icon names to tintable, resizable Pillow images.

Icons are drawn once at a high base resolution as white-on-transparent masks,
then downscaled and tinted on request. Unknown names resolve to a fully
transparent placeholder.
"""

from typing import Callable, Dict, Optional, Tuple

from PIL import Image, ImageColor, ImageDraw

from ..config import get_logger

log = get_logger("icons")

BASE_SIZE = 256


def _draw_person_fill(draw: ImageDraw.ImageDraw, size: int):
    """Filled person silhouette: round head over a rounded torso."""
    head_r = size * 0.22
    cx = size / 2
    head_cy = size * 0.28
    draw.ellipse(
        [cx - head_r, head_cy - head_r, cx + head_r, head_cy + head_r],
        fill=(255, 255, 255, 255),
    )
    draw.rounded_rectangle(
        [size * 0.10, size * 0.58, size * 0.90, size * 0.98],
        radius=int(size * 0.20),
        fill=(255, 255, 255, 255),
    )


ICON_DRAWERS: Dict[str, Callable[[ImageDraw.ImageDraw, int], None]] = {
    "person.fill": _draw_person_fill,
}


class IconImage:
    """A single-color icon mask that can be scaled and tinted."""

    def __init__(self, name: str, mask: Image.Image, placeholder: bool = False):
        self.name = name
        self._mask = mask
        self.placeholder = placeholder

    @property
    def size(self) -> Tuple[int, int]:
        return self._mask.size

    def scaled(self, size: int) -> Image.Image:
        """Uniformly scale to a size x size RGBA image."""
        return self._mask.resize((size, size), Image.LANCZOS)

    def tinted(self, color: str, size: Optional[int] = None) -> Image.Image:
        """Fill the icon's alpha mask with a single color."""
        source = self.scaled(size) if size else self._mask.copy()
        r, g, b = ImageColor.getrgb(color)[:3]
        tinted = Image.new("RGBA", source.size, (r, g, b, 0))
        tinted.putalpha(source.getchannel("A"))
        return tinted


class IconProvider:
    """
    Named icon lookup with a per-name cache.

    Usage:
        icons = IconProvider()
        image = icons.get("person.fill").tinted("#FFFFFF", size=22)
    """

    def __init__(self, drawers: Optional[Dict[str, Callable]] = None, base_size: int = BASE_SIZE):
        self._drawers = dict(ICON_DRAWERS if drawers is None else drawers)
        self._base_size = base_size
        self._cache: Dict[str, IconImage] = {}

    def names(self):
        return sorted(self._drawers)

    def get(self, name: str) -> IconImage:
        """Return the icon for ``name`` or a transparent placeholder."""
        if name in self._cache:
            return self._cache[name]

        mask = Image.new("RGBA", (self._base_size, self._base_size), (0, 0, 0, 0))
        drawer = self._drawers.get(name)
        if drawer is None:
            log.warning(f"Unknown icon {name!r}, using empty placeholder")
            icon = IconImage(name, mask, placeholder=True)
        else:
            drawer(ImageDraw.Draw(mask), self._base_size)
            icon = IconImage(name, mask)

        self._cache[name] = icon
        return icon


_default_provider: Optional[IconProvider] = None


def get_icon_provider() -> IconProvider:
    """Shared provider used when callers do not pass their own."""
    global _default_provider
    if _default_provider is None:
        _default_provider = IconProvider()
    return _default_provider
