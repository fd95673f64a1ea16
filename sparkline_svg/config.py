from __future__ import annotations

from dataclasses import asdict, dataclass, fields
import math
import numbers
import re
from typing import Any, Literal, Mapping

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")

ThemeName = Literal["dark", "light"]


@dataclass(frozen=True)
class SparklineTheme:
    """Palette supplying the color defaults of a render."""

    up_color: str = "#22C55E"
    down_color: str = "#EF4444"
    background_color: str = "#000000"

    def __post_init__(self) -> None:
        for key in ("up_color", "down_color", "background_color"):
            value = getattr(self, key)
            if not isinstance(value, str) or not _HEX_COLOR.match(value):
                raise ValueError(f"Theme color `{key}` must be a hex color (#RRGGBB or #RRGGBBAA)")


DARK_THEME = SparklineTheme()
LIGHT_THEME = SparklineTheme(background_color="#f4f4f5")

_THEMES: dict[str, SparklineTheme] = {"dark": DARK_THEME, "light": LIGHT_THEME}


def resolve_theme(name: ThemeName | str = "dark") -> SparklineTheme:
    try:
        return _THEMES[name]
    except KeyError:
        raise ValueError(f"Unknown theme: {name}") from None


@dataclass(frozen=True)
class RenderConfig:
    """Options for a single sparkline render.

    Colors are free-form strings; anything the gradient cannot parse degrades
    to black at compose time instead of failing validation here.
    """

    width: float
    height: float
    fill: bool
    stroke_width: float = 2.0
    padding: float = 4.0
    up_color: str = DARK_THEME.up_color
    down_color: str = DARK_THEME.down_color
    custom_color: str | None = None
    smooth: bool = False
    smooth_tension: float = 0.5
    show_knob: bool = False
    knob_size: float = 8.0
    background_color: str = DARK_THEME.background_color
    fade_edges: bool = False
    fade_amount: float = 30.0
    id_prefix: str | None = None

    def __post_init__(self) -> None:
        for key in ("width", "height", "stroke_width", "padding", "knob_size"):
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
                raise ValueError(f"RenderConfig {key} must be a finite number")
        for key in ("up_color", "down_color", "background_color"):
            if not isinstance(getattr(self, key), str):
                raise ValueError(f"RenderConfig {key} must be a color string")
        if self.custom_color is not None and not isinstance(self.custom_color, str):
            raise ValueError("RenderConfig custom_color must be a color string or None")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("RenderConfig width/height must be > 0")
        if self.stroke_width < 0:
            raise ValueError("RenderConfig stroke_width must be >= 0")
        if self.padding < 0:
            raise ValueError("RenderConfig padding must be >= 0")
        if not 0.0 < self.smooth_tension <= 1.0:
            raise ValueError("RenderConfig smooth_tension must be in (0, 1]")
        if self.knob_size <= 0:
            raise ValueError("RenderConfig knob_size must be > 0")
        if not 0.0 < self.fade_amount <= 100.0:
            raise ValueError("RenderConfig fade_amount must be in (0, 100]")
        if self.id_prefix is not None and not (
            isinstance(self.id_prefix, str) and re.match(r"^[A-Za-z_][\w.-]*$", self.id_prefix)
        ):
            raise ValueError("RenderConfig id_prefix must be a valid XML id")


# camelCase option names used by the web controls.
_CAMEL_ALIASES = {
    "strokeWidth": "stroke_width",
    "upColor": "up_color",
    "downColor": "down_color",
    "customColor": "custom_color",
    "smoothTension": "smooth_tension",
    "showKnob": "show_knob",
    "knobSize": "knob_size",
    "backgroundColor": "background_color",
    "fadeEdges": "fade_edges",
    "fadeAmount": "fade_amount",
    "idPrefix": "id_prefix",
}

_BOOL_OPTIONS = ("fill", "smooth", "show_knob", "fade_edges")
_NUMBER_OPTIONS = ("width", "height", "stroke_width", "padding", "smooth_tension", "knob_size", "fade_amount")


def config_from_options(options: Mapping[str, Any], *, theme: ThemeName | str = "dark") -> RenderConfig:
    """Merge option overrides onto theme defaults and build a `RenderConfig`.

    Keys may be snake_case field names or the camelCase names of the web
    controls. `width`, `height` and `fill` are required.
    """

    palette = resolve_theme(theme)
    known = {f.name for f in fields(RenderConfig)}
    raw: dict[str, Any] = asdict(palette)
    for key, value in options.items():
        name = _CAMEL_ALIASES.get(key, key)
        if name not in known:
            raise ValueError(f"Unknown render option: {key}")
        raw[name] = value

    for key in ("width", "height", "fill"):
        if key not in raw:
            raise ValueError(f"Render option `{key}` is required")

    for key in _BOOL_OPTIONS:
        if key in raw and not isinstance(raw[key], bool):
            raise ValueError(f"Render option `{key}` must be a boolean")
    for key in _NUMBER_OPTIONS:
        if key not in raw:
            continue
        value = raw[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Render option `{key}` must be a number")
        raw[key] = float(value)

    custom = raw.get("custom_color")
    if isinstance(custom, str) and not custom.strip():
        raw["custom_color"] = None

    return RenderConfig(**raw)


def resolve_canvas_size(
    width: int | None = None,
    height: int | None = None,
    *,
    aspect_ratio: float,
) -> tuple[int, int]:
    """Fill in a missing canvas dimension from a locked width/height ratio."""

    if aspect_ratio <= 0:
        raise ValueError("aspect_ratio must be > 0")
    if width is None and height is None:
        raise ValueError("width or height is required")
    if width is None and height is not None:
        if height <= 0:
            raise ValueError("height must be > 0")
        width = max(1, int(round(height * aspect_ratio)))
    elif width is not None and height is None:
        if width <= 0:
            raise ValueError("width must be > 0")
        height = max(1, int(round(width / aspect_ratio)))
    assert width is not None and height is not None
    return width, height
