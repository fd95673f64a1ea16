from sparkline_svg.adapters import INTERVAL_SAMPLES, normalize_samples, sample_every, sample_for_interval
from sparkline_svg.compose import EMPTY_RESULT, RenderResult, overlay_padding
from sparkline_svg.config import (
    DARK_THEME,
    LIGHT_THEME,
    RenderConfig,
    SparklineTheme,
    config_from_options,
    resolve_canvas_size,
    resolve_theme,
)
from sparkline_svg.document import SparklineDocument
from sparkline_svg.errors import SparklineDataError
from sparkline_svg.render import render_sparkline
from sparkline_svg.scales import Point

__all__ = [
    "DARK_THEME",
    "EMPTY_RESULT",
    "INTERVAL_SAMPLES",
    "LIGHT_THEME",
    "Point",
    "RenderConfig",
    "RenderResult",
    "SparklineDataError",
    "SparklineDocument",
    "SparklineTheme",
    "config_from_options",
    "normalize_samples",
    "overlay_padding",
    "render_sparkline",
    "resolve_canvas_size",
    "resolve_theme",
    "sample_every",
    "sample_for_interval",
]
