from __future__ import annotations

import logging
from typing import Any

from sparkline_svg.adapters.normalize import normalize_samples
from sparkline_svg.compose import EMPTY_RESULT, RenderResult, compose_document, overlay_padding
from sparkline_svg.config import RenderConfig
from sparkline_svg.paths import build_fill_outline, build_outline
from sparkline_svg.scales import map_points

LOGGER = logging.getLogger(__name__)


def render_sparkline(samples: Any, config: RenderConfig) -> RenderResult:
    """Render ``samples`` as a standalone SVG sparkline.

    ``samples`` is an ordered sequence of ``(timestamp, value)`` pairs (or any
    input `normalize_samples` accepts). Fewer than two finite values yield
    `EMPTY_RESULT` rather than an error.
    """

    values = normalize_samples(samples)
    if values.size < 2:
        LOGGER.debug("sparkline skipped: %d usable sample(s)", values.size)
        return EMPTY_RESULT

    padding = overlay_padding(config)
    points = map_points(values, width=config.width, height=config.height, padding=padding)
    line_path = build_outline(points, smooth=config.smooth, tension=config.smooth_tension)
    fill_path = build_fill_outline(line_path, points, floor_y=config.height - padding) if config.fill else None

    result = compose_document(line_path, fill_path, points, values, config)
    LOGGER.debug(
        "sparkline rendered: %d points, padding=%.2f, is_up=%s, %d bytes",
        len(points),
        padding,
        result.is_up,
        len(result.svg),
    )
    return result
