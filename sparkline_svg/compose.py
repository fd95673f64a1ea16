from __future__ import annotations

from dataclasses import astuple, dataclass
import hashlib
from typing import Sequence
import xml.etree.ElementTree as ET

import numpy as np

from sparkline_svg.colors import gradient_rgb
from sparkline_svg.config import RenderConfig
from sparkline_svg.paths import format_coord
from sparkline_svg.scales import Point

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

FILL_TOP_OPACITY = 0.3
SPLINE_OVERSHOOT_RATIO = 0.15
FADE_STEPS = 6


@dataclass(frozen=True)
class RenderResult:
    svg: str
    is_up: bool


EMPTY_RESULT = RenderResult(svg="", is_up=True)


@dataclass(frozen=True)
class FadeStop:
    offset: float
    opacity: float


@dataclass(frozen=True)
class ElementIds:
    fill_gradient: str
    fade_mask: str
    fade_gradient: str


def overlay_padding(config: RenderConfig) -> float:
    """Inset that keeps the marker and spline overshoot inside the canvas.

    The marker term applies first; smoothing then adds a share of the plot
    height left over by that padding.
    """

    padding = float(config.padding)
    if config.show_knob:
        padding = max(padding, config.knob_size / 2.0 + config.stroke_width / 2.0)
    if config.smooth:
        plot_height = config.height - 2.0 * padding
        padding += plot_height * config.smooth_tension * SPLINE_OVERSHOOT_RATIO
    return padding


def resolve_trend(values: Sequence[float] | np.ndarray) -> bool:
    return bool(values[-1] >= values[0])


def resolve_stroke_color(config: RenderConfig, is_up: bool) -> str:
    if config.custom_color and config.custom_color.strip():
        return config.custom_color.strip()
    return config.up_color if is_up else config.down_color


def ease_out(t: float) -> float:
    return 1.0 - (1.0 - t) ** 3


def fade_stops(fade_amount: float, *, fade_right: bool) -> list[FadeStop]:
    """Opacity stops for the horizontal edge fade, offsets in [0, 1]."""

    fraction = min(fade_amount / 100.0, 0.5 if fade_right else 1.0)

    stops = [FadeStop(fraction * (j / FADE_STEPS), ease_out(j / FADE_STEPS)) for j in range(FADE_STEPS + 1)]
    if fade_right:
        stops.extend(
            FadeStop(1.0 - fraction * (j / FADE_STEPS), ease_out(j / FADE_STEPS))
            for j in range(FADE_STEPS, -1, -1)
        )
    else:
        stops.append(FadeStop(1.0, 1.0))
    return stops


def element_ids(config: RenderConfig, line_path: str) -> ElementIds:
    prefix = config.id_prefix
    if prefix is None:
        digest = hashlib.sha1(f"{line_path}|{astuple(config)!r}".encode("utf-8")).hexdigest()
        prefix = f"spark-{digest[:10]}"
    return ElementIds(
        fill_gradient=f"{prefix}-fill",
        fade_mask=f"{prefix}-fade",
        fade_gradient=f"{prefix}-fade-gradient",
    )


def compose_document(
    line_path: str,
    fill_path: str | None,
    points: Sequence[Point],
    values: Sequence[float] | np.ndarray,
    config: RenderConfig,
) -> RenderResult:
    is_up = resolve_trend(values)
    stroke = resolve_stroke_color(config, is_up)
    ids = element_ids(config, line_path)
    width = _format_length(config.width)
    height = _format_length(config.height)

    root = ET.Element(
        "svg",
        {
            "width": width,
            "height": height,
            "viewBox": f"0 0 {width} {height}",
            "fill": "none",
            "xmlns": SVG_NAMESPACE,
        },
    )
    defs = ET.SubElement(root, "defs")
    _append_fill_gradient(defs, ids.fill_gradient, stroke)
    if config.fade_edges:
        _append_fade_mask(defs, ids, config, width=width, height=height)

    group_attrs = {"mask": f"url(#{ids.fade_mask})"} if config.fade_edges else {}
    group = ET.SubElement(root, "g", group_attrs)
    if fill_path:
        ET.SubElement(group, "path", {"d": fill_path, "fill": f"url(#{ids.fill_gradient})"})
    ET.SubElement(
        group,
        "path",
        {
            "d": line_path,
            "stroke": stroke,
            "stroke-width": _format_length(config.stroke_width),
            "stroke-linecap": "round",
            "stroke-linejoin": "round",
            "fill": "none",
        },
    )

    # Marker sits outside the masked group.
    if config.show_knob:
        tip = points[-1]
        ET.SubElement(
            root,
            "circle",
            {
                "cx": format_coord(tip.x),
                "cy": format_coord(tip.y),
                "r": format_coord(config.knob_size / 2.0),
                "fill": config.background_color,
                "stroke": stroke,
                "stroke-width": _format_length(config.stroke_width),
            },
        )

    return RenderResult(svg=ET.tostring(root, encoding="unicode"), is_up=is_up)


def _append_fill_gradient(defs: ET.Element, gradient_id: str, stroke: str) -> None:
    stop_color = gradient_rgb(stroke)
    gradient = ET.SubElement(
        defs,
        "linearGradient",
        {"id": gradient_id, "x1": "0", "y1": "0", "x2": "0", "y2": "1"},
    )
    ET.SubElement(
        gradient,
        "stop",
        {"offset": "0%", "stop-color": stop_color, "stop-opacity": _format_ratio(FILL_TOP_OPACITY)},
    )
    ET.SubElement(
        gradient,
        "stop",
        {"offset": "100%", "stop-color": stop_color, "stop-opacity": "0"},
    )


def _append_fade_mask(defs: ET.Element, ids: ElementIds, config: RenderConfig, *, width: str, height: str) -> None:
    gradient = ET.SubElement(
        defs,
        "linearGradient",
        {"id": ids.fade_gradient, "x1": "0", "y1": "0", "x2": "1", "y2": "0"},
    )
    # No right fade while a marker is shown.
    for stop in fade_stops(config.fade_amount, fade_right=not config.show_knob):
        ET.SubElement(
            gradient,
            "stop",
            {
                "offset": f"{stop.offset * 100.0:.2f}%",
                "stop-color": "#ffffff",
                "stop-opacity": _format_ratio(stop.opacity),
            },
        )
    mask = ET.SubElement(
        defs,
        "mask",
        {
            "id": ids.fade_mask,
            "maskUnits": "userSpaceOnUse",
            "x": "0",
            "y": "0",
            "width": width,
            "height": height,
        },
    )
    ET.SubElement(
        mask,
        "rect",
        {"x": "0", "y": "0", "width": width, "height": height, "fill": f"url(#{ids.fade_gradient})"},
    )


def _format_length(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return format_coord(value)


def _format_ratio(value: float) -> str:
    return f"{value:.4g}"
