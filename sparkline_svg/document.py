from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import re
from typing import Optional
import xml.etree.ElementTree as ET

from sparkline_svg.colors import RGBA, parse_color

_PATH_TOKEN = re.compile(r"[MLCZ]|-?\d+(?:\.\d+)?")
_URL_REF = re.compile(r"^url\(#([^)]+)\)$")


@dataclass(frozen=True)
class SvgPath:
    d: str
    fill: Optional[str]
    stroke: Optional[str]
    stroke_width: float
    mask: Optional[str]

    @property
    def commands(self) -> list[str]:
        return [tok for tok in _PATH_TOKEN.findall(self.d) if tok.isalpha()]

    @property
    def numbers(self) -> list[str]:
        """Numeric tokens as written, so callers can check their formatting."""

        return [tok for tok in _PATH_TOKEN.findall(self.d) if not tok.isalpha()]

    @property
    def coordinates(self) -> list[tuple[float, float]]:
        nums = [float(n) for n in self.numbers]
        return list(zip(nums[0::2], nums[1::2]))


@dataclass(frozen=True)
class SvgCircle:
    cx: float
    cy: float
    r: float
    fill: Optional[RGBA]
    stroke: Optional[RGBA]
    stroke_width: float


@dataclass(frozen=True)
class GradientStop:
    offset: float
    color: Optional[RGBA]
    opacity: float


@dataclass(frozen=True)
class SvgGradient:
    id: str
    vertical: bool
    stops: list[GradientStop]


@dataclass
class SparklineDocument:
    """Typed view over a rendered sparkline, for inspection and post-processing."""

    width: float
    height: float
    viewbox: tuple[float, float, float, float]
    paths: list[SvgPath]
    circles: list[SvgCircle]
    gradients: dict[str, SvgGradient]
    masks: dict[str, Optional[str]]

    @classmethod
    def from_file(cls, path: Path) -> "SparklineDocument":
        tree = ET.parse(path)
        return cls._from_root(tree.getroot())

    @classmethod
    def from_markup(cls, svg_markup: str) -> "SparklineDocument":
        root = ET.fromstring(svg_markup)
        return cls._from_root(root)

    @classmethod
    def _from_root(cls, root: ET.Element) -> "SparklineDocument":
        if _strip_namespace(root.tag) != "svg":
            raise ValueError("markup root is not an <svg> element")
        width = _parse_length(root.attrib.get("width"))
        height = _parse_length(root.attrib.get("height"))
        viewbox = _parse_viewbox(root.attrib.get("viewBox"))
        if viewbox is None:
            viewbox = (0.0, 0.0, width or 0.0, height or 0.0)
        paths: list[SvgPath] = []
        circles: list[SvgCircle] = []
        gradients: dict[str, SvgGradient] = {}
        masks: dict[str, Optional[str]] = {}
        _walk(root, None, paths, circles, gradients, masks)
        return cls(
            width=width if width is not None else viewbox[2],
            height=height if height is not None else viewbox[3],
            viewbox=viewbox,
            paths=paths,
            circles=circles,
            gradients=gradients,
            masks=masks,
        )

    @property
    def stroke_path(self) -> Optional[SvgPath]:
        for path in self.paths:
            if path.stroke:
                return path
        return None

    @property
    def fill_path(self) -> Optional[SvgPath]:
        for path in self.paths:
            if path.fill and path.fill != "none":
                return path
        return None

    def gradient_for(self, ref: Optional[str]) -> Optional[SvgGradient]:
        gradient_id = _url_target(ref)
        if gradient_id is None:
            return None
        return self.gradients.get(gradient_id)

    def mask_gradient(self, ref: Optional[str]) -> Optional[SvgGradient]:
        mask_id = _url_target(ref)
        if mask_id is None or mask_id not in self.masks:
            return None
        return self.gradient_for(self.masks[mask_id])


def _walk(
    elem: ET.Element,
    mask: Optional[str],
    paths: list[SvgPath],
    circles: list[SvgCircle],
    gradients: dict[str, SvgGradient],
    masks: dict[str, Optional[str]],
) -> None:
    for child in elem:
        tag = _strip_namespace(child.tag)
        if tag == "g":
            _walk(child, child.attrib.get("mask", mask), paths, circles, gradients, masks)
        elif tag == "defs":
            _walk(child, mask, paths, circles, gradients, masks)
        elif tag == "path":
            paths.append(_parse_path(child, mask))
        elif tag == "circle":
            circles.append(_parse_circle(child))
        elif tag == "linearGradient":
            gradient = _parse_gradient(child)
            gradients[gradient.id] = gradient
        elif tag == "mask":
            rect = next((c for c in child if _strip_namespace(c.tag) == "rect"), None)
            masks[child.attrib.get("id", "")] = rect.attrib.get("fill") if rect is not None else None


def _strip_namespace(tag: str) -> str:
    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag


def _url_target(ref: Optional[str]) -> Optional[str]:
    if not ref:
        return None
    match = _URL_REF.match(ref.strip())
    return match.group(1) if match else None


def _parse_length(value: Optional[str]) -> Optional[float]:
    if not value:
        return None
    value = value.strip()
    if value.endswith("px"):
        value = value[:-2]
    try:
        return float(value)
    except ValueError:
        return None


def _parse_viewbox(value: Optional[str]) -> Optional[tuple[float, float, float, float]]:
    if not value:
        return None
    parts = value.replace(",", " ").split()
    if len(parts) != 4:
        return None
    try:
        return tuple(float(p) for p in parts)  # type: ignore[return-value]
    except ValueError:
        return None


def _parse_offset(value: Optional[str]) -> float:
    if not value:
        return 0.0
    value = value.strip()
    if value.endswith("%"):
        return (_parse_length(value[:-1]) or 0.0) / 100.0
    return _parse_length(value) or 0.0


def _parse_path(elem: ET.Element, mask: Optional[str]) -> SvgPath:
    return SvgPath(
        d=elem.attrib.get("d", ""),
        fill=elem.attrib.get("fill"),
        stroke=elem.attrib.get("stroke"),
        stroke_width=_parse_length(elem.attrib.get("stroke-width")) or 0.0,
        mask=mask,
    )


def _parse_circle(elem: ET.Element) -> SvgCircle:
    return SvgCircle(
        cx=_parse_length(elem.attrib.get("cx")) or 0.0,
        cy=_parse_length(elem.attrib.get("cy")) or 0.0,
        r=_parse_length(elem.attrib.get("r")) or 0.0,
        fill=parse_color(elem.attrib.get("fill")),
        stroke=parse_color(elem.attrib.get("stroke")),
        stroke_width=_parse_length(elem.attrib.get("stroke-width")) or 0.0,
    )


def _parse_gradient(elem: ET.Element) -> SvgGradient:
    stops = [
        GradientStop(
            offset=_parse_offset(stop.attrib.get("offset")),
            color=parse_color(stop.attrib.get("stop-color")),
            opacity=(_parse_length(stop.attrib.get("stop-opacity")) or 0.0) if stop.attrib.get("stop-opacity") else 1.0,
        )
        for stop in elem
        if _strip_namespace(stop.tag) == "stop"
    ]
    x1 = _parse_length(elem.attrib.get("x1")) or 0.0
    x2 = _parse_length(elem.attrib.get("x2")) or 0.0
    return SvgGradient(id=elem.attrib.get("id", ""), vertical=x1 == x2, stops=stops)
