from __future__ import annotations

import logging
from typing import Optional

LOGGER = logging.getLogger(__name__)

RGBA = tuple[int, int, int, int]

FALLBACK_RGBA: RGBA = (0, 0, 0, 255)


def parse_color(value: Optional[str]) -> Optional[RGBA]:
    """Parse ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa``, ``rgb()`` and ``rgba()``."""

    if not value:
        return None
    value = value.strip()
    if value.startswith("#"):
        return _parse_hex(value[1:])
    if value.startswith("rgb"):
        open_idx = value.find("(")
        close_idx = value.find(")")
        if open_idx < 0 or close_idx < open_idx:
            return None
        numbers = [n.strip() for n in value[open_idx + 1 : close_idx].split(",")]
        if len(numbers) not in (3, 4):
            return None
        try:
            r, g, b = (int(n) for n in numbers[:3])
            a = int(round(float(numbers[3]) * 255)) if len(numbers) == 4 else 255
        except ValueError:
            return None
        if not all(0 <= c <= 255 for c in (r, g, b, a)):
            return None
        return (r, g, b, a)
    return None


def _parse_hex(hex_value: str) -> Optional[RGBA]:
    try:
        if len(hex_value) in (3, 4):
            channels = [int(ch * 2, 16) for ch in hex_value]
        elif len(hex_value) in (6, 8):
            channels = [int(hex_value[i : i + 2], 16) for i in range(0, len(hex_value), 2)]
        else:
            return None
    except ValueError:
        return None
    if len(channels) == 3:
        channels.append(255)
    r, g, b, a = channels
    return (r, g, b, a)


def gradient_rgb(color: str) -> str:
    """Render ``color`` as ``rgb(r, g, b)`` for gradient stops, black when unparseable."""

    rgba = parse_color(color)
    if rgba is None:
        LOGGER.warning("unparseable sparkline color %r; gradient falls back to black", color)
        rgba = FALLBACK_RGBA
    r, g, b, _ = rgba
    return f"rgb({r}, {g}, {b})"
