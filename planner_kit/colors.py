"""
Tab and header colours.

Colours are CMYK percentages (0-100) as a press would take them. Screen
previews convert them to RGB hex.
"""

from typing import List, Optional, Sequence

from .dates import MONTH_NAMES


def cmyk_to_rgb_hex(cmyk: Sequence[float]) -> str:
    """Naive CMYK to ``#rrggbb``, good enough for a preview."""
    c, m, y, k = (max(0.0, min(100.0, v)) / 100 for v in cmyk)
    rgb = (round(255 * (1 - v) * (1 - k)) for v in (c, m, y))
    return "#" + "".join(f"{v:02x}" for v in rgb)


def interpolate_color(start: Sequence[float], end: Sequence[float], ratio: float) -> List[float]:
    """Linear CMYK interpolation, ratio clamped to [0, 1], components rounded to 0.1."""
    ratio = max(0.0, min(1.0, ratio))
    return [round(a + (b - a) * ratio, 1) for a, b in zip(start, end)]


def tab_colors(
    start: Sequence[float],
    end: Sequence[float],
    middle: Optional[Sequence[float]] = None,
    three_color_mode: bool = False,
) -> List[List[float]]:
    """
    One CMYK colour per month.

    Two-colour mode runs January (start) to December (end). Three-colour mode
    runs January-June from start to middle and July-December from middle to
    end.
    """
    colors = []
    for i in range(len(MONTH_NAMES)):
        if three_color_mode and middle is not None:
            if i < 6:
                colors.append(interpolate_color(start, middle, i / 5))
            else:
                colors.append(interpolate_color(middle, end, (i - 6) / 5))
        else:
            colors.append(interpolate_color(start, end, i / 11))
    return colors


def tab_color_name(month: int) -> str:
    return f"Tab_{MONTH_NAMES[month]}"
