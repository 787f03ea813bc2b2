"""
Semicircular arc meter for the total score, as a standalone SVG string.

Scores 0..100 sweep the upper half circle left to right: score s sits at
270 + s/100 * 180 degrees (0 degrees pointing up).
"""

import math
from typing import Dict, Tuple

from .bands import band_ranges, classify

CENTER_X = 200
CENTER_Y = 160
RADIUS = 150
STROKE_WIDTH = 30
VIEW_BOX = "0 0 400 250"

def _num(x: float) -> str:
    s = f"{x:.2f}".rstrip("0").rstrip(".")
    return "0" if s in ("-0", "") else s

def polar_to_cartesian(cx: float, cy: float, radius: float, angle_deg: float) -> Tuple[float, float]:
    rad = (angle_deg - 90) * math.pi / 180
    return cx + radius * math.cos(rad), cy + radius * math.sin(rad)

def score_to_angle(score: float) -> float:
    return 270 + (score / 100) * 180

def arc_path(start: float, end: float) -> str:
    mapped_start = score_to_angle(start)
    mapped_end = score_to_angle(end)

    sx, sy = polar_to_cartesian(CENTER_X, CENTER_Y, RADIUS, mapped_end)
    ex, ey = polar_to_cartesian(CENTER_X, CENTER_Y, RADIUS, mapped_start)
    large_arc = "0" if mapped_end - mapped_start <= 180 else "1"

    return " ".join([
        "M", _num(sx), _num(sy),
        "A", _num(RADIUS), _num(RADIUS), "0", large_arc, "0", _num(ex), _num(ey),
    ])

def gauge_color(score: float) -> str:
    return classify(score).hex_color

def display_score(score: float) -> int:
    # half-up, matching what the badge and percentile show
    return int(math.floor(score + 0.5))

def gauge_model(score: float) -> Dict[str, object]:
    s = max(0.0, min(100.0, float(score)))
    color = gauge_color(s)
    return {
        "background": [
            {"path": arc_path(lo, hi), "color": band.hex_color, "label": band.label}
            for lo, hi, band in band_ranges()
        ],
        "value_path": arc_path(0, s),
        "color": color,
        "text": str(display_score(s)),
    }

def render_gauge_svg(score: float) -> str:
    m = gauge_model(score)
    parts = [f'<svg viewBox="{VIEW_BOX}" xmlns="http://www.w3.org/2000/svg" style="width:100%;max-width:32rem;">']
    for arc in m["background"]:
        parts.append(
            f'<path d="{arc["path"]}" fill="none" stroke="{arc["color"]}" '
            f'stroke-width="{STROKE_WIDTH}" opacity="0.3"/>'
        )
    parts.append(
        f'<path d="{m["value_path"]}" fill="none" stroke="{m["color"]}" stroke-width="{STROKE_WIDTH}"/>'
    )
    parts.append(
        f'<circle cx="{CENTER_X}" cy="{CENTER_Y}" r="45" fill="white" stroke="{m["color"]}" stroke-width="3"/>'
    )
    parts.append(
        f'<text x="{CENTER_X}" y="{CENTER_Y}" text-anchor="middle" dominant-baseline="middle" '
        f'font-size="36" font-weight="700" fill="{m["color"]}">{m["text"]}</text>'
    )
    parts.append("</svg>")
    return "".join(parts)
