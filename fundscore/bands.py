"""
Score bands (86/71/51/31) and the coarser guidance tiers (50/70).

ScoreBand carries the overview and next-steps text only; the funding
strategy sentence comes from funding_strategy(total), which uses the tiers.
"""

import math
from dataclasses import dataclass
from typing import List, Optional

@dataclass(frozen=True)
class ScoreBand:
    lower_bound: float  # inclusive
    label: str
    severity: int  # 0 = best
    color: str
    hex_color: str
    summary: str
    next_steps: str

@dataclass(frozen=True)
class GuidanceTier:
    upper_bound: Optional[float]  # exclusive; None = open-ended
    focus_areas: str
    funding_strategy: str

# Highest first: classify() takes the first band whose bound the total meets.
BANDS: List[ScoreBand] = [
    ScoreBand(
        lower_bound=86,
        label="Expansion",
        severity=0,
        color="blue",
        hex_color="#3B82F6",
        summary="Ready for expansion funding. Focus on scaling operations and market expansion.",
        next_steps="Focus on scaling operations and expanding market presence.",
    ),
    ScoreBand(
        lower_bound=71,
        label="Growth",
        severity=1,
        color="green",
        hex_color="#22C55E",
        summary="Strong growth potential. Consider Series A funding and team expansion.",
        next_steps="Prepare for Series A funding and strengthen growth metrics.",
    ),
    ScoreBand(
        lower_bound=51,
        label="Seed",
        severity=2,
        color="yellow",
        hex_color="#EAB308",
        summary="Ready for seed funding. Focus on market validation and MVP refinement.",
        next_steps="Validate market fit and refine your MVP.",
    ),
    ScoreBand(
        lower_bound=31,
        label="Early",
        severity=3,
        color="orange",
        hex_color="#F97316",
        summary="Early stage. Focus on product development and initial market testing.",
        next_steps="Focus on product development and initial traction.",
    ),
    ScoreBand(
        lower_bound=0,
        label="Not Ready",
        severity=4,
        color="red",
        hex_color="#EF4444",
        summary="Need to strengthen fundamentals before seeking funding.",
        next_steps="Build core fundamentals and strengthen your value proposition.",
    ),
]

# Absorbs float noise such as 30.999999999999996 from summing fractions.
EDGE_TOLERANCE = 1e-9

# Coarser cut points (50 / 70) than BANDS; both sets are kept as-is.
GUIDANCE_TIERS: List[GuidanceTier] = [
    GuidanceTier(
        upper_bound=50,
        focus_areas="Build fundamental strengths and market validation.",
        funding_strategy="Focus on angel investors and early-stage grants.",
    ),
    GuidanceTier(
        upper_bound=70,
        focus_areas="Scale operations and strengthen team.",
        funding_strategy="Target seed funding and strategic investors.",
    ),
    GuidanceTier(
        upper_bound=None,
        focus_areas="Expand market presence and optimize growth metrics.",
        funding_strategy="Prepare for Series A and institutional investors.",
    ),
]

def classify(total: float) -> ScoreBand:
    if total is None or (isinstance(total, float) and math.isnan(total)):
        return BANDS[-1]
    for band in BANDS:
        if total >= band.lower_bound - EDGE_TOLERANCE:
            return band
    return BANDS[-1]

def guidance_tier(total: float) -> GuidanceTier:
    if total is None or (isinstance(total, float) and math.isnan(total)):
        return GUIDANCE_TIERS[0]
    for tier in GUIDANCE_TIERS:
        if tier.upper_bound is None or total < tier.upper_bound - EDGE_TOLERANCE:
            return tier
    return GUIDANCE_TIERS[-1]

def focus_areas(total: float) -> str:
    return guidance_tier(total).focus_areas

def funding_strategy(total: float) -> str:
    return guidance_tier(total).funding_strategy

def band_labels_ascending() -> List[str]:
    return [b.label for b in reversed(BANDS)]

def band_ranges() -> List[tuple]:
    """
    Display ranges used by the gauge, lowest band first:
    [(0, 30, band), (31, 50, band), ...]. Integer ranges, as drawn.
    """
    out = []
    upper = 100
    for band in BANDS:
        out.append((band.lower_bound, upper, band))
        upper = band.lower_bound - 1
    return list(reversed(out))
