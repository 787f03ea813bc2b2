from typing import Dict, List

from .categories import CATEGORIES
from .scoring import FundingScoreResult

def _fmt(x: float) -> str:
    return f"{x:.1f}"

def explain_result(result: FundingScoreResult) -> Dict[str, object]:
    """
    Returns:
    - categories: one row per category, in catalogue order
    - weakest_categories (2) by share of cap
    - strongest_categories (2) by share of cap
    """
    rows: List[Dict[str, object]] = []

    for name, cat in CATEGORIES.items():
        s = float(result.category_scores.get(name, 0.0))
        pct = round((s / cat.cap) * 100, 1) if cat.cap else 0.0
        rows.append({
            "category": name,
            "title": cat.title,
            "score": s,
            "cap": cat.cap,
            "percent": pct,
            "display": f"{_fmt(s)}/{cat.cap:g}",
        })

    # stable sort keeps catalogue order among ties
    sorted_by_pct = sorted(rows, key=lambda r: r["percent"])
    weakest = sorted_by_pct[:2]
    strongest = sorted(rows, key=lambda r: r["percent"], reverse=True)[:2]

    return {
        "categories": rows,
        "weakest_categories": [{"category": r["category"], "title": r["title"], "percent": r["percent"]} for r in weakest],
        "strongest_categories": [{"category": r["category"], "title": r["title"], "percent": r["percent"]} for r in strongest],
    }
