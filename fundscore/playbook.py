from typing import Any, Dict, List

from .bands import band_labels_ascending, classify, guidance_tier
from .categories import MAX_TOTAL
from .explain import explain_result
from .scoring import ENGINE_VERSION, RULESET_VERSION, FundingScoreResult

LOW_SHARE_PCT = 40.0

DEFAULT_ACTIONS = {
    "market_product_fit": [
        "Size the addressable market bottom-up and cite sources.",
        "Sharpen what makes the product hard to copy.",
        "Collect evidence of demand: pilots, LOIs or paying customers.",
    ],
    "financial_health": [
        "Document current revenue stage and monthly run-rate.",
        "Show unit economics and a path to healthy gross margins.",
        "Build an 18-24 month projection with explicit assumptions.",
    ],
    "team_execution": [
        "Highlight founders' relevant domain and startup experience.",
        "Identify key hires needed to close skill gaps.",
        "Show shipped milestones against the roadmap.",
    ],
    "scalability_risk": [
        "Explain how cost to serve changes as customers grow.",
        "List top risks with a mitigation and owner for each.",
        "Tie the plan to current industry trends and tailwinds.",
    ],
    "funding_readiness": [
        "State the raise amount, runway and use of funds.",
        "Summarize prior investment and notable backers.",
        "Shortlist investors whose thesis and stage match yours.",
    ],
}

def build_playbook(result: FundingScoreResult) -> Dict[str, Any]:
    total = result.total_score
    band = classify(total)
    tier = guidance_tier(total)
    breakdown = explain_result(result)

    weak = breakdown["weakest_categories"]
    actions: List[Dict[str, Any]] = []
    for w in weak:
        name = w["category"]
        actions.append({
            "category": name,
            "title": w["title"],
            "percent": w["percent"],
            "recommended_actions": DEFAULT_ACTIONS.get(name, []),
        })

    flags = []
    for row in breakdown["categories"]:
        if row["percent"] < LOW_SHARE_PCT:
            flags.append(f"Low score in '{row['title']}' ({row['display']}).")

    return {
        "total_score": total,
        "rounded_score": result.rounded_total,
        "max_score": MAX_TOTAL,
        "band": {
            "label": band.label,
            "color": band.color,
            "hex_color": band.hex_color,
            "severity": band.severity,
        },
        "summary": band.summary,
        "next_steps": band.next_steps,
        "focus_areas": tier.focus_areas,
        "funding_strategy": tier.funding_strategy,
        "breakdown": breakdown,
        "actions": actions,
        "flags": flags,
        "comparative": {
            "percentile": result.rounded_total,
            "labels": band_labels_ascending(),
        },
        "engine_version": ENGINE_VERSION,
        "ruleset_version": RULESET_VERSION,
    }
