from dataclasses import dataclass
from typing import Dict, List, Tuple

@dataclass(frozen=True)
class Category:
    name: str
    title: str
    fields: Tuple[Tuple[str, str], ...]  # (field_name, label)
    cap: float  # caps across all categories sum to 100

    @property
    def field_names(self) -> List[str]:
        return [f for f, _ in self.fields]

CATEGORIES: Dict[str, Category] = {
    "market_product_fit": Category(
        name="market_product_fit",
        title="Market & Product Fit",
        fields=(
            ("market_size", "Market Size"),
            ("product_uniqueness", "Product Uniqueness"),
            ("customer_validation", "Customer Validation"),
        ),
        cap=30,
    ),
    "financial_health": Category(
        name="financial_health",
        title="Financial Health",
        fields=(
            ("revenue_stage", "Revenue Stage"),
            ("gross_margins", "Gross Margins"),
            ("financial_projections", "Financial Projections"),
        ),
        cap=20,
    ),
    "team_execution": Category(
        name="team_execution",
        title="Team & Execution",
        fields=(
            ("founders_experience", "Founders Experience"),
            ("team_composition", "Team Composition"),
            ("execution_capability", "Execution Capability"),
        ),
        cap=20,
    ),
    "scalability_risk": Category(
        name="scalability_risk",
        title="Scalability & Risk",
        fields=(
            ("scalability", "Scalability"),
            ("risks", "Risks"),
            ("industry_trends", "Industry Trends"),
        ),
        cap=15,
    ),
    "funding_readiness": Category(
        name="funding_readiness",
        title="Funding Readiness",
        fields=(
            ("funding_clarity", "Funding Clarity"),
            ("previous_investment", "Previous Investment"),
            ("investor_fit", "Investor Fit"),
        ),
        cap=15,
    ),
}

FIELD_NAMES: List[str] = [f for c in CATEGORIES.values() for f in c.field_names]

FIELD_LABELS: Dict[str, str] = {f: label for c in CATEGORIES.values() for f, label in c.fields}

MAX_TOTAL: float = sum(c.cap for c in CATEGORIES.values())

MIN_FIELD_SCORE = 0.0
MAX_FIELD_SCORE = 10.0

def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(p.title() for p in rest)

# Form keys use camelCase (marketSize); the engine uses snake_case.
FIELD_ALIASES: Dict[str, str] = {_camel(f): f for f in FIELD_NAMES}

def canonical_field(key: str) -> str:
    return FIELD_ALIASES.get(key, key)
