# fundscore/scoring.py

ENGINE_VERSION = "1.0.0"
RULESET_VERSION = "1.0.0"

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .categories import (
    CATEGORIES,
    FIELD_NAMES,
    MAX_FIELD_SCORE,
    MIN_FIELD_SCORE,
    canonical_field,
)
from .config import FIELD_POLICIES, get_settings

logger = logging.getLogger(__name__)


class ScoreInputError(ValueError):
    """Raised under the "reject" policy when fields fall outside [0, 10]."""

    def __init__(self, fields: List[str]):
        self.fields = list(fields)
        super().__init__(
            f"Scores must be between {MIN_FIELD_SCORE:g} and {MAX_FIELD_SCORE:g}: {', '.join(self.fields)}"
        )


@dataclass(frozen=True)
class FundingScoreResult:
    total_score: float
    category_scores: Mapping[str, float]
    field_values: Mapping[str, float]

    @property
    def rounded_total(self) -> int:
        return int(math.floor(self.total_score + 0.5))


def parse_score(value: Any) -> float:
    """Permissive float parse: blanks, junk and NaN all become 0.0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        # float() accepts "1_0"; the form never sends digit separators
        if not value or "_" in value:
            return 0.0
    try:
        num = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(num):
        return 0.0
    return num


def clamp_field(score: float) -> float:
    return max(MIN_FIELD_SCORE, min(MAX_FIELD_SCORE, float(score)))


def category_score(values: Iterable[float], cap: float) -> float:
    return min(sum(values), cap)


def _normalize(raw: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for k, v in (raw or {}).items():
        out[canonical_field(k)] = v
    return out


def _apply_policy(values: Dict[str, float], policy: str) -> Dict[str, float]:
    if policy == "reject":
        bad = [f for f in FIELD_NAMES if not (MIN_FIELD_SCORE <= values[f] <= MAX_FIELD_SCORE)]
        if bad:
            logger.warning("Rejected out-of-range scores: %s", bad)
            raise ScoreInputError(bad)
        return values

    if policy == "clamp":
        clamped = {f: clamp_field(v) for f, v in values.items()}
        changed = [f for f in FIELD_NAMES if clamped[f] != values[f]]
        if changed:
            logger.info("Clamped out-of-range scores into [0, 10]: %s", changed)
        return clamped

    # permissive: only the category cap applies; -inf would poison the sum
    return {f: (0.0 if v == -math.inf else v) for f, v in values.items()}


def evaluate(raw: Optional[Mapping[str, Any]], field_policy: Optional[str] = None) -> FundingScoreResult:
    policy = field_policy or get_settings().field_policy
    if policy not in FIELD_POLICIES:
        raise ValueError(f"Unknown field policy: {policy!r} (expected one of {', '.join(FIELD_POLICIES)})")

    given = _normalize(raw)
    values = {f: parse_score(given.get(f)) for f in FIELD_NAMES}
    values = _apply_policy(values, policy)

    category_scores: Dict[str, float] = {}
    for name, cat in CATEGORIES.items():
        category_scores[name] = category_score((values[f] for f in cat.field_names), cat.cap)

    total = sum(category_scores.values())
    logger.debug("Evaluated funding score total=%s policy=%s", total, policy)

    return FundingScoreResult(
        total_score=total,
        category_scores=MappingProxyType(category_scores),
        field_values=MappingProxyType(values),
    )
