import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from .categories import FIELD_LABELS, FIELD_NAMES, MAX_FIELD_SCORE, MIN_FIELD_SCORE, canonical_field

@dataclass
class InputCheck:
    ok: bool
    invalid: List[str]   # non-blank but not a number in [0, 10]
    blank: List[str]
    completeness_pct: int

    def messages(self) -> List[str]:
        return [f"{FIELD_LABELS[f]} must be a number between 0 and 10." for f in self.invalid]

def _blank(x) -> bool:
    if x is None:
        return True
    if isinstance(x, str):
        return len(x.strip()) == 0
    return False

def is_valid_score(value: Any) -> bool:
    """
    Gate used before evaluation: the value must parse to a finite number
    within [0, 10]. Blank values are not valid.
    """
    if _blank(value) or isinstance(value, bool):
        return False
    if isinstance(value, str) and "_" in value:
        return False
    try:
        num = float(value)
    except (TypeError, ValueError):
        return False
    if math.isnan(num) or math.isinf(num):
        return False
    return MIN_FIELD_SCORE <= num <= MAX_FIELD_SCORE

def check_inputs(raw: Optional[Mapping[str, Any]]) -> InputCheck:
    given: Dict[str, Any] = {canonical_field(k): v for k, v in (raw or {}).items()}

    invalid: List[str] = []
    blank: List[str] = []
    for f in FIELD_NAMES:
        v = given.get(f)
        if _blank(v):
            blank.append(f)
        elif not is_valid_score(v):
            invalid.append(f)

    total = len(FIELD_NAMES)
    filled = total - len(blank)
    pct = int((filled / total) * 100)

    return InputCheck(
        ok=not invalid and not blank,
        invalid=invalid,
        blank=blank,
        completeness_pct=pct,
    )
