"""Score aggregation tests: parsing defaults, category caps, totals, field policies."""

import math

import pytest

from fundscore.categories import CATEGORIES, FIELD_NAMES
from fundscore.scoring import (
    ScoreInputError,
    category_score,
    evaluate,
    parse_score,
)
from fundscore.bands import classify
from fundscore.config import get_settings


def _all(value):
    return {f: value for f in FIELD_NAMES}


def _only(**fields):
    raw = _all(0)
    raw.update(fields)
    return raw


# ===================================================================== #
#  parse_score                                                            #
# ===================================================================== #

class TestParseScore:
    @pytest.mark.parametrize("value,expected", [
        (7, 7.0),
        (7.5, 7.5),
        ("3.2", 3.2),
        (" 4 ", 4.0),
        ("", 0.0),
        ("   ", 0.0),
        (None, 0.0),
        ("abc", 0.0),
        (float("nan"), 0.0),
        ("nan", 0.0),
        ("1_0", 0.0),
        (True, 0.0),
        ([1, 2], 0.0),
    ])
    def test_values(self, value, expected):
        assert parse_score(value) == expected

    def test_negative_passes_through(self):
        assert parse_score("-2") == -2.0


# ===================================================================== #
#  category_score                                                         #
# ===================================================================== #

class TestCategoryScore:
    def test_under_cap_is_raw_sum(self):
        assert category_score([10, 10, 5], 30) == 25

    def test_over_cap_is_cap(self):
        assert category_score([10, 10, 10], 20) == 20

    def test_exactly_cap(self):
        assert category_score([5, 5, 5], 15) == 15


# ===================================================================== #
#  evaluate: concrete scenarios                                           #
# ===================================================================== #

class TestEvaluateScenarios:
    def test_all_tens_hits_every_cap(self):
        result = evaluate(_all(10), field_policy="clamp")
        for name, cat in CATEGORIES.items():
            assert result.category_scores[name] == cat.cap
        assert result.total_score == 100
        assert classify(result.total_score).label == "Expansion"

    def test_all_zeros(self):
        result = evaluate(_all(0), field_policy="clamp")
        assert result.total_score == 0
        assert classify(result.total_score).label == "Not Ready"

    def test_full_market_category_is_thirty(self):
        raw = _only(market_size=10, product_uniqueness=10, customer_validation=10)
        result = evaluate(raw, field_policy="clamp")
        assert result.category_scores["market_product_fit"] == 30
        assert result.total_score == 30
        assert classify(result.total_score).label == "Not Ready"

    def test_market_category_under_cap(self):
        raw = _only(market_size=10, product_uniqueness=10, customer_validation=5)
        result = evaluate(raw, field_policy="clamp")
        assert result.category_scores["market_product_fit"] == 25
        assert result.total_score == 25
        assert classify(result.total_score).label == "Not Ready"

    def test_financial_excess_is_discarded(self):
        raw = {"revenueStage": 10, "grossMargins": 10, "financialProjections": 10}
        result = evaluate(raw, field_policy="clamp")
        assert result.category_scores["financial_health"] == 20
        assert result.total_score == 20
        assert classify(result.total_score).label == "Not Ready"
        for name in ("market_product_fit", "team_execution", "scalability_risk", "funding_readiness"):
            assert result.category_scores[name] == 0


# ===================================================================== #
#  evaluate: properties                                                   #
# ===================================================================== #

class TestEvaluateProperties:
    @pytest.mark.parametrize("value", [0, 0.1, 2.5, 5, 7.3, 9.9, 10])
    def test_total_within_bounds_for_valid_input(self, value):
        result = evaluate(_all(value), field_policy="clamp")
        assert 0 <= result.total_score <= 100
        for name, cat in CATEGORIES.items():
            assert 0 <= result.category_scores[name] <= cat.cap

    def test_idempotent(self):
        raw = _only(market_size="7.5", risks=3, investor_fit="")
        first = evaluate(raw, field_policy="clamp")
        second = evaluate(raw, field_policy="clamp")
        assert first.total_score == second.total_score
        assert dict(first.category_scores) == dict(second.category_scores)

    def test_empty_string_equals_zero(self):
        with_blank = evaluate(_only(market_size=6, customer_validation=""), field_policy="clamp")
        with_zero = evaluate(_only(market_size=6, customer_validation=0), field_policy="clamp")
        assert with_blank.total_score == with_zero.total_score
        assert dict(with_blank.category_scores) == dict(with_zero.category_scores)

    def test_missing_fields_default_to_zero(self):
        result = evaluate({"market_size": 4}, field_policy="clamp")
        assert result.total_score == 4

    def test_none_input(self):
        assert evaluate(None, field_policy="clamp").total_score == 0

    def test_category_order_is_stable(self):
        result = evaluate(_all(1), field_policy="clamp")
        assert list(result.category_scores) == list(CATEGORIES)

    def test_result_mappings_are_read_only(self):
        result = evaluate(_all(1), field_policy="clamp")
        with pytest.raises(TypeError):
            result.category_scores["market_product_fit"] = 99

    def test_fractional_sum_is_not_rounded(self):
        result = evaluate(_only(market_size=0.1, product_uniqueness=0.2), field_policy="clamp")
        assert result.category_scores["market_product_fit"] == pytest.approx(0.3)

    def test_tiny_sum_is_kept(self):
        raw = _only(market_size=0.001, product_uniqueness=0.001, customer_validation=0.001)
        result = evaluate(raw, field_policy="clamp")
        assert result.category_scores["market_product_fit"] == 0.001 + 0.001 + 0.001
        assert result.total_score > 0

    def test_rounded_total(self):
        result = evaluate(_only(market_size=10, product_uniqueness=10, customer_validation=5.5), field_policy="clamp")
        assert result.total_score == 25.5
        assert result.rounded_total == 26


# ===================================================================== #
#  evaluate: out-of-range policies                                        #
# ===================================================================== #

class TestFieldPolicies:
    def test_clamp_caps_large_field(self):
        result = evaluate(_only(market_size=1000), field_policy="clamp")
        assert result.field_values["market_size"] == 10
        assert result.category_scores["market_product_fit"] == 10

    def test_clamp_floors_negative_field(self):
        result = evaluate(_only(market_size=-5, product_uniqueness=4), field_policy="clamp")
        assert result.category_scores["market_product_fit"] == 4
        assert result.total_score == 4

    def test_clamp_handles_infinities(self):
        result = evaluate(_only(market_size=math.inf, risks=-math.inf), field_policy="clamp")
        assert result.category_scores["market_product_fit"] == 10
        assert result.category_scores["scalability_risk"] == 0

    def test_reject_raises_with_field_names(self):
        with pytest.raises(ScoreInputError) as exc:
            evaluate(_only(market_size=-1, investor_fit=10.5), field_policy="reject")
        assert exc.value.fields == ["market_size", "investor_fit"]
        assert "market_size" in str(exc.value)

    def test_reject_is_a_value_error(self):
        with pytest.raises(ValueError):
            evaluate(_only(risks=11), field_policy="reject")

    def test_reject_accepts_bounds(self):
        assert evaluate(_all(10), field_policy="reject").total_score == 100
        assert evaluate(_all(0), field_policy="reject").total_score == 0

    def test_reject_treats_blank_as_zero(self):
        assert evaluate(_only(market_size=""), field_policy="reject").total_score == 0

    def test_permissive_caps_only_at_category(self):
        result = evaluate(_only(market_size=1000), field_policy="permissive")
        assert result.category_scores["market_product_fit"] == 30

    def test_permissive_negative_reduces_total(self):
        result = evaluate(_only(market_size=-5, revenue_stage=10), field_policy="permissive")
        assert result.category_scores["market_product_fit"] == -5
        assert result.total_score == 5

    def test_permissive_infinities_stay_finite(self):
        result = evaluate(_only(market_size="inf", risks=-math.inf), field_policy="permissive")
        assert result.category_scores["market_product_fit"] == 30
        assert result.category_scores["scalability_risk"] == 0
        assert math.isfinite(result.total_score)

    def test_unknown_policy(self):
        with pytest.raises(ValueError):
            evaluate(_all(1), field_policy="truncate")

    def test_default_policy_from_environment(self, monkeypatch):
        monkeypatch.setenv("FUNDSCORE_FIELD_POLICY", "reject")
        with pytest.raises(ScoreInputError):
            evaluate(_only(market_size=12))

    def test_default_policy_is_clamp(self, monkeypatch):
        monkeypatch.delenv("FUNDSCORE_FIELD_POLICY", raising=False)
        assert evaluate(_only(market_size=12)).total_score == 10

    @pytest.fixture(autouse=True)
    def _fresh_settings(self):
        get_settings.cache_clear()
        yield
        get_settings.cache_clear()


# ===================================================================== #
#  evaluate + classify: fractional totals near band edges                 #
# ===================================================================== #

class TestBandEdgesThroughEvaluate:
    @pytest.mark.parametrize("fields,total,label", [
        # 30 + 0.996
        ({"market_size": 10, "product_uniqueness": 10, "customer_validation": 10,
          "revenue_stage": 0.996}, 30.996, "Not Ready"),
        # 30 + 20 + 0.996
        ({"market_size": 10, "product_uniqueness": 10, "customer_validation": 10,
          "revenue_stage": 10, "gross_margins": 10,
          "founders_experience": 0.996}, 50.996, "Early"),
        # 30 + 20 + 20 + 0.996
        ({"market_size": 10, "product_uniqueness": 10, "customer_validation": 10,
          "revenue_stage": 10, "gross_margins": 10,
          "founders_experience": 10, "team_composition": 10,
          "scalability": 0.996}, 70.996, "Seed"),
        # 30 + 20 + 20 + 15 + 0.996
        ({"market_size": 10, "product_uniqueness": 10, "customer_validation": 10,
          "revenue_stage": 10, "gross_margins": 10,
          "founders_experience": 10, "team_composition": 10,
          "scalability": 10, "risks": 5,
          "funding_clarity": 0.996}, 85.996, "Growth"),
    ])
    def test_just_below_edge_stays_in_lower_band(self, fields, total, label):
        result = evaluate(_only(**fields), field_policy="clamp")
        assert result.total_score == pytest.approx(total)
        assert classify(result.total_score).label == label

    def test_exact_edge_from_fractions(self):
        # 30 + 0.4 + 0.3 + 0.3 lands on 31 up to float noise
        raw = _only(market_size=10, product_uniqueness=10, customer_validation=10,
                    revenue_stage=0.4, gross_margins=0.3, financial_projections=0.3)
        result = evaluate(raw, field_policy="clamp")
        assert classify(result.total_score).label == "Early"
