"""
Criterion Interface Tests
=========================

Tests the abstract criterion contract and the diagnostic schema models.
"""

import pytest
from pydantic import ValidationError

from multisort.core.criterion import Criterion
from multisort.core.schema import ComparisonOutcome, CriterionInfo


# ============================================================================
# Helpers
# ============================================================================


class ByLength(Criterion[str]):
    """Orders strings by length."""

    def __init__(self):
        super().__init__("length")

    def compare(self, a: str, b: str) -> int:
        return len(a) - len(b)


class Delegating(Criterion[str]):
    """Subclass that forgets to provide a rule."""

    def __init__(self):
        super().__init__("delegating")

    def compare(self, a: str, b: str) -> int:
        return super().compare(a, b)


# ============================================================================
# Criterion Tests
# ============================================================================


class TestCriterion:
    """Tests for the Criterion base class."""

    def test_base_class_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            Criterion("bare")

    def test_subclass_without_compare_cannot_be_instantiated(self):
        class Incomplete(Criterion[int]):
            pass

        with pytest.raises(TypeError):
            Incomplete("incomplete")

    def test_base_compare_raises_unimplemented(self):
        criterion = Delegating()
        with pytest.raises(NotImplementedError, match="Delegating.compare"):
            criterion.compare("a", "b")

    def test_concrete_compare(self):
        criterion = ByLength()
        assert criterion.compare("ab", "abc") < 0
        assert criterion.compare("abc", "ab") > 0
        assert criterion.compare("ab", "cd") == 0

    def test_name_is_read_only(self):
        criterion = ByLength()
        assert criterion.name == "length"
        with pytest.raises(AttributeError):
            criterion.name = "other"

    def test_repr(self):
        assert repr(ByLength()) == "ByLength(name='length')"


# ============================================================================
# Schema Tests
# ============================================================================


class TestCriterionInfo:
    """Tests for the CriterionInfo model."""

    def test_create(self):
        info = CriterionInfo(name="length", kind="ByLength", precedence=0)
        assert info.name == "length"
        assert info.precedence == 0

    def test_rejects_negative_precedence(self):
        with pytest.raises(ValidationError):
            CriterionInfo(name="length", kind="ByLength", precedence=-1)

    def test_is_frozen(self):
        info = CriterionInfo(name="length", kind="ByLength", precedence=0)
        with pytest.raises(ValidationError):
            info.name = "other"


class TestComparisonOutcome:
    """Tests for the ComparisonOutcome model."""

    def test_decided_outcome(self):
        outcome = ComparisonOutcome(
            result=-1, decided_by="value_desc", evaluated=["status_asc", "value_desc"]
        )
        assert not outcome.is_tie

    def test_tie_outcome(self):
        outcome = ComparisonOutcome(result=0, evaluated=["status_asc"])
        assert outcome.is_tie
        assert outcome.decided_by is None

    def test_rejects_nonzero_result_without_decider(self):
        with pytest.raises(ValidationError):
            ComparisonOutcome(result=1, evaluated=["status_asc"])

    def test_rejects_tie_with_decider(self):
        with pytest.raises(ValidationError):
            ComparisonOutcome(result=0, decided_by="status_asc", evaluated=["status_asc"])

    def test_rejects_decider_not_last_evaluated(self):
        with pytest.raises(ValidationError):
            ComparisonOutcome(
                result=1, decided_by="status_asc", evaluated=["status_asc", "value_desc"]
            )
