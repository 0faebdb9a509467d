"""Tests for prediction pipeline stages."""

import pytest

from app.errors import IntegrityViolation
from app.models.cutoff import CutoffRow
from app.models.prediction import PredictionResult
from app.services.prediction import deduplicate, project, rank, resolve


def row(**overrides) -> CutoffRow:
    data = {
        "cutoff_id": "c1",
        "college_branch_id": "cb1",
        "category": "OPEN",
        "domicile": "Maharashtra",
        "round_number": 1,
        "closing_percentile": 90.0,
        "offering_id": "cb1",
        "fees_per_year": 90000,
        "college_id": "COEP",
        "college_name": "COEP Technological University",
        "location": "Pune",
        "branch_id": "CS",
        "branch_name": "Computer Engineering",
        "branch_code": "CS",
    }
    data.update(overrides)
    return CutoffRow(**data)


def result(college="A", branch="CS", round_number=1, pct=90.0, fees=1000) -> PredictionResult:
    return PredictionResult(
        college_name=college,
        branch_name=branch,
        fees_per_year=fees,
        closing_percentile=pct,
        location="Pune",
        round_number=round_number,
    )


class TestResolve:
    def test_resolves_college_and_branch(self):
        resolved = resolve(row())
        assert resolved.college.college_name == "COEP Technological University"
        assert resolved.college.location == "Pune"
        assert resolved.branch.branch_code == "CS"
        assert resolved.fees_per_year == 90000
        assert resolved.round_number == 1
        assert resolved.closing_percentile == 90.0

    def test_missing_offering(self):
        with pytest.raises(IntegrityViolation, match="missing offering cb1"):
            resolve(row(offering_id=None, fees_per_year=None, college_id=None, branch_id=None))

    def test_missing_college(self):
        with pytest.raises(IntegrityViolation, match="missing college"):
            resolve(row(college_id=None, college_name=None, location=None))

    def test_missing_branch(self):
        with pytest.raises(IntegrityViolation, match="missing branch"):
            resolve(row(branch_id=None, branch_name=None, branch_code=None))


class TestProject:
    def test_flattens(self):
        assert project(resolve(row())).to_dict() == {
            "college_name": "COEP Technological University",
            "branch_name": "Computer Engineering",
            "fees_per_year": 90000,
            "closing_percentile": 90.0,
            "location": "Pune",
            "round_number": 1,
        }

    def test_missing_fee_is_zero(self):
        assert project(resolve(row(fees_per_year=None))).fees_per_year == 0


class TestDeduplicate:
    def test_rounds_are_distinct(self):
        results = [result(round_number=1), result(round_number=2), result(round_number=3)]
        assert deduplicate(results) == results

    def test_drops_repeat_of_round(self):
        results = [result(round_number=1), result(round_number=2), result(round_number=3), result(round_number=1)]
        assert [r.round_number for r in deduplicate(results)] == [1, 2, 3]

    def test_keeps_first_seen(self):
        first = result(fees=1000)
        again = result(fees=2000)
        assert deduplicate([first, again]) == [first]

    def test_key_is_college_branch_round(self):
        results = [result(college="A"), result(college="B"), result(branch="IT")]
        assert len(deduplicate(results)) == 3

    def test_empty(self):
        assert deduplicate([]) == []


class TestRank:
    def test_descending(self):
        ranked = rank([result(pct=90.0), result(pct=92.5, college="B"), result(pct=80.0, college="C")])
        assert [r.closing_percentile for r in ranked] == [92.5, 90.0, 80.0]

    def test_ties_by_college_then_branch_then_round(self):
        ranked = rank(
            [
                result(college="B", pct=90.0),
                result(college="A", branch="IT", pct=90.0),
                result(college="A", branch="CS", round_number=2, pct=90.0),
                result(college="A", branch="CS", round_number=1, pct=90.0),
            ]
        )
        assert [(r.college_name, r.branch_name, r.round_number) for r in ranked] == [
            ("A", "CS", 1),
            ("A", "CS", 2),
            ("A", "IT", 1),
            ("B", "CS", 1),
        ]

    def test_order_independent(self):
        results = [result(college=c, pct=p) for c, p in [("A", 90.0), ("B", 90.0), ("C", 95.0)]]
        assert rank(results) == rank(list(reversed(results)))
