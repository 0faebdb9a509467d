"""Prediction pipeline stages - resolve, project, deduplicate, rank."""

from collections.abc import Iterable

from app.errors import IntegrityViolation
from app.models.catalog import Branch, College
from app.models.cutoff import CutoffRow, ResolvedCutoff
from app.models.prediction import PredictionResult


def resolve(row: CutoffRow) -> ResolvedCutoff:
    """Recover the college and branch behind a cutoff row.

    Raises:
        IntegrityViolation: the offering, college or branch is missing.
    """
    if row.offering_id is None:
        raise IntegrityViolation(f"Cutoff {row.cutoff_id} references missing offering {row.college_branch_id}")
    if row.college_id is None:
        raise IntegrityViolation(f"Offering {row.offering_id} of cutoff {row.cutoff_id} references a missing college")
    if row.branch_id is None:
        raise IntegrityViolation(f"Offering {row.offering_id} of cutoff {row.cutoff_id} references a missing branch")

    return ResolvedCutoff(
        college=College(id=row.college_id, college_name=row.college_name, location=row.location),
        branch=Branch(id=row.branch_id, branch_name=row.branch_name, branch_code=row.branch_code),
        fees_per_year=row.fees_per_year,
        round_number=row.round_number,
        closing_percentile=row.closing_percentile,
    )


def project(resolved: ResolvedCutoff) -> PredictionResult:
    """Flatten a resolved cutoff into an output row."""
    return PredictionResult(
        college_name=resolved.college.college_name,
        branch_name=resolved.branch.branch_name,
        fees_per_year=resolved.fees_per_year or 0,
        closing_percentile=resolved.closing_percentile,
        location=resolved.college.location,
        round_number=resolved.round_number,
    )


def deduplicate(results: Iterable[PredictionResult]) -> list[PredictionResult]:
    """Keep the first result per (college, branch, round)."""
    seen: set[tuple[str, str, int]] = set()
    unique = []
    for r in results:
        if r.key in seen:
            continue
        seen.add(r.key)
        unique.append(r)
    return unique


def rank(results: Iterable[PredictionResult]) -> list[PredictionResult]:
    """Order by closing percentile descending, then college name, branch name
    and round ascending. The output does not depend on input order.
    """
    return sorted(
        results,
        key=lambda r: (-r.closing_percentile, r.college_name, r.branch_name, r.round_number),
    )
