"""Partitioning and budget truncation of replacement candidates."""

from collections.abc import Iterable, Sequence

import structlog

from src.prioritize.comparator import sort_candidates
from src.prioritize.constants import COMPONENT_PRIORITIZE
from src.prioritize.errors import InvalidBudgetError
from src.prioritize.models import (
    CandidateWithTime,
    RankingContext,
    ReplacementCandidate,
)


logger = structlog.get_logger()


def validate_budget(name: str, value: int) -> int:
    """Reject budgets that are negative or not integers.

    Args:
        name: Budget parameter name, used in the error.
        value: Budget value.

    Returns:
        The budget unchanged.

    Raises:
        InvalidBudgetError: If the budget is invalid.
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidBudgetError(name, value)
    return value


def partition_candidates(
    records: Iterable[CandidateWithTime],
) -> tuple[list[CandidateWithTime], list[CandidateWithTime]]:
    """Split candidates by whether their location is known.

    Args:
        records: Candidates to split.

    Returns:
        Tuple of (located, unknown location), each in input order.
    """
    located: list[CandidateWithTime] = []
    unknown: list[CandidateWithTime] = []
    for record in records:
        if record.candidate.unknown_location:
            unknown.append(record)
        else:
            located.append(record)
    return located, unknown


def truncate_candidates(
    records: Iterable[CandidateWithTime],
    context: RankingContext,
    limit: int,
) -> list[CandidateWithTime]:
    """Sort candidates best-first and keep at most limit of them.

    Args:
        records: Candidates to rank.
        context: Target and decompressed digests.
        limit: Maximum number of candidates to keep.

    Returns:
        The best min(limit, len(records)) candidates in try-order.
    """
    validate_budget("limit", limit)
    return sort_candidates(records, context)[:limit]


def prioritize_candidates_with_max(
    records: Sequence[CandidateWithTime],
    context: RankingContext,
    total_limit: int,
    unknown_limit: int,
) -> list[ReplacementCandidate]:
    """Order candidates and bound them by two budgets.

    Located candidates always come before unknown-location ones. Each
    group is ranked on its own; the located group is cut to total_limit,
    the unknown-location group to unknown_limit, and the concatenation
    to total_limit again.

    Args:
        records: Candidates with observation times.
        context: Target and decompressed digests.
        total_limit: Maximum length of the result.
        unknown_limit: Maximum unknown-location candidates in the result.

    Returns:
        Candidate descriptors in the order they should be tried.

    Raises:
        InvalidBudgetError: If a budget is negative or not an integer.
    """
    validate_budget("total_limit", total_limit)
    validate_budget("unknown_limit", unknown_limit)

    located, unknown = partition_candidates(records)
    kept_located = truncate_candidates(located, context, total_limit)
    kept_unknown = truncate_candidates(unknown, context, unknown_limit)

    ordered = (kept_located + kept_unknown)[:total_limit]

    logger.debug(
        "candidates_truncated",
        component=COMPONENT_PRIORITIZE,
        located_in=len(located),
        unknown_in=len(unknown),
        located_kept=len(kept_located),
        unknown_kept=len(kept_unknown),
        returned=len(ordered),
    )

    return [record.candidate for record in ordered]
