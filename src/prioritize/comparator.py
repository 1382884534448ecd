"""Ranking order over replacement candidates.

Candidates are ordered by tier first (EXACT, ALTERNATE, DECOMPRESSED),
then by last_seen descending with unknown times last, then by digest
ascending. The digest key only makes the order deterministic when two
candidates were seen at the same time; it does not express a preference.
"""

from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

from src.prioritize.models import (
    CandidateTier,
    CandidateWithTime,
    Digest,
    RankingContext,
)


CandidateSortKey = tuple[int, bool, int, Digest]

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_MICROSECOND = timedelta(microseconds=1)


def _epoch_micros(moment: datetime) -> int:
    """Microseconds since the Unix epoch, exact over the whole datetime range.

    Naive datetimes are read as UTC, never as host local time.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return (moment - _EPOCH) // _MICROSECOND


def candidate_tier(digest: Digest, context: RankingContext) -> CandidateTier:
    """Classify a digest relative to the ranking context.

    Args:
        digest: Candidate digest.
        context: Target and decompressed digests.

    Returns:
        Tier of the digest. Matches of the target win over matches of the
        decompressed digest when both are equal.
    """
    if digest == context.target_digest:
        return CandidateTier.EXACT
    if context.has_decompressed_tier and digest == context.decompressed_digest:
        return CandidateTier.DECOMPRESSED
    return CandidateTier.ALTERNATE


def candidate_sort_key(
    record: CandidateWithTime, context: RankingContext
) -> CandidateSortKey:
    """Build the ascending sort key for a candidate.

    Args:
        record: Candidate with observation time.
        context: Target and decompressed digests.

    Returns:
        Tuple of (tier, missing time, recency, digest). Candidates without
        last_seen sort after every timed candidate of the same tier; naive
        last_seen values are taken as UTC.
    """
    digest = record.candidate.digest
    tier = candidate_tier(digest, context).value

    if record.last_seen is None:
        return (tier, True, 0, digest)

    # Negative microseconds for descending
    return (tier, False, -_epoch_micros(record.last_seen), digest)


def compare_candidates(
    a: CandidateWithTime, b: CandidateWithTime, context: RankingContext
) -> int:
    """Three-way comparison of two candidates.

    Returns:
        -1 if a should be tried before b, 1 if after, 0 if unordered.
    """
    key_a = candidate_sort_key(a, context)
    key_b = candidate_sort_key(b, context)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def candidate_precedes(
    a: CandidateWithTime, b: CandidateWithTime, context: RankingContext
) -> bool:
    """Strict "less than" form of compare_candidates."""
    return compare_candidates(a, b, context) < 0


def sort_candidates(
    records: Iterable[CandidateWithTime], context: RankingContext
) -> list[CandidateWithTime]:
    """Return the records sorted best-first.

    Args:
        records: Candidates to sort. Not modified.
        context: Target and decompressed digests.

    Returns:
        New list in try-order.
    """
    return sorted(records, key=lambda r: candidate_sort_key(r, context))

