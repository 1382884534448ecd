"""Replacement candidate prioritization.

Orders previously observed blob locations so that a transfer pipeline
tries the cheapest reuse first, and bounds how many are returned in total
and how many may lack a concrete location.
"""

from src.prioritize.comparator import (
    candidate_precedes,
    candidate_sort_key,
    candidate_tier,
    compare_candidates,
    sort_candidates,
)
from src.prioritize.constants import (
    REPLACEMENT_ATTEMPTS,
    REPLACEMENT_UNKNOWN_LOCATION_ATTEMPTS,
)
from src.prioritize.config import BudgetsConfig
from src.prioritize.errors import (
    InvalidBudgetError,
    InvalidDigestError,
    PrioritizeError,
)
from src.prioritize.metrics import PrioritizeMetrics
from src.prioritize.models import (
    CandidateTier,
    CandidateWithTime,
    CompressionKind,
    CompressionLabel,
    Digest,
    LocationReference,
    PrioritizationResult,
    RankingContext,
    ReplacementCandidate,
)
from src.prioritize.prioritizer import (
    CandidatePrioritizer,
    prioritize_replacement_candidates,
)
from src.prioritize.protocols import CandidateSource
from src.prioritize.quota import (
    partition_candidates,
    prioritize_candidates_with_max,
    truncate_candidates,
)


__all__ = [
    "REPLACEMENT_ATTEMPTS",
    "REPLACEMENT_UNKNOWN_LOCATION_ATTEMPTS",
    "BudgetsConfig",
    "CandidatePrioritizer",
    "CandidateSource",
    "CandidateTier",
    "CandidateWithTime",
    "CompressionKind",
    "CompressionLabel",
    "Digest",
    "InvalidBudgetError",
    "InvalidDigestError",
    "LocationReference",
    "PrioritizationResult",
    "PrioritizeError",
    "PrioritizeMetrics",
    "RankingContext",
    "ReplacementCandidate",
    "candidate_precedes",
    "candidate_sort_key",
    "candidate_tier",
    "compare_candidates",
    "partition_candidates",
    "prioritize_candidates_with_max",
    "prioritize_replacement_candidates",
    "sort_candidates",
    "truncate_candidates",
]
