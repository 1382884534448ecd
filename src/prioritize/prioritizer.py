"""Replacement candidate prioritizer entry points."""

import time
from collections.abc import Sequence

import structlog

from src.prioritize.config import BudgetsConfig
from src.prioritize.comparator import candidate_tier
from src.prioritize.constants import (
    COMPONENT_PRIORITIZE,
    REPLACEMENT_ATTEMPTS,
    REPLACEMENT_UNKNOWN_LOCATION_ATTEMPTS,
)
from src.prioritize.metrics import PrioritizeMetrics
from src.prioritize.models import (
    CandidateWithTime,
    Digest,
    PrioritizationResult,
    RankingContext,
    ReplacementCandidate,
)
from src.prioritize.protocols import CandidateSource
from src.prioritize.quota import prioritize_candidates_with_max


logger = structlog.get_logger()


def prioritize_replacement_candidates(
    records: Sequence[CandidateWithTime],
    target_digest: Digest,
    decompressed_digest: Digest | None = None,
) -> list[ReplacementCandidate]:
    """Order candidates for reuse of a blob, using the default budgets.

    At most REPLACEMENT_ATTEMPTS candidates are returned, of which at most
    REPLACEMENT_UNKNOWN_LOCATION_ATTEMPTS have no known location.

    Args:
        records: Candidates with observation times.
        target_digest: The digest the caller wants.
        decompressed_digest: Uncompressed digest of the same content, or
            None/empty if not known.

    Returns:
        Candidate descriptors in the order they should be tried.
    """
    context = RankingContext(
        target_digest=target_digest, decompressed_digest=decompressed_digest
    )
    return prioritize_candidates_with_max(
        records,
        context,
        REPLACEMENT_ATTEMPTS,
        REPLACEMENT_UNKNOWN_LOCATION_ATTEMPTS,
    )


class CandidatePrioritizer:
    """Prioritizes replacement candidates with configured budgets.

    Wraps the ranking engine with structured logging and metrics. Holds no
    state between calls other than its configuration.
    """

    def __init__(
        self,
        run_id: str,
        budgets: BudgetsConfig | None = None,
        metrics: PrioritizeMetrics | None = None,
    ) -> None:
        """Initialize the prioritizer.

        Args:
            run_id: Run identifier for logging.
            budgets: Attempt budgets. Defaults to BudgetsConfig().
            metrics: Optional metrics instance.
        """
        self._run_id = run_id
        self._budgets = budgets or BudgetsConfig()
        self._metrics = metrics or PrioritizeMetrics.get_instance()
        self._log = logger.bind(
            component=COMPONENT_PRIORITIZE,
            run_id=run_id,
        )

    @property
    def budgets(self) -> BudgetsConfig:
        """Get the configured budgets."""
        return self._budgets

    def prioritize(
        self,
        records: Sequence[CandidateWithTime],
        target_digest: Digest,
        decompressed_digest: Digest | None = None,
    ) -> PrioritizationResult:
        """Order and bound candidates for reuse of a blob.

        Args:
            records: Candidates with observation times.
            target_digest: The digest the caller wants.
            decompressed_digest: Uncompressed digest of the same content.

        Returns:
            PrioritizationResult with candidates in try-order and counts.
        """
        context = RankingContext(
            target_digest=target_digest, decompressed_digest=decompressed_digest
        )
        unknown_in = sum(1 for r in records if r.candidate.unknown_location)
        located_in = len(records) - unknown_in

        self._log.info(
            "prioritization_started",
            target_digest=target_digest,
            candidates_in=len(records),
            located_in=located_in,
            unknown_in=unknown_in,
        )

        start = time.perf_counter()
        candidates = prioritize_candidates_with_max(
            records,
            context,
            self._budgets.total_limit,
            self._budgets.unknown_location_limit,
        )
        duration_ms = (time.perf_counter() - start) * 1000

        unknown_kept = sum(1 for c in candidates if c.unknown_location)
        located_kept = len(candidates) - unknown_kept

        self._metrics.record_call(len(records), len(candidates))
        self._metrics.record_dropped(
            located_in - located_kept, unknown_in - unknown_kept
        )
        for c in candidates:
            self._metrics.record_returned_tier(candidate_tier(c.digest, context))
        self._metrics.record_duration(duration_ms)

        result = PrioritizationResult(
            candidates=candidates,
            candidates_in=len(records),
            located_in=located_in,
            unknown_in=unknown_in,
            located_kept=located_kept,
            unknown_kept=unknown_kept,
            dropped_total=len(records) - len(candidates),
        )

        self._log.info(
            "prioritization_complete",
            target_digest=target_digest,
            candidates_out=len(candidates),
            located_kept=located_kept,
            unknown_kept=unknown_kept,
            dropped_total=result.dropped_total,
        )

        return result

    def prioritize_from(
        self,
        source: CandidateSource,
        target_digest: Digest,
        decompressed_digest: Digest | None = None,
    ) -> PrioritizationResult:
        """Read candidates from a source and prioritize them.

        Args:
            source: Store of previously observed candidates.
            target_digest: The digest the caller wants.
            decompressed_digest: Uncompressed digest of the same content.

        Returns:
            PrioritizationResult with candidates in try-order and counts.
        """
        records = source.candidates_with_time(target_digest, decompressed_digest)
        return self.prioritize(records, target_digest, decompressed_digest)
