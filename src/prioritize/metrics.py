"""Metrics collection for the prioritize module."""

from dataclasses import dataclass, field
from typing import ClassVar

from src.prioritize.models import CandidateTier


@dataclass
class PrioritizeMetrics:
    """Metrics for prioritization calls.

    Counter updates are not synchronized; counts may be approximate when
    the singleton is shared by concurrent callers. Ranking never reads them.

    Attributes:
        calls_total: Number of prioritization calls.
        candidates_in: Total input candidates across calls.
        candidates_out: Total returned candidates across calls.
        dropped_located: Located candidates cut by the budgets.
        dropped_unknown: Unknown-location candidates cut by the budgets.
        returned_by_tier: Returned candidate count per tier name.
        last_duration_ms: Duration of the most recent call.
    """

    calls_total: int = 0
    candidates_in: int = 0
    candidates_out: int = 0
    dropped_located: int = 0
    dropped_unknown: int = 0
    returned_by_tier: dict[str, int] = field(default_factory=dict)
    last_duration_ms: float = 0.0

    _instance: ClassVar["PrioritizeMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "PrioritizeMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_call(self, candidates_in: int, candidates_out: int) -> None:
        """Record one prioritization call.

        Args:
            candidates_in: Number of input candidates.
            candidates_out: Number of returned candidates.
        """
        self.calls_total += 1
        self.candidates_in += candidates_in
        self.candidates_out += candidates_out

    def record_dropped(self, located: int, unknown: int) -> None:
        """Record candidates cut by the budgets.

        Args:
            located: Dropped located candidates.
            unknown: Dropped unknown-location candidates.
        """
        self.dropped_located += located
        self.dropped_unknown += unknown

    def record_returned_tier(self, tier: CandidateTier) -> None:
        """Record one returned candidate of the given tier."""
        name = tier.name.lower()
        self.returned_by_tier[name] = self.returned_by_tier.get(name, 0) + 1

    def record_duration(self, duration_ms: float) -> None:
        """Record call duration.

        Args:
            duration_ms: Duration in milliseconds.
        """
        self.last_duration_ms = duration_ms

    def to_dict(self) -> dict[str, object]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        return {
            "calls_total": self.calls_total,
            "candidates_in": self.candidates_in,
            "candidates_out": self.candidates_out,
            "dropped_located": self.dropped_located,
            "dropped_unknown": self.dropped_unknown,
            "returned_by_tier": dict(self.returned_by_tier),
            "last_duration_ms": self.last_duration_ms,
        }
