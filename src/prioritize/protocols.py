"""Protocol interface for candidate sources."""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from src.prioritize.models import CandidateWithTime, Digest


@runtime_checkable
class CandidateSource(Protocol):
    """Protocol for stores that remember where blobs were seen.

    The prioritizer only reads candidates from a source; ranking never
    writes back or coordinates through it.
    """

    def candidates_with_time(
        self,
        target_digest: Digest,
        decompressed_digest: Digest | None,
    ) -> Sequence[CandidateWithTime]:
        """Return every recorded candidate related to the target.

        Args:
            target_digest: The digest the caller wants.
            decompressed_digest: Uncompressed digest of the same content,
                if known.

        Returns:
            Candidates with their last observation times, in any order.
        """
        ...
