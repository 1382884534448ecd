"""Data models for replacement candidate prioritization."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Annotated

from pydantic import Field

from src.data_model import StrictBaseModel
from src.prioritize.errors import InvalidDigestError


# Content digest such as "sha256:<hex>". Compared as plain strings.
Digest = str


class CandidateTier(int, Enum):
    """Priority tier of a candidate relative to the wanted digest.

    EXACT: digest equals the target digest, usable without recompression.
    ALTERNATE: any other digest (a differently compressed variant).
    DECOMPRESSED: digest equals the uncompressed digest of the target.
    """

    EXACT = 0
    ALTERNATE = 1
    DECOMPRESSED = 2


class CompressionKind(str, Enum):
    """Compression state recorded for a candidate."""

    ALGORITHM = "algorithm"
    UNCOMPRESSED = "uncompressed"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class CompressionLabel:
    """Compression of a candidate blob.

    Attributes:
        kind: Whether the blob is compressed with a named algorithm,
            uncompressed, or of unknown compression.
        algorithm_name: Algorithm name, set only for ALGORITHM.
    """

    kind: CompressionKind
    algorithm_name: str | None = None

    def __post_init__(self) -> None:
        if self.kind is CompressionKind.ALGORITHM:
            if not self.algorithm_name:
                raise ValueError("algorithm compression requires algorithm_name")
        elif self.algorithm_name is not None:
            raise ValueError(
                f"algorithm_name must be unset for {self.kind.value} compression"
            )

    @classmethod
    def algorithm(cls, name: str) -> "CompressionLabel":
        """Label for a blob compressed with the named algorithm."""
        return cls(kind=CompressionKind.ALGORITHM, algorithm_name=name)

    @classmethod
    def uncompressed(cls) -> "CompressionLabel":
        """Label for an uncompressed blob."""
        return cls(kind=CompressionKind.UNCOMPRESSED)

    @classmethod
    def unknown(cls) -> "CompressionLabel":
        """Label for a blob whose compression was not recorded."""
        return cls(kind=CompressionKind.UNKNOWN)

    def __str__(self) -> str:
        return self.algorithm_name or self.kind.value


@dataclass(frozen=True)
class LocationReference:
    """Opaque reference to where a blob is stored.

    Attributes:
        opaque: Transport-specific location string.
    """

    opaque: str


@dataclass(frozen=True)
class ReplacementCandidate:
    """A blob that may be reused in place of the wanted one.

    Attributes:
        digest: Digest of the candidate blob.
        compression: Compression of the candidate blob.
        location: Where the blob is stored, or None if only its existence
            is known.
    """

    digest: Digest
    compression: CompressionLabel
    location: LocationReference | None = None

    def __post_init__(self) -> None:
        if not self.digest:
            raise InvalidDigestError("digest")

    @property
    def unknown_location(self) -> bool:
        """Whether the candidate has no concrete location."""
        return self.location is None


@dataclass(frozen=True)
class CandidateWithTime:
    """A replacement candidate with the time it was last observed.

    Attributes:
        candidate: The candidate descriptor.
        last_seen: Time of the most recent observation, None if unknown.
            Naive values are ranked as UTC.
    """

    candidate: ReplacementCandidate
    last_seen: datetime | None = None


@dataclass(frozen=True)
class RankingContext:
    """Digests a ranking call is relative to.

    Attributes:
        target_digest: The digest the caller wants.
        decompressed_digest: Digest of the uncompressed form of the same
            content. Empty or None disables the decompressed tier.
    """

    target_digest: Digest
    decompressed_digest: Digest | None = None

    def __post_init__(self) -> None:
        if not self.target_digest:
            raise InvalidDigestError("target_digest")

    @property
    def has_decompressed_tier(self) -> bool:
        """Whether decompressed-digest matches form their own tier."""
        return bool(self.decompressed_digest) and (
            self.decompressed_digest != self.target_digest
        )


class PrioritizationResult(StrictBaseModel):
    """Result of prioritizing a candidate set.

    Attributes:
        candidates: Candidates in the order they should be tried.
        candidates_in: Number of input candidates.
        located_in: Input candidates with a concrete location.
        unknown_in: Input candidates with an unknown location.
        located_kept: Located candidates in the output.
        unknown_kept: Unknown-location candidates in the output.
        dropped_total: Input candidates not in the output.
    """

    candidates: list[ReplacementCandidate] = Field(default_factory=list)
    candidates_in: Annotated[int, Field(ge=0, description="Input candidate count")]
    located_in: Annotated[int, Field(ge=0)] = 0
    unknown_in: Annotated[int, Field(ge=0)] = 0
    located_kept: Annotated[int, Field(ge=0)] = 0
    unknown_kept: Annotated[int, Field(ge=0)] = 0
    dropped_total: Annotated[int, Field(ge=0, description="Total dropped count")]
