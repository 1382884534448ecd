"""Error types for candidate prioritization.

Ranking is total over well-formed input. The only recognized misuse is a
caller contract violation at the boundary: a negative (or non-integer)
budget, or an empty digest where one is required. Both are rejected
eagerly instead of being clamped.
"""


class PrioritizeError(Exception):
    """Base exception for all prioritization errors."""


class InvalidBudgetError(PrioritizeError, ValueError):
    """Raised when an attempt budget is negative or not an integer."""

    def __init__(self, name: str, value: object) -> None:
        """Initialize the error with the offending budget.

        Args:
            name: Budget parameter name.
            value: The rejected value.
        """
        self.name = name
        self.value = value
        super().__init__(
            f"Invalid budget {name}={value!r}: must be a non-negative integer"
        )


class InvalidDigestError(PrioritizeError, ValueError):
    """Raised when a required digest is empty."""

    def __init__(self, field_name: str) -> None:
        """Initialize the error.

        Args:
            field_name: Name of the digest field that was empty.
        """
        self.field_name = field_name
        super().__init__(f"Digest {field_name} must not be empty")
