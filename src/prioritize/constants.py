"""Constants for the prioritize module."""

# Overall number of replacement candidates returned by default.
REPLACEMENT_ATTEMPTS: int = 5

# Of REPLACEMENT_ATTEMPTS, how many may have no known location.
# Unknown-location candidates need an extra existence check before use.
REPLACEMENT_UNKNOWN_LOCATION_ATTEMPTS: int = 2

# Known compression algorithm names
GZIP_ALGORITHM_NAME: str = "gzip"
BZIP2_ALGORITHM_NAME: str = "bzip2"
XZ_ALGORITHM_NAME: str = "xz"
ZSTD_ALGORITHM_NAME: str = "zstd"
ZSTD_CHUNKED_ALGORITHM_NAME: str = "zstd:chunked"

KNOWN_ALGORITHM_NAMES: frozenset[str] = frozenset(
    {
        GZIP_ALGORITHM_NAME,
        BZIP2_ALGORITHM_NAME,
        XZ_ALGORITHM_NAME,
        ZSTD_ALGORITHM_NAME,
        ZSTD_CHUNKED_ALGORITHM_NAME,
    }
)

# Log component name
COMPONENT_PRIORITIZE = "prioritize"
