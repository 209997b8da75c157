"""cachematrix exception types."""


class InvalidArgument(ValueError):
    """Raised when a CachedMatrix is given an empty (0x0) or missing matrix."""
