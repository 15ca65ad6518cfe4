class ObservationError(Exception):
    """Base exception for observation pipeline errors."""
    pass

class InvalidTimestampError(ObservationError, ValueError):
    """Raised when a timestamp cannot be turned into a provider key."""
    pass

class UpstreamResolverError(ObservationError):
    """Raised when the latest observation time cannot be resolved."""
    pass

class SnapshotFetchError(ObservationError):
    """Raised by the orchestration layer when a snapshot fetch failed."""

    def __init__(self, error):
        self.error = error
        super().__init__(error.message)