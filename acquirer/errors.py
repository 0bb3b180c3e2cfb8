"""Fatal conditions of a session acquisition attempt."""


class AcquisitionError(Exception):
    """Base class; each subclass carries the diagnostic it reports by default."""

    default_message = "Session acquisition failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class UnwrapFailure(AcquisitionError):
    default_message = "Unwrap on null"


class ChallengeTimeout(AcquisitionError):
    default_message = "Challenge not cleared"


class InvalidCredentials(AcquisitionError):
    default_message = "Security Trails invalid credentials"


class AmbiguousOutcome(AcquisitionError):
    default_message = "Failed to login, no dashboard or invalid credentials found"


class CaptureTimeout(AcquisitionError):
    default_message = "No matching data request observed"
