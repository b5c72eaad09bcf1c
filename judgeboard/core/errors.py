"""
Error taxonomy for score reads and writes
"""


class JudgingError(Exception):
    """Base class for errors raised by the judging service"""


class AuthorizationError(JudgingError):
    """Caller has no valid judge session or admin key"""


class ValidationError(JudgingError):
    """Request is missing identifying fields or carries malformed scores"""


class StorageError(JudgingError):
    """Backing file or database failed"""
