"""
Generative-text client exceptions.
"""


class AIError(Exception):
    """Base exception for generative-text service errors."""
    pass


class AIServiceError(AIError):
    """Raised when the service cannot be reached or returns an unusable reply."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code
