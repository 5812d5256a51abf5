"""
Shared exceptions for the completion service modules.
"""


class AIServiceError(Exception):
    """Raised when a completion call fails or returns an unusable answer."""

    pass
