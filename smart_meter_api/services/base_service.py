"""
Base service interface for business logic.
"""

from abc import ABC


class BaseService(ABC):
    """Abstract base service interface."""

    def __init__(self, repository=None):
        """Initialize service with repository dependency."""
        self.repository = repository

    def validate_input(self, **kwargs) -> bool:
        """
        Validate input parameters.

        Services override this to raise the matching SmartMeterError subclass
        when a parameter is unacceptable.
        """
        return True
