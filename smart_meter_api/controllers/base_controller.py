"""
Base controller interface for API endpoints.

This module provides the abstract base class for all API controllers in the
smart meter price plan API. It enforces consistent patterns and provides
common functionality across all endpoint handlers.

Tags:
    - base-controller
    - abstract-interface
    - mvc-pattern
    - error-handling
    - api-standards

Features:
    - Standardized router initialization
    - Translation of core errors into HTTP status codes
    - Exception handling with context
    - FastAPI integration patterns

Architecture:
    All controllers inherit from BaseController and must implement:
    - _setup_routes(): Define endpoint routes and handlers

Usage:
    ```python
    class MyController(BaseController):
        def _setup_routes(self):
            @self.router.get("/my-endpoint")
            async def my_endpoint():
                return {"message": "Hello World"}
    ```
"""

from abc import ABC, abstractmethod
from fastapi import APIRouter, HTTPException
from typing import Optional

from ..exceptions import ErrorKind, SmartMeterError

# HTTP status returned for each kind of core failure
ERROR_STATUS_CODES = {
    ErrorKind.INVALID_METER_ID: 400,
    ErrorKind.INVALID_READINGS: 400,
    ErrorKind.NO_READINGS: 404,
    ErrorKind.RECOMMENDATION_LIMIT_EXCEEDED: 400,
    ErrorKind.INVALID_RECOMMENDATION_LIMIT: 400,
    ErrorKind.ZERO_DURATION: 422,
}


class BaseController(ABC):
    """
    Abstract base controller for consistent API endpoint patterns.

    This class provides the foundation for all API controllers with:
    - Standardized FastAPI router setup
    - Consistent error handling for core and unexpected failures

    All concrete controllers must inherit from this class and implement
    the _setup_routes() method to define their specific endpoints.

    Attributes:
        router (APIRouter): FastAPI router instance for endpoint registration

    Example:
        >>> class ReadingController(BaseController):
        ...     def _setup_routes(self):
        ...         @self.router.get("/readings")
        ...         async def get_readings():
        ...             return []
    """

    def __init__(self):
        """
        Initialize controller with FastAPI router.

        Creates a new APIRouter instance and calls _setup_routes() to register
        all endpoint handlers defined by the concrete controller implementation.
        """
        self.router = APIRouter()
        self._setup_routes()

    @abstractmethod
    def _setup_routes(self):
        """
        Setup routes for this controller.

        This abstract method must be implemented by all concrete controllers
        to define their specific API endpoints using the self.router instance.
        """
        pass

    def handle_exception(self, e: Exception, context: Optional[str] = None) -> None:
        """
        Handle exceptions consistently across all controllers.

        Core errors become the client-facing status registered for their kind
        with the error message as detail. Anything else is an HTTP 500 with
        contextual information for debugging.

        Args:
            e (Exception): The exception that occurred
            context (Optional[str]): Additional context about where the error occurred

        Raises:
            HTTPException: Always

        Example:
            try:
                result = service.find_meter_recommendation_for_user(meter_id)
            except Exception as e:
                self.handle_exception(e, "Error recommending price plans")
        """
        if isinstance(e, SmartMeterError):
            raise HTTPException(status_code=ERROR_STATUS_CODES[e.kind], detail=e.message)

        error_message = f"{context}: {str(e)}" if context else str(e)
        raise HTTPException(status_code=500, detail=error_message)
