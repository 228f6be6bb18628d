"""
Custom exceptions for the Todo API.

This module defines a small exception hierarchy with:
- Machine-readable error codes for API responses
- The HTTP status each error maps to
- Structured error data for logging and debugging

Design pattern: Base exception → Specific exceptions
- TodoAPIError: Base for all domain errors raised by services
- TodoNotFoundError: Requested todo id does not exist
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """
    Standardized error codes for API responses.

    Naming convention: <DOMAIN>_<NUMBER>
    - TODO_xxx: Todo resource errors
    - API_xxx: General API errors
    """

    TODO_NOT_FOUND = "TODO_001"

    INTERNAL_ERROR = "API_001"


class TodoAPIError(Exception):
    """
    Base exception for all Todo API errors.

    Attributes:
        message: Human-readable error description
        status_code: HTTP status code the error maps to
        error_code: Machine-readable error identifier
        details: Additional context (dict, optional)

    Usage:
        try:
            todo = await service.get_todo(todo_id)
        except TodoAPIError as e:
            logger.error("lookup failed", error_code=e.error_code)
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Any = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API responses.

        Returns:
            dict: Structured error data suitable for JSON responses
        """
        return {
            "error": self.error_code.value,
            "message": self.message,
            "status_code": self.status_code,
            "details": self.details,
        }

    def __str__(self) -> str:
        """String representation for logging."""
        return f"{self.error_code.value}: {self.message}"


class TodoNotFoundError(TodoAPIError):
    """
    Raised when a todo cannot be found by id.

    HTTP Status: 404 Not Found
    """

    def __init__(self, todo_id: str):
        self.todo_id = todo_id
        super().__init__(
            message=f"Todo with id: '{todo_id}' not found",
            status_code=404,
            error_code=ErrorCode.TODO_NOT_FOUND,
            details={"id": todo_id},
        )
