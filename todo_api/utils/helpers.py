import logging
from typing_extensions import NoReturn

from todo_api.core.exceptions import ErrorCode, TodoAPIError

def handle_service_error(error: Exception, service_name: str, operation: str, status_code: int = 500) -> NoReturn:
    logger = logging.getLogger(service_name)
    logger.error(f"Error in {service_name} - {operation}: {str(error)}")

    raise TodoAPIError(
        message=f"Operation failed: {operation}",
        status_code=status_code,
        error_code=ErrorCode.INTERNAL_ERROR,
        details={"error_type": type(error).__name__},
    ) from error
