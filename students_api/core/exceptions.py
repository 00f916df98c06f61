from fastapi import status


class BaseAPIException(Exception):
    """
    Base class for every error a request handler raises on purpose.
    The exception handlers turn it into the JSON error envelope.
    """
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

# =========================================================
# 1. HTTP ERRORS
# =========================================================

class NotFoundException(BaseAPIException):
    """404: resource not found"""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
        )

class InternalServerException(BaseAPIException):
    """500: the backend failed while serving a valid request"""
    def __init__(self, message: str = "Internal Server Error"):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

# =========================================================
# 2. STORAGE ERRORS
# =========================================================

class StorageError(Exception):
    """
    Raised by storage backends. The driver exception is kept as
    ``__cause__`` and its text is part of the message.
    """

class StudentNotFoundError(StorageError):
    """Lookup miss: no row with the requested id."""
    def __init__(self, student_id: int):
        self.student_id = student_id
        super().__init__(f"no student found with id {student_id}")

# =========================================================
# 3. STARTUP ERRORS
# =========================================================

class ConfigError(Exception):
    """Config path missing, file unreadable or invalid."""
