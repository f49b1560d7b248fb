"""
Application errors

Each error knows the HTTP status it maps to and the list of details that ends up
in the "errors" field of the response body.
"""

from typing import List, Optional


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(
        self, message: str, status_code: int, errors: Optional[List[str]] = None
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.errors = errors if errors else [message]
        super().__init__(message)


class DomainError(CustomBaseError):
    """Entity rule broken while building or changing a domain object"""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class BadRequestError(CustomBaseError):
    def __init__(self, message: str, errors: Optional[List[str]] = None) -> None:
        super().__init__(message, 400, errors)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str = 'Access denied') -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)
