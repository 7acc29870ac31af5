class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int, error_code: str | None = None) -> None:
        self.message = message
        self.status_code = status_code
        # Machine-readable kind (e.g. 'EVENT_ALREADY_STARTED'); defaults to the class name
        self.error_code = error_code or self.__class__.__name__
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400, error_code: str | None = None) -> None:
        super().__init__(message, status_code, error_code)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str, error_code: str | None = None) -> None:
        super().__init__(message, 403, error_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str, error_code: str | None = None) -> None:
        super().__init__(message, 404, error_code)


class ConflictError(CustomBaseError):
    def __init__(self, message: str, error_code: str | None = None) -> None:
        super().__init__(message, 409, error_code)
