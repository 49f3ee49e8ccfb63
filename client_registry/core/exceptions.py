"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
"""

CLIENT_NOT_FOUND_MESSAGE = "Cliente não encontrado"
INVALID_JSON_MESSAGE = "Requisição com JSON inválido"
INTERNAL_ERROR_MESSAGE = "Erro interno do servidor"


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class NotFoundError(ApplicationError):
    """Raised when a resource cannot be found."""

    def __init__(self, message: str = CLIENT_NOT_FOUND_MESSAGE) -> None:
        super().__init__(message, code="RES_NOT_FOUND")


class BadRequestError(ApplicationError):
    """Raised when a request body cannot be decoded."""

    def __init__(self, message: str = INVALID_JSON_MESSAGE) -> None:
        super().__init__(message, code="REQ_BAD_REQUEST")
