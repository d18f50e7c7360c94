from __future__ import annotations


def error_payload(message: str, code: str) -> dict:
    return {"ok": False, "error": message, "code": code}


class DomainError(Exception):
    """Base class for domain specific errors."""

    def __init__(self, code: str, message: str, status_code: int = 400, payload: dict | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.payload = payload or error_payload(message, code)


class ValidationError(DomainError):
    def __init__(self, message: str, code: str = "BadRequest", status_code: int = 400):
        super().__init__(code=code, message=message, status_code=status_code)


class UnsupportedMediaTypeError(DomainError):
    def __init__(self, message: str = "Content-Type must be application/json"):
        super().__init__(code="UnsupportedMediaType", message=message, status_code=415)


class NotFoundError(DomainError):
    def __init__(self, message: str = "Not found"):
        super().__init__(code="NotFound", message=message, status_code=404)


class ConfigurationError(DomainError):
    def __init__(self, message: str):
        super().__init__(code="ConfigurationError", message=message, status_code=500)


class ExternalServiceError(DomainError):
    def __init__(self, message: str, code: str = "ExternalServiceError", status_code: int = 502):
        super().__init__(code=code, message=message, status_code=status_code)


class StoreReadError(ExternalServiceError):
    def __init__(self, message: str = "Read failed"):
        super().__init__(message, code="ReadFailed", status_code=500)


class StoreWriteError(ExternalServiceError):
    def __init__(self, message: str = "Write failed"):
        super().__init__(message, code="WriteFailed", status_code=500)
