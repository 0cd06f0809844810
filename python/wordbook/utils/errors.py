from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class AppError(Exception):
    code: str
    message: str
    details: Optional[Any] = None

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict:
        err = {"code": self.code, "message": self.message}
        if self.details is not None:
            err["details"] = self.details
        return err


class ConfigError(AppError):
    def __init__(self, message: str, details: Any = None):
        super().__init__(code="CONFIG_ERROR", message=message, details=details)


class BackendError(AppError):
    def __init__(self, message: str, details: Any = None, status: Optional[int] = None):
        super().__init__(code="BACKEND_ERROR", message=message, details=details)
        self.status = status


class ValidationError(AppError):
    def __init__(self, message: str, details: Any = None):
        super().__init__(code="VALIDATION_ERROR", message=message, details=details)


class NotFoundError(AppError):
    def __init__(self, message: str, details: Any = None):
        super().__init__(code="NOT_FOUND", message=message, details=details)


class DuplicateWordError(AppError):
    def __init__(self, message: str, details: Any = None):
        super().__init__(code="DUPLICATE", message=message, details=details)


class ImportFileError(AppError):
    def __init__(self, message: str, details: Any = None):
        super().__init__(code="IMPORT_FILE", message=message, details=details)
