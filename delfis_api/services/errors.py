"""Domain errors raised by the services and translated to HTTP by the routers."""

from __future__ import annotations


class ServiceError(Exception):
    """Base exception for service workflows."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EntityNotFoundError(ServiceError):
    """Raised when the entity (or every entity of a listing) is absent."""


class ConflictError(ServiceError):
    """Raised when the store rejects a write on a unique or foreign key constraint."""


class InvalidArgumentError(ServiceError):
    """Raised when a partial update names an unknown field or carries a wrong type."""


class FieldValidationError(ServiceError):
    """Raised when merged fields break a declared constraint."""

    def __init__(self, errors: dict[str, str]):
        super().__init__("Dados inválidos.")
        self.errors = errors
