"""Exceção única da aplicação e catálogo de mensagens exibidas ao usuário."""
from __future__ import annotations

from typing import Iterable


class ErrorMessages:
    REGISTER_USER = "User could not be registered. Please try again later."
    GET_USERS = "Failed to retrieve users."
    UPDATE_USER = "User could not be updated."
    DELETE_USER = "User could not be deleted."
    LOGIN = "Login failed. Please check your credentials."
    VERIFY_CREDENTIALS = "Could not verify existing credentials."
    ROLLBACK = "Transaction rollback failed."
    RESET_AUTOCOMMIT = "Failed to reset connection settings."
    TIMEOUT = "Timeout retrieving a connection."
    DATABASE = "Error initializing database connection."
    AUDIT_LOG = "The operation was saved but could not be logged."

    EMAIL_AND_USERNAME_EXIST = "Both email and username already exist"
    EMAIL_EXISTS = "Email already exists"
    USERNAME_EXISTS = "Username already exists"

    INVALID_FIELDS = (
        "Please fill all required fields correctly:\n\n"
        "- Telephone must be exactly 9 digits\n"
        "- Password must be at least 8 characters with uppercase, lowercase and numbers\n"
        "- Card must be exactly 16 digits"
    )


class AppError(RuntimeError):
    """Erro de negócio cuja mensagem pode ser mostrada direto numa janela."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    def __init__(self, fields: Iterable[str], message: str = ErrorMessages.INVALID_FIELDS) -> None:
        super().__init__(message)
        self.fields = list(fields)


__all__ = ["AppError", "ErrorMessages", "ValidationError"]
