"""
Exceptions raised by the container.
"""

from __future__ import annotations


class ContainerError(Exception):
    """Base class for every error the container raises."""


class UndefinedIdentifierError(ContainerError, KeyError):
    """Raised when an operation references an id that is not registered."""

    def __init__(self, id: str):
        self.id = id
        self.message = f'Identifier "{id}" is not defined.'
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class FrozenServiceError(ContainerError, RuntimeError):
    """Raised when overwriting an id whose service was already resolved."""

    def __init__(self, id: str):
        self.id = id
        self.message = f'Cannot override frozen service "{id}".'
        super().__init__(self.message)


class InvalidDefinitionError(ContainerError, TypeError):
    """Raised when a value that must be invokable is not."""

    def __init__(self, message: str, id: str | None = None):
        self.id = id
        self.message = message
        super().__init__(message)
