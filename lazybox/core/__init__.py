"""
Core primitives for lazybox.
"""

from .accessors import Accessors
from .container import Container, is_definition
from .errors import (
    ContainerError,
    FrozenServiceError,
    InvalidDefinitionError,
    UndefinedIdentifierError,
)
from .naming import camelize, decamelize
from .provider import ServiceProvider

__all__ = [
    "Accessors",
    "Container",
    "ContainerError",
    "FrozenServiceError",
    "InvalidDefinitionError",
    "ServiceProvider",
    "UndefinedIdentifierError",
    "camelize",
    "decamelize",
    "is_definition",
]
