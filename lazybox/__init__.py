"""
lazybox: a keyed dependency injection container.

Stores literal values and lazily evaluated service definitions:
- services are resolved on first access and cached
- factories are re-invoked on every access
- protected callables are returned without being invoked
- definitions can be extended until they are first resolved
"""

from lazybox.core import (
    Accessors,
    Container,
    ContainerError,
    FrozenServiceError,
    InvalidDefinitionError,
    ServiceProvider,
    UndefinedIdentifierError,
    camelize,
    decamelize,
)
from lazybox.providers import EnvFileProvider

__version__ = "0.1.0"

__all__ = [
    "Accessors",
    "Container",
    "ContainerError",
    "EnvFileProvider",
    "FrozenServiceError",
    "InvalidDefinitionError",
    "ServiceProvider",
    "UndefinedIdentifierError",
    "camelize",
    "decamelize",
]
