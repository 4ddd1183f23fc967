"""
Minimal dependency injection container.

Entries are either literal values or definitions: callables that take the
container and build a value. A definition is resolved on first access and
its result is cached ("frozen") from then on, unless it was marked with
``factory()`` (invoked on every access) or ``protect()`` (never invoked).

Example:
    container = Container({"dsn": "sqlite://"})
    container.set("db", lambda c: connect(c.get("dsn")))
    container.set("session", container.factory(lambda c: Session(c.get("db"))))

    db = container.get("db")            # built once
    assert container.get("db") is db
    assert container.get("session") is not container.get("session")
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import TYPE_CHECKING, Any

from lazybox.logging_config import get_logger

from .errors import FrozenServiceError, InvalidDefinitionError, UndefinedIdentifierError

if TYPE_CHECKING:
    from .provider import ServiceProvider

logger = get_logger(__name__)

Definition = Callable[["Container"], Any]


def is_definition(value: Any) -> bool:
    """Return True if ``value`` would be invoked on resolution.

    Classes are callable but are stored and returned as plain values.
    """
    return callable(value) and not isinstance(value, type)


class _IdentitySet:
    """Set of objects compared by identity, accepting unhashable callables."""

    def __init__(self) -> None:
        # Holding the object keeps its id() from being reused.
        self._items: dict[int, Any] = {}

    def add(self, item: Any) -> None:
        self._items[id(item)] = item

    def discard(self, item: Any) -> None:
        if self._items.get(id(item)) is item:
            del self._items[id(item)]

    def clear(self) -> None:
        self._items.clear()

    def __contains__(self, item: Any) -> bool:
        return self._items.get(id(item)) is item

    def __len__(self) -> int:
        return len(self._items)


class Container:
    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = {}
        self._raw: dict[str, Definition] = {}
        self._frozen: set[str] = set()
        self._factories = _IdentitySet()
        self._protected = _IdentitySet()
        if values:
            self.set(values)

    def reset(self) -> Container:
        """Drop every entry along with marker, frozen and raw state."""
        self._values.clear()
        self._raw.clear()
        self._frozen.clear()
        self._factories.clear()
        self._protected.clear()
        logger.debug("container_reset")
        return self

    def set(self, id: str | Mapping[str, Any], value: Any = None) -> Container:
        """Store ``value`` under ``id``, or every pair of a mapping.

        Raises:
            FrozenServiceError: If the id (or any id of the mapping) was
                already resolved as a service
        """
        if isinstance(id, Mapping):
            for key in id:
                self._check_not_frozen(key)
            for key, item in id.items():
                self._store(key, item)
            return self
        self._check_not_frozen(id)
        self._store(id, value)
        return self

    def get(self, id: str) -> Any:
        """Resolve ``id``.

        Literals and protected callables come back unchanged, factories are
        invoked on every call, and services are invoked once then cached.

        Raises:
            UndefinedIdentifierError: If the id is not registered
        """
        hook = getattr(self, f"_get_{id}", None)
        if callable(hook):
            return hook(id)

        if id not in self._values:
            raise UndefinedIdentifierError(id)

        value = self._values[id]
        if id in self._frozen or not is_definition(value) or value in self._protected:
            return value

        if value in self._factories:
            return value(self)

        resolved = value(self)
        self._values[id] = resolved
        self._raw[id] = value
        self._frozen.add(id)
        logger.debug("service_resolved", id=id)
        return resolved

    def unset(self, id: str) -> Container:
        if id not in self._values:
            return self
        value = self._values.pop(id)
        if is_definition(value):
            self._factories.discard(value)
            self._protected.discard(value)
        self._frozen.discard(id)
        self._raw.pop(id, None)
        logger.debug("definition_unset", id=id)
        return self

    def exists(self, id: str) -> bool:
        return id in self._values

    def is_frozen(self, id: str) -> bool:
        return id in self._frozen

    def raw(self, id: str) -> Any:
        """Return the definition registered under ``id`` without resolving it.

        For a resolved service this is the original definition, not the
        cached result.
        """
        if id not in self._values:
            raise UndefinedIdentifierError(id)
        if id in self._raw:
            return self._raw[id]
        return self._values[id]

    def keys(self) -> list[str]:
        return list(self._values)

    def factory(self, definition: Definition) -> Definition:
        """Mark ``definition`` to be invoked on every access."""
        if not is_definition(definition):
            raise InvalidDefinitionError("Service definition is not a Closure or invokable object.")
        self._factories.add(definition)
        return definition

    def protect(self, definition: Callable[..., Any]) -> Callable[..., Any]:
        """Mark ``definition`` to be returned as-is instead of invoked."""
        if not is_definition(definition):
            raise InvalidDefinitionError("Callable is not a Closure or invokable object.")
        self._protected.add(definition)
        return definition

    def extend(self, id: str, extender: Callable[[Any, Container], Any]) -> Definition:
        """Wrap the definition under ``id`` so ``extender`` post-processes its result.

        The new definition computes ``extender(original(c), c)``. A factory
        stays a factory. Extending an already resolved service raises
        FrozenServiceError.

        Args:
            id: Identifier holding the definition to extend
            extender: Callable taking the original result and the container

        Returns:
            The composed definition now stored under ``id``
        """
        if id not in self._values:
            raise UndefinedIdentifierError(id)
        self._check_not_frozen(id)

        original = self._values[id]
        if not is_definition(original) or original in self._protected:
            raise InvalidDefinitionError(
                f'Identifier "{id}" does not contain an object definition.', id=id
            )
        if not is_definition(extender):
            raise InvalidDefinitionError(
                "Extension service definition is not a Closure or invokable object.", id=id
            )

        def extended(container: Container) -> Any:
            return extender(original(container), container)

        if original in self._factories:
            self._factories.discard(original)
            self._factories.add(extended)

        self._store(id, extended)
        logger.debug("definition_extended", id=id)
        return extended

    def register(
        self, provider: ServiceProvider, values: Mapping[str, Any] | None = None
    ) -> Container:
        """Apply ``provider`` to this container, then ``values`` as overrides."""
        provider.register(self)
        for key, value in (values or {}).items():
            self.set(key, value)
        logger.debug(
            "provider_registered",
            provider=type(provider).__name__,
            overrides=len(values or {}),
        )
        return self

    def _check_not_frozen(self, id: str) -> None:
        if id in self._frozen:
            raise FrozenServiceError(id)

    def _store(self, id: str, value: Any) -> None:
        hook = getattr(self, f"_set_{id}", None)
        if callable(hook) and hook(value) is True:
            return
        self._values[id] = value
        logger.debug("definition_set", id=id, kind=self._kind(value))

    def _kind(self, value: Any) -> str:
        if not is_definition(value):
            return "literal"
        if value in self._protected:
            return "protected"
        if value in self._factories:
            return "factory"
        return "service"

    def __getitem__(self, id: str) -> Any:
        return self.get(id)

    def __setitem__(self, id: str, value: Any) -> None:
        self.set(id, value)

    def __delitem__(self, id: str) -> None:
        self.unset(id)

    def __contains__(self, id: object) -> bool:
        return id in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Container(entries={len(self._values)}, frozen={len(self._frozen)})"
