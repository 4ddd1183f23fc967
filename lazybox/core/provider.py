"""
Service provider contract for bulk registration.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .container import Container


class ServiceProvider(ABC):
    """Bundles several registrations so they can be applied in one call.

    Example:
        class DatabaseProvider(ServiceProvider):
            def register(self, container):
                container.set("dsn", "sqlite://")
                container.set("db", lambda c: connect(c.get("dsn")))

        container.register(DatabaseProvider(), {"dsn": "postgres://"})
    """

    @abstractmethod
    def register(self, container: Container) -> None:
        """Perform set/factory/protect calls against ``container``."""
