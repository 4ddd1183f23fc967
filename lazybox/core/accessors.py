"""
Accessor sugar over a container.

``Accessors(container).getFooBar()`` reads ``foo_bar`` and
``Accessors(container).setFooBar(value)`` writes it. This layer sits
outside the container; anything it does can be done with ``get``/``set``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .container import Container
from .naming import decamelize


class Accessors:
    def __init__(self, container: Container) -> None:
        self._container = container

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("get") and len(name) > 3:
            id = decamelize(name[3:])
            return lambda: self._container.get(id)
        if name.startswith("set") and len(name) > 3:
            id = decamelize(name[3:])

            def setter(value: Any) -> Accessors:
                self._container.set(id, value)
                return self

            return setter
        raise AttributeError(f"Call to undefined method {type(self).__name__}.{name}()")
