"""
Identifier name transforms used by the accessor sugar.
"""

from __future__ import annotations

import re

_SNAKE_SEGMENT = re.compile(r"(^|_)([a-z])")
_INNER_UPPER = re.compile(r"(?<!^)(?=[A-Z])")


def camelize(text: str) -> str:
    """Convert ``foo_bar`` to ``FooBar``."""
    return _SNAKE_SEGMENT.sub(lambda m: m.group(2).upper(), text)


def decamelize(text: str) -> str:
    """Convert ``FooBar`` to ``foo_bar``; never produces a leading underscore."""
    return _INNER_UPPER.sub("_", text).lower()
