"""
Provider that loads ``KEY=VALUE`` env files as literal container entries.
"""

from __future__ import annotations

from pathlib import Path

from lazybox.core.container import Container
from lazybox.core.provider import ServiceProvider
from lazybox.logging_config import get_logger

logger = get_logger(__name__)


def parse_env_file(path: Path) -> dict[str, str]:
    """Parse an env file.

    Blank lines and ``#`` comments are skipped, a leading ``export`` is
    stripped and values are unquoted.

    Args:
        path: File to read

    Returns:
        Mapping of keys to string values; empty if the file does not exist
    """
    if not path.exists():
        return {}

    values: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[7:]
        if "=" in line:
            key, value = line.split("=", 1)
            values[key.strip()] = value.strip().strip('"').strip("'")

    return values


class EnvFileProvider(ServiceProvider):
    """Registers every entry of an env file as a literal.

    Args:
        path: Env file to load
        prefix: Only keys starting with this prefix are kept; it is stripped
        lowercase: Lower-case the resulting ids
    """

    def __init__(self, path: Path | str, prefix: str = "", lowercase: bool = True) -> None:
        self.path = Path(path)
        self.prefix = prefix
        self.lowercase = lowercase

    def load(self) -> dict[str, str]:
        entries: dict[str, str] = {}
        for key, value in parse_env_file(self.path).items():
            if not key.startswith(self.prefix):
                continue
            id = key[len(self.prefix):]
            if not id:
                continue
            entries[id.lower() if self.lowercase else id] = value
        return entries

    def register(self, container: Container) -> None:
        entries = self.load()
        container.set(entries)
        logger.debug("env_file_loaded", path=str(self.path), entries=len(entries))
