"""
Ready-made service providers.
"""

from .env import EnvFileProvider, parse_env_file

__all__ = ["EnvFileProvider", "parse_env_file"]
