"""Registry I/O (internal)."""

from .registry import RegistryClient

__all__ = ["RegistryClient"]
