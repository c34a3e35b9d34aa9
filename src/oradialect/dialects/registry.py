"""
Explicit registry mapping dialect names to factories.
"""

from __future__ import annotations

from typing import Callable, Dict, List

from .base import Dialect, DialectError

DialectFactory = Callable[[], Dialect]


class DialectRegistry:
    """
    Named dialect factories.

    Build one at startup (``DialectRegistry.default()`` or ``register`` calls)
    and pass it to the schema entry points; nothing is registered globally.
    """

    def __init__(self) -> None:
        self._factories: Dict[str, DialectFactory] = {}

    @classmethod
    def default(cls) -> "DialectRegistry":
        """Registry with the built-in dialects."""
        from .oracle import OracleDialect

        registry = cls()
        registry.register("oracle", OracleDialect)
        return registry

    def register(self, name: str, factory: DialectFactory) -> None:
        key = name.strip().lower()
        if not key:
            raise DialectError("Dialect name must not be empty.")
        if key in self._factories:
            raise DialectError(f"Dialect '{key}' is already registered.")
        self._factories[key] = factory

    def get(self, name: str) -> Dialect:
        key = name.strip().lower()
        try:
            factory = self._factories[key]
        except KeyError as exc:
            known = ", ".join(self.names()) or "none"
            raise DialectError(f"Unknown dialect '{name}' (registered: {known})") from exc
        return factory()

    def names(self) -> List[str]:
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._factories
