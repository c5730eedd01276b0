"""
Capability registry
===================

Name -> `CarrierCapabilities`. Lets callers pick a carrier by name, or find
every carrier whose declared capability set covers what they need, instead
of threading capability records by hand.

    registry = default_registry()
    registry.resolve("option", "monad")          # OPTION_MONAD
    registry.supporting("monad", "traverse")     # [identity, option, list, result]
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Iterable, Iterator

from ._errors import UnknownCarrierError
from .capabilities import CapabilityName, CarrierCapabilities
from .carriers import BUILTIN_CARRIERS

logger = logging.getLogger(__name__)


class CapabilityRegistry:
    """Mutable table of carriers keyed by name."""

    __slots__ = ("_carriers",)

    def __init__(self, carriers: Iterable[CarrierCapabilities] = (), /) -> None:
        self._carriers: dict[str, CarrierCapabilities] = {}
        for capabilities in carriers:
            self.register(capabilities)

    def register(self, capabilities: CarrierCapabilities, *, replace: bool = False) -> None:
        """Add a carrier. Registering a taken name twice needs `replace=True`."""
        if capabilities.name in self._carriers and not replace:
            raise ValueError(f"Carrier {capabilities.name!r} is already registered")
        self._carriers[capabilities.name] = capabilities
        logger.debug(
            "Registered carrier %r with capabilities %s",
            capabilities.name,
            sorted(capabilities.declared),
        )

    def lookup(self, name: str) -> CarrierCapabilities:
        try:
            return self._carriers[name]
        except KeyError:
            raise UnknownCarrierError(name) from None

    def resolve(self, name: str, capability: CapabilityName) -> typing.Any:
        """Capability record of carrier `name`, or MissingCapabilityError."""
        instance = self.lookup(name).require(capability)
        logger.debug("Resolved %s for carrier %r", capability, name)
        return instance

    def supporting(self, *capabilities: CapabilityName) -> list[CarrierCapabilities]:
        """Carriers whose declared set covers every requested capability (registration order)."""
        required = frozenset(capabilities)
        return [c for c in self._carriers.values() if required <= c.declared]

    def names(self) -> tuple[str, ...]:
        return tuple(self._carriers)

    def __contains__(self, name: object) -> bool:
        return name in self._carriers

    def __iter__(self) -> Iterator[CarrierCapabilities]:
        return iter(self._carriers.values())

    def __len__(self) -> int:
        return len(self._carriers)

    def __repr__(self) -> str:
        return f"CapabilityRegistry({list(self._carriers)!r})"


def default_registry() -> CapabilityRegistry:
    """Fresh registry holding the built-in carriers."""
    return CapabilityRegistry(BUILTIN_CARRIERS)


__all__ = ("CapabilityRegistry", "default_registry")
