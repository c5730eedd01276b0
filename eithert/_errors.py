from __future__ import annotations

import typing


class MissingCapabilityError(LookupError):
    """Carrier does not declare the capability an operation needs."""

    carrier: str
    capability: str

    def __init__(self, carrier: str, capability: str) -> None:
        self.carrier = carrier
        self.capability = capability
        super().__init__(f"Carrier {carrier!r} has no {capability!r} capability")


class UnknownCarrierError(LookupError):
    """Registry has no carrier under this name."""

    name: str

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No carrier registered as {name!r}")


class PartialFunctionError(ValueError):
    """Partial function applied outside its domain."""

    value: typing.Any

    def __init__(self, value: typing.Any) -> None:
        self.value = value
        super().__init__(f"Partial function is not defined at {value!r}")


__all__ = ("MissingCapabilityError", "PartialFunctionError", "UnknownCarrierError")
