from __future__ import annotations

class CapabilityError(TypeError):
    """Instance does not provide the capability a transformer needs."""

    instance: object
    capability: str

    def __init__(self, instance: object, capability: str) -> None:
        self.instance = instance
        self.capability = capability
        super().__init__(f"{type(instance).__name__} is not a {capability}")

class NothingError(ValueError):
    """Tried to unwrap an absent Option."""

    def __init__(self) -> None:
        super().__init__("Called unwrap on Nothing")

__all__ = ("CapabilityError", "NothingError")
