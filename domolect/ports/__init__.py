"""Port interfaces (Hexagonal Architecture)."""

from domolect.ports.outbound import DeviceDriver, VocabularySource

__all__ = [
    "DeviceDriver",
    "VocabularySource",
]
