"""Outbound ports — interfaces for external system adapters."""

from typing import Optional, Protocol, runtime_checkable

from domolect.domain.models import BarrierAction, Location
from domolect.domain.vocabulary import Vocabulary


@runtime_checkable
class DeviceDriver(Protocol):
    """Interface for hardware that actually actuates devices.

    The parser never calls a driver; an external scheduler does, once a
    command's guard conditions allow it.
    """

    def turn_on(self, device_name: str, location: Optional[Location] = None) -> None: ...

    def turn_off(self, device_name: str, location: Optional[Location] = None) -> None: ...

    def apply_barrier_action(
        self,
        device_name: str,
        action: BarrierAction,
        location: Optional[Location] = None,
    ) -> None: ...

    def set_temperature(
        self,
        device_name: str,
        kelvin: int,
        location: Optional[Location] = None,
    ) -> None: ...


@runtime_checkable
class VocabularySource(Protocol):
    """Interface for anything that can supply a vocabulary table."""

    def load(self) -> Vocabulary: ...
