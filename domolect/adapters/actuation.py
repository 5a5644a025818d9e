"""Maps parsed commands onto a DeviceDriver.

Used by whatever eventually schedules commands; the REPL only simulates.
"""

from typing import List, Optional, Tuple

from domolect.domain.models import (
    ApplianceCommand,
    BarrierAction,
    BarrierCommand,
    Command,
    LightingCommand,
    Location,
    State,
    ThermalDeviceCommand,
)
from domolect.ports.outbound import DeviceDriver

NON_LOCKABLE_BARRIERS = frozenset({"curtains"})
_LOCK_ACTIONS = (BarrierAction.LOCK, BarrierAction.UNLOCK)


class UnsupportedDeviceAction(Exception):
    """Raised when a device cannot perform the requested action"""
    pass


def dispatch(command: Command, driver: DeviceDriver) -> None:
    """Issue exactly one driver call for ``command``.

    Locking or unlocking a barrier in NON_LOCKABLE_BARRIERS raises
    UnsupportedDeviceAction and makes no driver call.
    """
    if isinstance(command, (LightingCommand, ApplianceCommand)):
        if command.state == State.ON:
            driver.turn_on(command.device_name, command.location)
        else:
            driver.turn_off(command.device_name, command.location)
    elif isinstance(command, BarrierCommand):
        if command.action in _LOCK_ACTIONS and command.device_name in NON_LOCKABLE_BARRIERS:
            raise UnsupportedDeviceAction(f"Barrier is not lockable: {command.device_name}")
        driver.apply_barrier_action(command.device_name, command.action, command.location)
    elif isinstance(command, ThermalDeviceCommand):
        driver.set_temperature(command.device_name, command.target_kelvin, command.location)
    else:
        raise TypeError(f"Unknown command type: {type(command).__name__}")


class RecordingDriver:
    """DeviceDriver that records calls instead of touching hardware."""

    def __init__(self):
        self.calls: List[Tuple] = []

    def turn_on(self, device_name: str, location: Optional[Location] = None) -> None:
        self.calls.append(("turn_on", device_name, location))

    def turn_off(self, device_name: str, location: Optional[Location] = None) -> None:
        self.calls.append(("turn_off", device_name, location))

    def apply_barrier_action(
        self,
        device_name: str,
        action: BarrierAction,
        location: Optional[Location] = None,
    ) -> None:
        self.calls.append(("apply_barrier_action", device_name, action, location))

    def set_temperature(
        self,
        device_name: str,
        kelvin: int,
        location: Optional[Location] = None,
    ) -> None:
        self.calls.append(("set_temperature", device_name, kelvin, location))
