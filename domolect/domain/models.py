"""Domain data models — enums and frozen dataclasses.

Commands and conditions are closed unions of small immutable records.
Values are validated on construction so a half-built command can never
escape the parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union


class State(str, Enum):
    ON = "on"
    OFF = "off"


class BarrierAction(str, Enum):
    OPEN = "open"
    CLOSE = "close"
    LOCK = "lock"
    UNLOCK = "unlock"


class Comparison(str, Enum):
    """Relation between the current temperature and a threshold."""

    LESS_THAN = "less-than"
    EQUAL_TO = "equal-to"
    GREATER_THAN = "greater-than"

    @property
    def phrase(self) -> str:
        return self.value.replace("-", " ")


class DeviceCategory(str, Enum):
    LIGHT_SOURCE = "light_source"
    BARRIER = "barrier"
    APPLIANCE = "appliance"
    THERMAL_DEVICE = "thermal_device"


@dataclass(frozen=True)
class Location:
    """A named place on the premises. Compared by name only."""

    name: str

    def __str__(self) -> str:
        return self.name


# ── Commands ──────────────────────────────────────────────


@dataclass(frozen=True)
class LightingCommand:
    kind: ClassVar[str] = "Lighting"

    device_name: str
    state: State
    location: Optional[Location] = None


@dataclass(frozen=True)
class ApplianceCommand:
    kind: ClassVar[str] = "Appliance"

    device_name: str
    state: State
    location: Optional[Location] = None


@dataclass(frozen=True)
class BarrierCommand:
    kind: ClassVar[str] = "Barrier"

    device_name: str
    action: BarrierAction
    location: Optional[Location] = None


@dataclass(frozen=True)
class ThermalDeviceCommand:
    kind: ClassVar[str] = "ThermalDevice"

    device_name: str
    target_kelvin: int
    location: Optional[Location] = None

    def __post_init__(self):
        if self.target_kelvin <= 0:
            raise ValueError(f"target_kelvin must be positive, got {self.target_kelvin}")


Command = Union[LightingCommand, ApplianceCommand, BarrierCommand, ThermalDeviceCommand]


# ── Conditions ────────────────────────────────────────────


@dataclass(frozen=True)
class TemperatureCondition:
    """Satisfied when the current temperature holds ``comparison`` to the threshold."""

    kind: ClassVar[str] = "Temperature"

    threshold_kelvin: int
    comparison: Comparison

    def __post_init__(self):
        if self.threshold_kelvin <= 0:
            raise ValueError(f"threshold_kelvin must be positive, got {self.threshold_kelvin}")

    def describe(self) -> str:
        return f"current temperature {self.comparison.phrase} {self.threshold_kelvin} K"


@dataclass(frozen=True)
class TimeCondition:
    """A time of day in 24-hour form."""

    kind: ClassVar[str] = "Time"

    hour: int  # 0-23
    minute: int  # 0-59

    def __post_init__(self):
        if not (0 <= self.hour <= 23 and 0 <= self.minute <= 59):
            raise ValueError(f"invalid time of day: {self.hour}:{self.minute}")

    def describe(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


Condition = Union[TemperatureCondition, TimeCondition]


@dataclass(frozen=True)
class AugmentedCommand:
    """A command with optional trigger (``when``) and reversal (``until``) guards."""

    command: Command
    when: Optional[Condition] = None
    until: Optional[Condition] = None
