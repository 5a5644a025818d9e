"""Domain layer — pure Python, no framework dependencies."""

from domolect.domain.command_parser import CommandParser, tokenize, split_location
from domolect.domain.conditions import extract_conditions, parse_condition, parse_temperature
from domolect.domain.errors import DomolectError
from domolect.domain.models import (
    ApplianceCommand,
    AugmentedCommand,
    BarrierAction,
    BarrierCommand,
    Comparison,
    DeviceCategory,
    LightingCommand,
    Location,
    State,
    TemperatureCondition,
    ThermalDeviceCommand,
    TimeCondition,
)
from domolect.domain.reversal import reverse
from domolect.domain.simulator import simulate_execution
from domolect.domain.vocabulary import Vocabulary

__all__ = [
    "CommandParser",
    "tokenize",
    "split_location",
    "extract_conditions",
    "parse_condition",
    "parse_temperature",
    "DomolectError",
    "ApplianceCommand",
    "AugmentedCommand",
    "BarrierAction",
    "BarrierCommand",
    "Comparison",
    "DeviceCategory",
    "LightingCommand",
    "Location",
    "State",
    "TemperatureCondition",
    "ThermalDeviceCommand",
    "TimeCondition",
    "reverse",
    "simulate_execution",
    "Vocabulary",
]
