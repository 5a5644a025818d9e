"""Describes what a parsed command would do, without doing it.

Only formats already-validated values; never fails for a well-typed input.
"""

from __future__ import annotations

from typing import Dict, List

from domolect.domain.models import (
    ApplianceCommand,
    AugmentedCommand,
    BarrierAction,
    BarrierCommand,
    Command,
    Condition,
    LightingCommand,
    ThermalDeviceCommand,
    TimeCondition,
)

# Segments of a description are joined onto one output line
SEGMENT_SEPARATOR = "; "

_BARRIER_GERUNDS: Dict[BarrierAction, str] = {
    BarrierAction.OPEN: "Opening",
    BarrierAction.CLOSE: "Closing",
    BarrierAction.LOCK: "Locking",
    BarrierAction.UNLOCK: "Unlocking",
}


def _location_suffix(command: Command) -> str:
    return f" at {command.location.name}" if command.location is not None else ""


def describe_action(command: Command) -> str:
    """One sentence naming the device action, e.g. ``Turning on the lamp at kitchen``."""
    if isinstance(command, (LightingCommand, ApplianceCommand)):
        return f"Turning {command.state.value} the {command.device_name}{_location_suffix(command)}"
    if isinstance(command, BarrierCommand):
        gerund = _BARRIER_GERUNDS[command.action]
        return f"{gerund} the {command.device_name}{_location_suffix(command)}"
    if isinstance(command, ThermalDeviceCommand):
        return (
            f"Setting {command.device_name} to {command.target_kelvin} K"
            f"{_location_suffix(command)}"
        )
    raise TypeError(f"Unknown command type: {type(command).__name__}")


def describe_condition(condition: Condition) -> str:
    if isinstance(condition, TimeCondition):
        return f"time is {condition.describe()}"
    return condition.describe()


def describe_segments(augmented: AugmentedCommand) -> List[str]:
    segments = [f"Command recognized: {augmented.command.kind}"]
    if augmented.when is not None:
        segments.append(f"When condition: {describe_condition(augmented.when)}")
    if augmented.until is not None:
        segments.append(f"Until condition: {describe_condition(augmented.until)}")
    segments.append(f"Simulated execution: {describe_action(augmented.command)}")
    return segments


def simulate_execution(augmented: AugmentedCommand) -> str:
    return SEGMENT_SEPARATOR.join(describe_segments(augmented))
