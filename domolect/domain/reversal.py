"""Inverse commands for "until" guards.

When an "until" condition becomes satisfied, an external scheduler undoes
the base command. This module only computes the undoing command.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Optional

from domolect.domain.models import (
    ApplianceCommand,
    BarrierAction,
    BarrierCommand,
    Command,
    LightingCommand,
    State,
    ThermalDeviceCommand,
)

_OPPOSITE_STATE: Dict[State, State] = {
    State.ON: State.OFF,
    State.OFF: State.ON,
}

_OPPOSITE_ACTION: Dict[BarrierAction, BarrierAction] = {
    BarrierAction.OPEN: BarrierAction.CLOSE,
    BarrierAction.CLOSE: BarrierAction.OPEN,
    BarrierAction.LOCK: BarrierAction.UNLOCK,
    BarrierAction.UNLOCK: BarrierAction.LOCK,
}


def reverse(command: Command) -> Optional[Command]:
    """Return the command that undoes ``command``, or None when nothing can.

    A thermal device's previous target is unknown, so it has no reversal.
    """
    if isinstance(command, (LightingCommand, ApplianceCommand)):
        return replace(command, state=_OPPOSITE_STATE[command.state])
    if isinstance(command, BarrierCommand):
        return replace(command, action=_OPPOSITE_ACTION[command.action])
    if isinstance(command, ThermalDeviceCommand):
        return None
    raise TypeError(f"Unknown command type: {type(command).__name__}")
