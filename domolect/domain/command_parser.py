"""Domolect command parser.

Pure Python, no I/O. One linear pass per input:
tokens -> optional location -> main command, then guard clauses from the
raw string -> AugmentedCommand. Any stage may abort with a DomolectError;
nothing partial is ever returned.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from domolect.domain.conditions import extract_conditions, parse_condition, parse_temperature
from domolect.domain.errors import (
    DomolectError,
    EmptyInput,
    IncompleteBarrierCommand,
    IncompleteCommand,
    IncompleteCommandAfterLocation,
    IncompleteSetCommand,
    IncompleteTurnCommand,
    InvalidBarrierType,
    InvalidCommandType,
    InvalidDeviceType,
    InvalidState,
    InvalidThermalDeviceType,
)
from domolect.domain.models import (
    ApplianceCommand,
    AugmentedCommand,
    BarrierAction,
    BarrierCommand,
    Command,
    DeviceCategory,
    LightingCommand,
    Location,
    State,
    ThermalDeviceCommand,
)
from domolect.domain.simulator import simulate_execution
from domolect.domain.vocabulary import Vocabulary

TURN = "turn"
SET = "set"
TO = "to"
BARRIER_VERBS = frozenset(a.value for a in BarrierAction)
COMMAND_KEYWORDS = frozenset({TURN, SET}) | BARRIER_VERBS


def tokenize(text: Optional[str]) -> List[str]:
    """Split ``text`` on whitespace runs; at least two tokens are required."""
    if text is None or not text.strip():
        raise EmptyInput()
    tokens = text.split()
    if len(tokens) < 2:
        raise IncompleteCommand()
    return tokens


def is_command_keyword(token: str) -> bool:
    return token.lower() in COMMAND_KEYWORDS


def split_location(tokens: List[str]) -> Tuple[Optional[Location], List[str]]:
    """Treat a leading non-keyword token as the command's location."""
    if is_command_keyword(tokens[0]):
        return None, tokens
    rest = tokens[1:]
    if len(rest) < 2:
        raise IncompleteCommandAfterLocation()
    return Location(tokens[0]), rest


def parse_state(token: str) -> State:
    try:
        return State(token.lower())
    except ValueError:
        raise InvalidState() from None


class CommandParser:
    """Parses Domolect command lines against a vocabulary table."""

    def __init__(self, vocabulary: Optional[Vocabulary] = None):
        self._vocabulary = vocabulary if vocabulary is not None else Vocabulary.default()

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocabulary

    def parse(self, text: Optional[str]) -> AugmentedCommand:
        """Parse a full command line. Raises DomolectError on any malformed input."""
        tokens = tokenize(text)
        location, tokens = split_location(tokens)
        command = self.parse_main_command(tokens, location)

        clauses = extract_conditions(text)
        when = parse_condition(clauses["when"]) if "when" in clauses else None
        until = parse_condition(clauses["until"]) if "until" in clauses else None
        return AugmentedCommand(command=command, when=when, until=until)

    def evaluate(self, text: Optional[str]) -> str:
        """Parse and describe ``text``; errors come back as ``"Error: <reason>"``."""
        try:
            return simulate_execution(self.parse(text))
        except DomolectError as e:
            return f"Error: {e}"

    def parse_main_command(self, tokens: List[str], location: Optional[Location] = None) -> Command:
        """Build a command from location-stripped tokens. Trailing tokens are ignored."""
        verb = tokens[0].lower()
        if verb == TURN:
            return self._parse_turn(tokens, location)
        if verb in BARRIER_VERBS:
            return self._parse_barrier(tokens, location)
        if verb == SET:
            return self._parse_set(tokens, location)
        raise InvalidCommandType()

    def _parse_turn(self, tokens: List[str], location: Optional[Location]) -> Command:
        # turn <device> <on|off>
        if len(tokens) < 3:
            raise IncompleteTurnCommand()

        device = tokens[1]
        if self._vocabulary.contains(DeviceCategory.LIGHT_SOURCE, device):
            state = parse_state(tokens[2])
            return LightingCommand(device_name=device, state=state, location=location)
        if self._vocabulary.contains(DeviceCategory.APPLIANCE, device):
            state = parse_state(tokens[2])
            return ApplianceCommand(device_name=device, state=state, location=location)
        raise InvalidDeviceType()

    def _parse_barrier(self, tokens: List[str], location: Optional[Location]) -> Command:
        # open|close|lock|unlock <barrier>
        if len(tokens) < 2:
            raise IncompleteBarrierCommand()

        device = tokens[1]
        if not self._vocabulary.contains(DeviceCategory.BARRIER, device):
            raise InvalidBarrierType()
        action = BarrierAction(tokens[0].lower())
        return BarrierCommand(device_name=device, action=action, location=location)

    def _parse_set(self, tokens: List[str], location: Optional[Location]) -> Command:
        # set <thermal_device> to <integer>[ ]K
        if len(tokens) < 4:
            raise IncompleteSetCommand()

        device = tokens[1]
        if not self._vocabulary.contains(DeviceCategory.THERMAL_DEVICE, device):
            raise InvalidThermalDeviceType()
        if tokens[2].lower() != TO:
            raise IncompleteSetCommand(f"Expected '{TO}' after {device!r} in set command")

        literal = tokens[3]
        if len(tokens) > 4 and tokens[4].upper() == "K":
            literal = f"{literal} {tokens[4]}"
        return ThermalDeviceCommand(
            device_name=device,
            target_kelvin=parse_temperature(literal),
            location=location,
        )
