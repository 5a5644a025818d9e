"""Parse errors for Domolect commands.

Every failure the pipeline can report is a subclass of DomolectError.
The ``kind`` attribute is a stable identifier for the failure; the message
is what the REPL prints after ``Error: ``.
"""


class DomolectError(ValueError):
    """Base class for all command parse errors."""

    kind = "DomolectError"
    default_message = "Invalid command"

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)


class EmptyInput(DomolectError):
    kind = "EmptyInput"
    default_message = "Empty command"


class IncompleteCommand(DomolectError):
    kind = "IncompleteCommand"
    default_message = "Incomplete command"


class IncompleteCommandAfterLocation(IncompleteCommand):
    kind = "IncompleteCommandAfterLocation"
    default_message = "Incomplete command after location"


class IncompleteTurnCommand(IncompleteCommand):
    kind = "IncompleteTurnCommand"
    default_message = "Incomplete turn command"


class IncompleteBarrierCommand(IncompleteCommand):
    kind = "IncompleteBarrierCommand"
    default_message = "Incomplete barrier command"


class IncompleteSetCommand(IncompleteCommand):
    kind = "IncompleteSetCommand"
    default_message = "Incomplete set command"


class InvalidCommandType(DomolectError):
    kind = "InvalidCommandType"
    default_message = "Invalid command type"


class InvalidDeviceType(DomolectError):
    kind = "InvalidDeviceType"
    default_message = "Invalid device type for 'turn' command"


class InvalidState(DomolectError):
    kind = "InvalidState"
    default_message = "Invalid state. Use ON or OFF"


class InvalidBarrierType(DomolectError):
    kind = "InvalidBarrierType"
    default_message = "Invalid barrier type"


class InvalidThermalDeviceType(DomolectError):
    kind = "InvalidThermalDeviceType"
    default_message = "Invalid thermal device type"


class InvalidTemperatureFormat(DomolectError):
    kind = "InvalidTemperatureFormat"
    default_message = "Invalid temperature format"


class NonPositiveTemperature(InvalidTemperatureFormat):
    kind = "NonPositiveTemperature"
    default_message = "Temperature must be a positive value"


class InvalidComparison(DomolectError):
    kind = "InvalidComparison"
    default_message = "Invalid comparison"


class InvalidTemperatureConditionFormat(DomolectError):
    kind = "InvalidTemperatureConditionFormat"
    default_message = "Invalid temperature condition format"


class InvalidTimeFormat(DomolectError):
    kind = "InvalidTimeFormat"
    default_message = "Invalid time condition format"


class InvalidTimeValue(InvalidTimeFormat):
    kind = "InvalidTimeValue"
    default_message = "Invalid time"
