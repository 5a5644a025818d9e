"""Tests for domain/simulator.py — descriptions of parsed commands."""

import pytest

from domolect.domain.command_parser import CommandParser
from domolect.domain.models import (
    ApplianceCommand,
    AugmentedCommand,
    BarrierAction,
    BarrierCommand,
    Comparison,
    LightingCommand,
    Location,
    State,
    TemperatureCondition,
    ThermalDeviceCommand,
    TimeCondition,
)
from domolect.domain.simulator import (
    SEGMENT_SEPARATOR,
    describe_action,
    describe_condition,
    describe_segments,
    simulate_execution,
)


class TestDescribeAction:
    def test_lighting(self):
        command = LightingCommand(device_name="lamp", state=State.ON)
        assert describe_action(command) == "Turning on the lamp"

    def test_appliance_with_location(self):
        command = ApplianceCommand("centrifuge", State.OFF, Location("lab"))
        assert describe_action(command) == "Turning off the centrifuge at lab"

    @pytest.mark.parametrize("action,sentence", [
        (BarrierAction.OPEN, "Opening the gate"),
        (BarrierAction.CLOSE, "Closing the gate"),
        (BarrierAction.LOCK, "Locking the gate"),
        (BarrierAction.UNLOCK, "Unlocking the gate"),
    ])
    def test_barrier(self, action, sentence):
        assert describe_action(BarrierCommand("gate", action)) == sentence

    def test_thermal_device(self):
        command = ThermalDeviceCommand("oven", 450, Location("kitchen"))
        assert describe_action(command) == "Setting oven to 450 K at kitchen"

    def test_unknown_type(self):
        with pytest.raises(TypeError):
            describe_action("turn lamp on")


class TestDescribeCondition:
    def test_temperature(self):
        condition = TemperatureCondition(290, Comparison.GREATER_THAN)
        assert describe_condition(condition) == "current temperature greater than 290 K"

    def test_time(self):
        assert describe_condition(TimeCondition(hour=0, minute=5)) == "time is 00:05"


class TestSimulateExecution:
    def test_plain_command(self):
        augmented = AugmentedCommand(command=LightingCommand("lamp", State.ON))
        assert simulate_execution(augmented) == (
            "Command recognized: Lighting; Simulated execution: Turning on the lamp"
        )

    def test_segment_order(self):
        augmented = AugmentedCommand(
            command=BarrierCommand("airlock", BarrierAction.UNLOCK, Location("deck")),
            when=TemperatureCondition(300, Comparison.LESS_THAN),
            until=TimeCondition(hour=22, minute=0),
        )
        assert describe_segments(augmented) == [
            "Command recognized: Barrier",
            "When condition: current temperature less than 300 K",
            "Until condition: time is 22:00",
            "Simulated execution: Unlocking the airlock at deck",
        ]

    def test_single_line(self):
        augmented = AugmentedCommand(
            command=ThermalDeviceCommand("thermostat", 295),
            until=TimeCondition(hour=22, minute=0),
        )
        text = simulate_execution(augmented)
        assert "\n" not in text
        assert text.count(SEGMENT_SEPARATOR) == 2

    def test_end_to_end(self):
        text = CommandParser().evaluate("set thermostat to 295K until 10:00 pm")
        assert text == (
            "Command recognized: ThermalDevice; "
            "Until condition: time is 22:00; "
            "Simulated execution: Setting thermostat to 295 K"
        )

    def test_end_to_end_with_location(self):
        text = CommandParser().evaluate("kitchen set oven to 450K")
        assert text.endswith("Setting oven to 450 K at kitchen")
        assert "When condition" not in text
        assert "Until condition" not in text
