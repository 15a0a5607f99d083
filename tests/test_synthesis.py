"""Tests for name heuristics, archetypes, quantization and the synthesizer."""

import pytest

from vlog_toolkit.models.signal import SignalDescriptor
from vlog_toolkit.synthesis import (
    Archetype,
    SignalProfile,
    SignalSynthesizer,
    alias_channel,
    classify,
    decimals_for,
    guess_range,
    quantize,
    resolve_range,
)
from vlog_toolkit.synthesis.quantize import clamp, finalize, round_half_up


class TestAliasing:
    @pytest.mark.parametrize("name,channel", [
        ("VehicleSpeed", "speed"),
        ("speed", "speed"),
        ("EngineSpeed", "rpm"),
        ("Engine_Speed_Value", "rpm"),
        ("RPM", "rpm"),
        ("Veh_Speed_Disp", "speed"),
        ("BrakePedalPos", "brake"),
        ("AccelPedal", "throttle"),
        ("ThrottlePosition", "throttle"),
        ("Accel_Pos_Raw", "throttle"),
        ("GearSelected", "gear"),
        ("WiperSwitch", "wipers"),
        ("HeadLight", "lights"),
    ])
    def test_aliases(self, name, channel):
        assert alias_channel(name) == channel

    @pytest.mark.parametrize("name", [
        "FanSpeed", "Fan_RPM", "WheelSpeed_FL", "LightningSensor", "CoolantTemp",
    ])
    def test_not_aliased(self, name):
        assert alias_channel(name) is None


class TestHeuristics:
    def test_guess_range(self):
        assert tuple(guess_range("CoolantTemp")) == (-40, 150, "°C", 0.1)
        assert guess_range("Battery").unit == "V"
        assert guess_range("WheelSpeed").unit == "km/h"
        assert guess_range("Fan_RPM").factor == 0.5
        assert guess_range("Unknown_Thing").unit == "-"

    def test_declared_range_is_kept(self):
        descriptor = SignalDescriptor(name="CoolantTemp", min=-40, max=215, factor=1, offset=-40)
        assert resolve_range(descriptor) == (-40, 215, 1)

    def test_undeclared_range_is_guessed(self):
        descriptor = SignalDescriptor(name="CoolantTemp")
        assert resolve_range(descriptor) == (-40, 150, 0.1)

    def test_zero_range_with_scale_is_trusted(self):
        descriptor = SignalDescriptor(name="CoolantTemp", factor=0.5)
        assert resolve_range(descriptor) == (0, 0, 0.5)


class TestClassification:
    @pytest.mark.parametrize("profile,archetype", [
        (SignalProfile("Alive_Cnt", 0, 15), Archetype.COUNTER),
        (SignalProfile("MsgCounter", 0, 255), Archetype.COUNTER),
        (SignalProfile("Heartbeat", 0, 1000), Archetype.COUNTER),
        (SignalProfile("EngineStatus", 0, 1000), Archetype.STATE),
        (SignalProfile("DriveMode", 0, 100, 0.5), Archetype.STATE),
        (SignalProfile("Foo", 0, 7), Archetype.STATE),
        (SignalProfile("WheelSpeed_FL", 0, 260, 0.01), Archetype.WHEEL_SPEED),
        (SignalProfile("EngineTorque", -100, 500, 0.5), Archetype.TORQUE),
        (SignalProfile("CoolantTemp", -40, 150, 0.1), Archetype.TEMPERATURE),
        (SignalProfile("Battery_Voltage", 0, 18, 0.01), Archetype.VOLTAGE),
        (SignalProfile("SteeringAngle", -720, 720, 0.1), Archetype.STEERING),
        (SignalProfile("YawRate", -10, 10, 0.01), Archetype.YAW_RATE),
        (SignalProfile("BrakePressure", 0, 250, 0.1), Archetype.PRESSURE),
        (SignalProfile("Xyz", 0, 100), Archetype.GENERIC),
        (SignalProfile("Foo", 0, 7, 0.5), Archetype.GENERIC),
        (SignalProfile("Foo", 0.5, 7), Archetype.GENERIC),
    ])
    def test_classify(self, profile, archetype):
        assert classify(profile) == archetype


class TestQuantize:
    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(-2.5) == -2
        assert round_half_up(2.49) == 2

    @pytest.mark.parametrize("factor,decimals", [
        (1, 0), (2, 0), (0.5, 1), (0.1, 1), (0.01, 2), (0.0625, 4),
        (2.5, 1), (1e-05, 5), (2.5e-05, 6), (1e-09, 6), (0, 0),
    ])
    def test_decimals_for(self, factor, decimals):
        assert decimals_for(factor) == decimals

    def test_quantize(self):
        assert quantize(12.34, 0.5) == 12.5
        assert quantize(-0.26, 0.5) == -0.5
        assert quantize(7.2, 2, 1) == 7
        assert quantize(5.3, 0) == 5.3

    def test_clamp(self):
        assert clamp(120, 0, 100) == 100
        assert clamp(-5, 0, 100) == 0
        assert clamp(-5, 0, 0) == -5

    def test_finalize_snaps_to_grid(self):
        values = finalize([0.123, 50.04, 99.99, 150.0], 0, 100, 0.1, 0)
        assert values == [0.1, 50.0, 100.0, 100.0]

    def test_finalize_keeps_half_steps_inside_range(self):
        assert finalize([1.5], 0, 1.5, 1, 0) == [1.0]

    def test_finalize_uses_offset_precision(self):
        assert finalize([3.7], -10, 10, 1, -0.5) == [3.5]


@pytest.fixture
def descriptors():
    return [
        SignalDescriptor(name="VehicleSpeed"),
        SignalDescriptor(name="EngineSpeed", min=0, max=8000, factor=0.5),
        SignalDescriptor(name="CoolantTemp", min=-40, max=215, factor=1, offset=-40),
        SignalDescriptor(name="OilTemp"),
        SignalDescriptor(name="Alive_Counter", min=0, max=15),
        SignalDescriptor(name="DoorState", min=0, max=3),
        SignalDescriptor(name="WheelSpeed_RR", min=0, max=300, factor=0.01),
        SignalDescriptor(name="EngineTorque"),
        SignalDescriptor(name="Battery_Voltage"),
        SignalDescriptor(name="SteeringAngle", min=-780, max=780, factor=0.1),
        SignalDescriptor(name="YawRate"),
        SignalDescriptor(name="BrakePressure", min=0, max=200, factor=0.2, offset=1),
        SignalDescriptor(name="Mystery", min=-5, max=5, factor=0.001),
        SignalDescriptor(name="CAN_ID_0xC8_Signal_0", unit="raw"),
        SignalDescriptor(name="ZeroWidth", factor=0.25),
    ]


class TestSignalSynthesizer:
    def test_series_length(self, small_config, drive_cycle, descriptors):
        series = SignalSynthesizer(small_config).synthesize(descriptors, drive_cycle)
        assert set(series) == {d.name for d in descriptors}
        assert all(len(values) == 600 for values in series.values())

    def test_deterministic(self, small_config, drive_cycle, descriptors):
        first = SignalSynthesizer(small_config).synthesize(descriptors, drive_cycle)
        second = SignalSynthesizer(small_config).synthesize(descriptors, drive_cycle)
        assert first == second

    def test_independent_of_other_signals(self, small_config, drive_cycle, descriptors):
        synthesizer = SignalSynthesizer(small_config)
        alone = synthesizer.synthesize([descriptors[3]], drive_cycle)
        together = synthesizer.synthesize(descriptors, drive_cycle)
        assert alone["OilTemp"] == together["OilTemp"]

    def test_quantization_invariant(self, small_config, drive_cycle, descriptors):
        synthesizer = SignalSynthesizer(small_config)
        for descriptor in descriptors:
            profile = synthesizer.profile(descriptor)
            if profile.factor <= 0:
                continue
            for value in synthesizer.synthesize_signal(descriptor, drive_cycle):
                snapped = round((value - profile.offset) / profile.factor) * profile.factor + profile.offset
                assert snapped == pytest.approx(value, abs=1e-6)

    def test_clamp_invariant(self, small_config, drive_cycle, descriptors):
        synthesizer = SignalSynthesizer(small_config)
        for descriptor in descriptors:
            profile = synthesizer.profile(descriptor)
            if profile.max <= profile.min:
                continue
            values = synthesizer.synthesize_signal(descriptor, drive_cycle)
            assert min(values) >= profile.min
            assert max(values) <= profile.max

    def test_aliased_speed_follows_drive_cycle(self, small_config, drive_cycle):
        values = SignalSynthesizer(small_config).synthesize_signal(
            SignalDescriptor(name="VehicleSpeed"), drive_cycle
        )
        assert values == pytest.approx(drive_cycle.speed)

    def test_counter_sawtooth(self, small_config, drive_cycle):
        values = SignalSynthesizer(small_config).synthesize_signal(
            SignalDescriptor(name="Alive_Counter", min=0, max=15), drive_cycle
        )
        assert values[:18] == [float(i) for i in range(16)] + [0.0, 1.0]

    def test_state_values_are_integers_in_range(self, small_config, drive_cycle):
        values = SignalSynthesizer(small_config).synthesize_signal(
            SignalDescriptor(name="DoorState", min=0, max=3), drive_cycle
        )
        assert set(values) <= {0.0, 1.0, 2.0, 3.0}

    def test_voltage_while_running(self, small_config, drive_cycle):
        values = SignalSynthesizer(small_config).synthesize_signal(
            SignalDescriptor(name="Battery_Voltage"), drive_cycle
        )
        assert all(14.29 <= v <= 14.51 for v in values)

    def test_temperature_warms_up(self, small_config, drive_cycle):
        values = SignalSynthesizer(small_config).synthesize_signal(
            SignalDescriptor(name="OilTemp"), drive_cycle
        )
        assert values[0] < 21
        assert values[-1] > values[0] + 20

    def test_zero_width_range_is_not_clamped(self, small_config, drive_cycle):
        values = SignalSynthesizer(small_config).synthesize_signal(
            SignalDescriptor(name="ZeroWidth", factor=0.25), drive_cycle
        )
        assert max(values) > 50
        assert min(values) < 50

    def test_archetype_lookup(self, small_config):
        synthesizer = SignalSynthesizer(small_config)
        assert synthesizer.archetype(SignalDescriptor(name="VehicleSpeed")) is None
        assert synthesizer.archetype(SignalDescriptor(name="OilTemp")) == Archetype.TEMPERATURE

    def test_build_rows(self, small_config, drive_cycle):
        synthesizer = SignalSynthesizer(small_config)
        descriptors = [SignalDescriptor(name="VehicleSpeed"), SignalDescriptor(name="Gear")]
        rows = synthesizer.build_rows(descriptors, synthesizer.synthesize(descriptors, drive_cycle))
        assert len(rows) == 600
        assert rows[0]["timestamp"] == 0.0
        assert rows[10]["timestamp"] == 1.0
        assert set(rows[5]) == {"timestamp", "VehicleSpeed", "Gear"}
