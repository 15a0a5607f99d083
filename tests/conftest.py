"""Pytest fixtures for vehicle log toolkit tests."""

import pytest

from vlog_toolkit.config import SimulationConfig
from vlog_toolkit.simulation.drive_cycle import DriveCycleSimulator


SAMPLE_DBC = """VERSION ""

BO_ 256 EngineData: 8 ECU
 SG_ EngineSpeed : 0|16@1+ (0.5,0) [0|8000] "rpm" Vector__XXX
 SG_ CoolantTemp : 16|8@1+ (1,-40) [-40|215] "degC" Vector__XXX
 SG_ MuxedSignal m12 : 24|8@1+ (1e-2,0) [0|2.55] "V" Vector__XXX
 SG_ Alive_Counter : 32|4@1+ (1,0) [0|15] "" Vector__XXX

BO_ 512 Chassis: 8 ABS
 SG_ VehicleSpeed : 0|16@1+ (0.01,0) [0|300] "km/h" Vector__XXX
 SG_ VehicleSpeed : 0|8@1+ (1,0) [0|255] "mph" Vector__XXX
 SG_ DoorState : 16|2@1+ (1,0) [0|3] "" Vector__XXX
 SG_ NoMetadata : 20|1@1+
"""

SAMPLE_CSV = "time,a,b\n0,1,2\n1,3,4\n"


@pytest.fixture
def small_config():
    """A one minute simulation."""
    return SimulationConfig(duration=60.0)


@pytest.fixture
def drive_cycle(small_config):
    """Drive cycle for the small config."""
    return DriveCycleSimulator(small_config).run()


@pytest.fixture
def sample_dbc_bytes():
    """Description file content."""
    return SAMPLE_DBC.encode("utf-8")


@pytest.fixture
def sample_csv_bytes():
    """Minimal delimited export."""
    return SAMPLE_CSV.encode("utf-8")


@pytest.fixture
def binary_log_bytes():
    """Binary blob with six plausible channel names among noise."""
    tokens = [
        b"MDF4", b"EngineTemp", b"VehicleSpeed", b"12345", b"ab",
        b"<CN>Batt_Voltage</CN>", b"EngineTemp", b"Wheel_FL.Speed",
        b"x" * 60, b"DGBlock", b"Yaw-Rate", b"Gear_Pos",
    ]
    return b"\x00\x01" + b"\x00".join(tokens) + b"\x00\xff"
