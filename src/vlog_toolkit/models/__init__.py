"""Data models for the vehicle log toolkit."""

from .signal import SignalDescriptor, SignalStatistics, DiagnosticReport, UNIT_PLACEHOLDER
from .drive_cycle import DriveCycleState, DriveState, CHANNELS
from .session import LogParseResult, LogFileType, format_file_size

__all__ = [
    "SignalDescriptor",
    "SignalStatistics",
    "DiagnosticReport",
    "UNIT_PLACEHOLDER",
    "DriveCycleState",
    "DriveState",
    "CHANNELS",
    "LogParseResult",
    "LogFileType",
    "format_file_size",
]
