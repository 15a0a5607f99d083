"""Drive-cycle simulation."""

from .drive_cycle import DriveCycleSimulator, transition, select_gear

__all__ = ["DriveCycleSimulator", "transition", "select_gear"]
