"""Direct mapping of common channel names onto drive-cycle channels."""

from typing import Optional

from .rules import RuleTable, contains, contains_all, excluding, exactly

# Engine-speed names resolve to rpm before the generic speed rule sees them,
# and brake pedals to brake before the pedal rule does
ALIAS_RULES: RuleTable[str] = RuleTable([
    (exactly("vehiclespeed", "speed"), "speed"),
    (exactly("enginespeed", "rpm"), "rpm"),
    (excluding(contains("rpm", "engine_speed", "enginespeed"), "fan"), "rpm"),
    (excluding(contains("speed"), "fan", "wheel"), "speed"),
    (contains_all("brake", "pedal"), "brake"),
    (contains("throttle", "pedal", "accel_pos"), "throttle"),
    (contains("gear"), "gear"),
    (contains("wiper"), "wipers"),
    (excluding(contains("light"), "lightning"), "lights"),
])


def alias_channel(name: str) -> Optional[str]:
    """
    Find the drive-cycle channel a signal name stands for.

    Args:
        name: Signal name

    Returns:
        Channel name or None when the signal must be synthesized
    """
    return ALIAS_RULES.match(name.lower())
