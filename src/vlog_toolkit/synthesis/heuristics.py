"""Name-based guesses of range, unit and scale for signals without a declared range."""

from typing import NamedTuple, Tuple

from .rules import RuleTable, contains, excluding
from ..models.signal import SignalDescriptor


class RangeGuess(NamedTuple):
    min: float
    max: float
    unit: str
    factor: float


DEFAULT_GUESS = RangeGuess(0, 100, "-", 1)

RANGE_RULES: RuleTable[RangeGuess] = RuleTable([
    (contains("temp"), RangeGuess(-40, 150, "°C", 0.1)),
    (contains("volt", "batt"), RangeGuess(0, 18, "V", 0.01)),
    (contains("curr"), RangeGuess(-200, 200, "A", 0.1)),
    (contains("soc"), RangeGuess(0, 100, "%", 0.5)),
    (contains("steer", "angle"), RangeGuess(-720, 720, "deg", 0.1)),
    (contains("yaw"), RangeGuess(-10, 10, "deg/s", 0.01)),
    (contains("torque"), RangeGuess(-100, 500, "Nm", 0.5)),
    (contains("press"), RangeGuess(0, 250, "bar", 0.1)),
    (excluding(contains("speed"), "rpm"), RangeGuess(0, 260, "km/h", 0.01)),
    (contains("rpm"), RangeGuess(0, 10000, "rpm", 0.5)),
    (contains("accel"), RangeGuess(-20, 20, "m/s²", 0.01)),
    (contains("status", "switch", "st_"), RangeGuess(0, 3, "", 1)),
    (contains("cnt", "counter"), RangeGuess(0, 15, "", 1)),
])


def guess_range(name: str) -> RangeGuess:
    """Guess physical range, unit and factor from a signal name."""
    return RANGE_RULES.match(name.lower()) or DEFAULT_GUESS


def is_undeclared_range(min_value: float, max_value: float, factor: float) -> bool:
    """
    Check for the (0, 0) sentinel that means no range was declared.

    A (0, 0) range only counts as undeclared with a unit factor; with any
    other factor it is trusted as a genuine zero-width signal.
    """
    return min_value == 0 and max_value == 0 and factor == 1


def resolve_range(descriptor: SignalDescriptor) -> Tuple[float, float, float]:
    """
    Get the range and factor used for generation.

    Args:
        descriptor: Discovered signal

    Returns:
        Tuple of (min, max, factor)
    """
    if not is_undeclared_range(descriptor.min, descriptor.max, descriptor.factor):
        return descriptor.min, descriptor.max, descriptor.factor

    guess = guess_range(descriptor.name)
    return guess.min, guess.max, guess.factor


def guess_unit(name: str) -> str:
    """Unit suggested by the name heuristics."""
    return guess_range(name).unit
