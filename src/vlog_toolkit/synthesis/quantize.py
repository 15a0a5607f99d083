"""Clamping, quantization and precision of synthesized values."""

import math
from typing import List

MAX_DECIMALS = 6


def round_half_up(value: float) -> float:
    """Round to the nearest integer, halves towards positive infinity."""
    return math.floor(value + 0.5)


def decimals_for(step: float) -> int:
    """
    Decimal places implied by the textual form of a scale factor or offset.

    Counts digits after the decimal point; in scientific notation the
    negative exponent adds to the mantissa's digits. Capped at 6.

    Args:
        step: Factor or offset

    Returns:
        Number of decimals
    """
    if step == 0 or float(step).is_integer():
        return 0

    text = repr(abs(float(step)))
    mantissa, _, exponent = text.partition("e")
    decimals = len(mantissa.partition(".")[2].rstrip("0"))
    if exponent:
        decimals -= int(exponent)
    return max(0, min(decimals, MAX_DECIMALS))


def quantize(value: float, factor: float, offset: float = 0.0) -> float:
    """Snap a physical value onto the raw grid defined by factor and offset."""
    if factor <= 0:
        return value
    raw = round_half_up((value - offset) / factor)
    return raw * factor + offset


def clamp(value: float, low: float, high: float) -> float:
    """Clamp into [low, high]; undeclared ranges (high <= low) pass through."""
    if high > low:
        return min(max(value, low), high)
    return value


def finalize(values: List[float], min_value: float, max_value: float, factor: float, offset: float) -> List[float]:
    """
    Clamp, quantize and round a generated series.

    Args:
        values: Raw generated physical values
        min_value: Physical minimum
        max_value: Physical maximum
        factor: Scale factor
        offset: Offset

    Returns:
        Series on the measurement grid
    """
    decimals = max(decimals_for(factor), decimals_for(offset))
    result = []
    for value in values:
        value = clamp(value, min_value, max_value)
        value = quantize(value, factor, offset)
        if factor > 0 and max_value > min_value:
            # A half step can round past either bound
            tolerance = factor * 1e-6
            if value > max_value + tolerance:
                value -= factor
            elif value < min_value - tolerance:
                value += factor
        result.append(round(value, decimals) + 0.0)
    return result
