"""Behavioural archetypes and their per-step synthesis rules."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List

from .rules import RuleTable, contains, contains_all
from ..models.drive_cycle import DriveCycleState
from ..prng import SeededRandom


class Archetype(str, Enum):
    """Synthesis rule classes selected from a signal's name and range."""
    COUNTER = "counter"
    STATE = "state"
    WHEEL_SPEED = "wheel_speed"
    TORQUE = "torque"
    TEMPERATURE = "temperature"
    VOLTAGE = "voltage"
    STEERING = "steering"
    YAW_RATE = "yaw_rate"
    PRESSURE = "pressure"
    GENERIC = "generic"


@dataclass(frozen=True)
class SignalProfile:
    """Resolved generation parameters of one signal."""

    name: str
    min: float
    max: float
    factor: float = 1.0
    offset: float = 0.0

    @property
    def key(self) -> str:
        return self.name.lower()

    @property
    def span(self) -> float:
        return self.max - self.min


def _by_name(predicate: Callable[[str], bool]) -> Callable[[SignalProfile], bool]:
    return lambda profile: predicate(profile.key)


def _looks_like_enum(profile: SignalProfile) -> bool:
    """Small integer range with unit factor, typical of status enumerations."""
    return (
        profile.factor == 1
        and 0 < profile.span < 20
        and float(profile.min).is_integer()
        and float(profile.max).is_integer()
    )


def _is_state(profile: SignalProfile) -> bool:
    return _looks_like_enum(profile) or contains("status", "state", "mode", "switch")(profile.key)


ARCHETYPE_RULES: RuleTable[Archetype] = RuleTable([
    (_by_name(contains("cnt", "count", "alive", "heartbeat")), Archetype.COUNTER),
    (_is_state, Archetype.STATE),
    (_by_name(contains_all("wheel", "speed")), Archetype.WHEEL_SPEED),
    (_by_name(contains("torque", "moment")), Archetype.TORQUE),
    (_by_name(contains("temp", "t_")), Archetype.TEMPERATURE),
    (_by_name(contains("volt", "ubatt", "terminal")), Archetype.VOLTAGE),
    (_by_name(contains("steer", "angle")), Archetype.STEERING),
    (_by_name(contains("yaw")), Archetype.YAW_RATE),
    (_by_name(contains("press", "p_")), Archetype.PRESSURE),
])


def classify(profile: SignalProfile) -> Archetype:
    """Pick the archetype for a signal; generic when no rule matches."""
    return ARCHETYPE_RULES.match(profile) or Archetype.GENERIC


# ============ Generators ============
#
# Each generator returns one unclamped physical value per drive-cycle step.

Generator = Callable[[SignalProfile, SeededRandom, DriveCycleState, float], List[float]]

DEFAULT_COUNTER_LIMIT = 15
STATE_CHANGE_THRESHOLD = 0.7
IDLE_VOLTAGE = 12.4
CHARGING_VOLTAGE = 14.4
RUNNING_RPM = 400
AMBIENT_TEMPERATURE = 20.0
WARM_TARGET_RATIO = 0.85
HIGH_LOAD = 80


def counter(profile: SignalProfile, rng: SeededRandom, cycle: DriveCycleState, warmup: float) -> List[float]:
    """Sawtooth 0, 1, ..., max, 0, 1, ..."""
    limit = math.floor(profile.max) if profile.max > 0 else DEFAULT_COUNTER_LIMIT
    return [float(i % (limit + 1)) for i in range(len(cycle))]


def state(profile: SignalProfile, rng: SeededRandom, cycle: DriveCycleState, warmup: float) -> List[float]:
    """Hold a value for 2 to 10 seconds, then jump, biased towards the minimum."""
    values = []
    current = float(math.floor(profile.min))
    hold = 0.0

    for _ in range(len(cycle)):
        if hold <= 0:
            if rng.next() > STATE_CHANGE_THRESHOLD:
                current = float(math.floor(rng.range(profile.min, profile.max + 0.99)))
            else:
                current = profile.min
            hold = rng.range(20, 100)
        else:
            hold -= 1
        values.append(current)
    return values


def wheel_speed(profile: SignalProfile, rng: SeededRandom, cycle: DriveCycleState, warmup: float) -> List[float]:
    """Vehicle speed with up to 1% per-wheel deviation."""
    return [speed * (0.99 + rng.next() * 0.02) for speed in cycle.speed]


def torque(profile: SignalProfile, rng: SeededRandom, cycle: DriveCycleState, warmup: float) -> List[float]:
    """Proportional to engine load with 5% noise."""
    span = profile.span
    return [
        profile.min + (load / 100) * span + (rng.next() - 0.5) * (span * 0.05)
        for load in cycle.load
    ]


def temperature(profile: SignalProfile, rng: SeededRandom, cycle: DriveCycleState, warmup: float) -> List[float]:
    """Exponential warm-up towards 85% of max, nudged by engine load."""
    target = profile.max * WARM_TARGET_RATIO
    ambient = max(AMBIENT_TEMPERATURE, profile.min)
    values = []
    for i, load in enumerate(cycle.load):
        progress = 1 - math.exp(-i / warmup)
        value = ambient + (target - ambient) * progress
        value += 0.5 if load > HIGH_LOAD else -0.1
        values.append(value)
    return values


def voltage(profile: SignalProfile, rng: SeededRandom, cycle: DriveCycleState, warmup: float) -> List[float]:
    """Charging band while the engine runs, battery rest voltage otherwise."""
    return [
        (CHARGING_VOLTAGE if rpm > RUNNING_RPM else IDLE_VOLTAGE) + (rng.next() - 0.5) * 0.2
        for rpm in cycle.rpm
    ]


def steering(profile: SignalProfile, rng: SeededRandom, cycle: DriveCycleState, warmup: float) -> List[float]:
    return list(cycle.steering)


def yaw_rate(profile: SignalProfile, rng: SeededRandom, cycle: DriveCycleState, warmup: float) -> List[float]:
    """Steering angle derivative scaled by speed, plus sensor noise."""
    values = []
    for i, speed in enumerate(cycle.speed):
        delta = cycle.steering[i] - cycle.steering[i - 1] if i > 0 else 0.0
        values.append(delta * speed / 100 + (rng.next() - 0.5) * 0.1)
    return values


def pressure(profile: SignalProfile, rng: SeededRandom, cycle: DriveCycleState, warmup: float) -> List[float]:
    """Scales with the engine speed fraction of 8000 rpm."""
    span = profile.span
    return [
        profile.min + (rpm / 8000) * span * 0.8 + rng.next() * span * 0.1
        for rpm in cycle.rpm
    ]


def generic(profile: SignalProfile, rng: SeededRandom, cycle: DriveCycleState, warmup: float) -> List[float]:
    """Slow damped sinusoid around the range midpoint plus noise."""
    span = profile.span
    values = []
    for i in range(len(cycle)):
        if span > 0:
            wave = math.sin(i / 50) * math.cos(i / 120)
            value = profile.min + span / 2 + wave * (span / 3)
            value += (rng.next() - 0.5) * (span * 0.1)
        else:
            value = math.sin(i / 10) * 50 + 50
        values.append(value)
    return values


GENERATORS: Dict[Archetype, Generator] = {
    Archetype.COUNTER: counter,
    Archetype.STATE: state,
    Archetype.WHEEL_SPEED: wheel_speed,
    Archetype.TORQUE: torque,
    Archetype.TEMPERATURE: temperature,
    Archetype.VOLTAGE: voltage,
    Archetype.STEERING: steering,
    Archetype.YAW_RATE: yaw_rate,
    Archetype.PRESSURE: pressure,
    Archetype.GENERIC: generic,
}
