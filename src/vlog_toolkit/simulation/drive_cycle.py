"""Physics-based drive-cycle simulation used as ground truth for correlated signals."""

import math
import logging
from typing import Optional, Tuple

from ..config import SimulationConfig
from ..models.drive_cycle import DriveCycleState, DriveState
from ..prng import SeededRandom

logger = logging.getLogger(__name__)

# Proportional gains and clamps per state (m/s^2)
ACCEL_GAIN = 0.05
ACCEL_LIMIT = 2.0
DECEL_GAIN = 0.08
DECEL_LIMIT = -3.5
CRUISE_GAIN = 0.02
CRUISE_DRIFT = 0.1

MS2_TO_KMH = 3.6

STEERING_MIN_SPEED = 5.0
STEERING_STEP = 2.0
STEERING_DECAY = 0.98
STEERING_LIMIT = 540.0

PEDAL_THRESHOLD = 0.1
THROTTLE_GAIN = 30.0
BRAKE_GAIN = 25.0
COAST_LOAD_GAIN = 0.1

IDLE_RPM = 800.0
RPM_PER_KMH_PER_GEAR = 220.0
HARD_ACCEL = 1.0
HARD_ACCEL_RPM_BUMP = 300.0

# (speed above which, gear)
GEAR_TABLE = ((120.0, 6), (85.0, 5), (55.0, 4), (35.0, 3), (15.0, 2))


def _random_target(rng: SeededRandom) -> float:
    return 30 + rng.next() * 100


def transition(state: DriveState, rng: SeededRandom, target: float) -> Tuple[DriveState, float, float]:
    """
    Move the drive-cycle machine to its next state.

    Args:
        state: State whose timer expired
        rng: Generator used for dwell times and target speeds
        target: Current target speed in km/h

    Returns:
        Tuple of (next state, dwell timer in steps, target speed)
    """
    # Every transition consumes one leading draw before its own
    rng.next()

    if state == DriveState.IDLE:
        timer = 100 + rng.next() * 200
        return DriveState.ACCEL, timer, _random_target(rng)

    if state == DriveState.ACCEL:
        return DriveState.CRUISE, 100 + rng.next() * 400, target

    if state == DriveState.CRUISE:
        if rng.next() > 0.5:
            return DriveState.DECEL, 50 + rng.next() * 100, 0.0
        timer = 50 + rng.next() * 100
        return DriveState.ACCEL, timer, _random_target(rng)

    return DriveState.IDLE, 50 + rng.next() * 100, 0.0


def acceleration(state: DriveState, speed: float, target: float, step: int) -> float:
    """Proportional control law for the current state, in m/s^2."""
    error = target - speed
    if state == DriveState.ACCEL:
        return min(error * ACCEL_GAIN, ACCEL_LIMIT)
    if state == DriveState.DECEL:
        return max(error * DECEL_GAIN, DECEL_LIMIT)
    if state == DriveState.CRUISE:
        return error * CRUISE_GAIN + math.sin(step / 50) * CRUISE_DRIFT
    return 0.0


def integrate_speed(speed: float, accel: float, dt: float, max_speed: float) -> float:
    """Advance speed by one step, clamped to [0, max_speed]."""
    speed += accel * dt * MS2_TO_KMH
    return min(max(speed, 0.0), max_speed)


def steer(angle: float, speed: float, rng: SeededRandom) -> float:
    """Random-walk steering with return-to-centre, only while moving."""
    if speed <= STEERING_MIN_SPEED:
        return 0.0
    angle += (rng.next() - 0.5) * STEERING_STEP
    angle *= STEERING_DECAY
    return min(max(angle, -STEERING_LIMIT), STEERING_LIMIT)


def pedals(accel: float, speed: float) -> Tuple[float, float, float]:
    """
    Derive throttle, brake and load from acceleration.

    Returns:
        Tuple of (throttle %, brake %, load %)
    """
    if accel > PEDAL_THRESHOLD:
        throttle = min(accel * THROTTLE_GAIN, 100.0)
        return throttle, 0.0, throttle
    if accel < -PEDAL_THRESHOLD:
        return 0.0, min(abs(accel) * BRAKE_GAIN, 100.0), 0.0
    # Coasting
    return 0.0, 0.0, speed * COAST_LOAD_GAIN


def select_gear(speed: float) -> int:
    """Step lookup of gear from speed; 0 only when stopped."""
    if speed <= 0:
        return 0
    for threshold, gear in GEAR_TABLE:
        if speed > threshold:
            return gear
    return 1


def engine_rpm(speed: float, gear: int, accel: float, throttle: float, step: int, rng: SeededRandom) -> float:
    """Engine speed from road speed and gear, idling when no gear is engaged."""
    if gear > 0:
        rpm = max(speed / gear * RPM_PER_KMH_PER_GEAR, IDLE_RPM)
        if accel > HARD_ACCEL:
            rpm += HARD_ACCEL_RPM_BUMP
        return rpm

    rpm = IDLE_RPM + math.sin(step / 10) * 20 + (rng.next() - 0.5) * 20
    if throttle > 0:
        rpm += throttle * 40
    return rpm


class DriveCycleSimulator:
    """Generates the shared vehicle-dynamics channels for one request."""

    def __init__(self, config: Optional[SimulationConfig] = None):
        """
        Initialize simulator.

        Args:
            config: Simulation configuration
        """
        self._config = config or SimulationConfig()

    @property
    def config(self) -> SimulationConfig:
        return self._config

    def run(self) -> DriveCycleState:
        """
        Run the full simulation from the fixed seed.

        Returns:
            DriveCycleState with all nine channels
        """
        config = self._config
        rng = SeededRandom(config.drive_cycle_seed)
        dt = config.sampling_interval
        wiper_start, wiper_end = config.wiper_window

        channels = {name: [] for name in ("speed", "rpm", "throttle", "brake", "gear",
                                          "load", "steering", "wipers", "lights")}

        state = DriveState.IDLE
        timer = 0.0
        target = 0.0
        speed = 0.0
        steering = 0.0

        for i in range(config.total_points):
            if timer <= 0:
                state, timer, target = transition(state, rng, target)
            timer -= 1

            if state == DriveState.IDLE:
                speed = 0.0
            accel = acceleration(state, speed, target, i)
            speed = integrate_speed(speed, accel, dt, config.max_speed)

            steering = steer(steering, speed, rng)
            throttle, brake, load = pedals(accel, speed)
            gear = select_gear(speed)
            rpm = engine_rpm(speed, gear, accel, throttle, i, rng)

            channels["speed"].append(round(speed, 2))
            channels["rpm"].append(float(round(rpm)))
            channels["throttle"].append(round(throttle, 1))
            channels["brake"].append(round(brake, 1))
            channels["gear"].append(gear)
            channels["load"].append(round(load, 1))
            channels["steering"].append(round(steering, 1))
            channels["wipers"].append(1 if wiper_start < i < wiper_end else 0)
            channels["lights"].append(1 if i > config.lights_on_after else 0)

        logger.debug(f"Simulated drive cycle with {config.total_points} step(s)")
        return DriveCycleState(sampling_interval=dt, **channels)
