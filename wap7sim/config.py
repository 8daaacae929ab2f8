"""Simulation constants for the WAP-7 locomotive model.

A single place for the numbers the control logic depends on. Integer
constants are used where the engine does integer arithmetic (speed,
throttle); the line supply is expressed as a unit value.

Engine:
    MAX_THROTTLE: Highest throttle notch.
    THROTTLE_STEP_KMH: Commanded speed per notch, km/h.
    MAX_SPEED_KMH: Speed ceiling, km/h. Not reached by throttle alone
        (8 notches give 80 km/h).

Braking:
    STANDARD_BRAKE_DECELERATION_KMH: Speed shed by one brake application.
    EMERGENCY_BRAKE_DECELERATION_KMH: Rated emergency deceleration per
        application. The emergency stop halts the unit at once, so this is
        informational.

Simulation:
    MAX_SIMULATION_SECONDS: Longest interval one ``simulate_movement`` call
        accepts, in seconds.

Power supply:
    STANDARD_VOLTAGE: Catenary voltage, 25 kV AC.

Console:
    PROMPT: Input prompt of the interactive session.
    DEFAULT_LOG_LEVEL / VERBOSE_LOG_LEVEL: Levels toggled by ``verbose``.
"""

import logging

from wap7sim.unit import Kilovolt

# Engine parameters
MAX_THROTTLE = 8
THROTTLE_STEP_KMH = 10
MAX_SPEED_KMH = 140

# Physical limitations
STANDARD_BRAKE_DECELERATION_KMH = 10
EMERGENCY_BRAKE_DECELERATION_KMH = 30

# Simulation
MAX_SIMULATION_SECONDS = 2**31 - 1

# Power supply
STANDARD_VOLTAGE = Kilovolt(25)

# Console
PROMPT = ">> "
DEFAULT_LOG_LEVEL = logging.INFO
VERBOSE_LOG_LEVEL = logging.DEBUG
