"""
Moon phase calculation module
Shared between the preview server, the CLI and the display renderer

Phase is a float 0.0-1.0 where:
0.0 = New Moon, 0.25 = First Quarter, 0.5 = Full Moon, 0.75 = Last Quarter

Uses January 6, 2000 18:14 UTC as reference new moon
"""

import math
import time
from fractions import Fraction

from moonphase.logger import log, log_debug

# Reference new moon: January 6, 2000 18:14 UTC
REFERENCE_NEW_MOON = 947182440

# Mean synodic month in days
SYNODIC_MONTH_DAYS = 29.530588861

SECONDS_PER_DAY = 86400

# Exact month length, so arbitrarily large moments reduce without overflow
_SYNODIC_MONTH = Fraction(str(SYNODIC_MONTH_DAYS))

WAXING = "waxing"
WANING = "waning"

# Exclusive upper bound for each phase name, in cycle order
PHASE_BOUNDARIES = [
    (0.033863193308711, "New Moon"),
    (0.216136806691289, "Waxing Crescent"),
    (0.283863193308711, "First Quarter"),
    (0.466136806691289, "Waxing Gibbous"),
    (0.533863193308711, "Full"),
    (0.716136806691289, "Waning Gibbous"),
    (0.783863193308711, "Last Quarter"),
    (0.966136806691289, "Waning Crescent"),
]

PHASE_NAMES = [name for _, name in PHASE_BOUNDARIES]


class InvalidPhaseError(ValueError):
    """Raised when a phase fraction lies outside [0, 1)"""


def current_moment(clock=time.time):
    """Get current Unix time in whole seconds"""
    return int(math.floor(clock()))


def compute_phase_fraction(moment):
    """
    Calculate position in the synodic month for a Unix timestamp

    Args:
        moment (int): Seconds since the Unix epoch (UTC), may be negative

    Returns:
        float: Phase fraction in [0, 1)
    """
    seconds_since_new_moon = Fraction(moment) - REFERENCE_NEW_MOON
    days_since_new_moon = seconds_since_new_moon / SECONDS_PER_DAY

    # Python's % is floored, so times before the reference stay non-negative
    phase_days = days_since_new_moon % _SYNODIC_MONTH
    fraction = float(phase_days / _SYNODIC_MONTH)

    # Values just below a full cycle can round up to 1.0
    if fraction >= 1.0:
        fraction = 0.0
    return fraction


def classify_phase(fraction):
    """Convert phase fraction to one of the eight phase names

    Raises:
        InvalidPhaseError: if fraction is not in [0, 1)
    """
    if not (0.0 <= fraction < 1.0):
        raise InvalidPhaseError(f"Phase fraction must be in [0, 1), got {fraction}")

    for upper_bound, name in PHASE_BOUNDARIES:
        if fraction < upper_bound:
            return name
    return "New Moon"


def illumination_fraction(fraction):
    """Lit share of the disc: 0 at new moon, 1 at full moon"""
    return 1 - 2 * abs(fraction - 0.5)


def orientation(fraction):
    return WAXING if fraction < 0.5 else WANING


def is_waxing(fraction):
    return orientation(fraction) == WAXING


def get_moon_info(moment=None):
    """Get complete moon phase information for a Unix timestamp

    Args:
        moment (int, optional): Unix timestamp, defaults to now

    Returns:
        dict: phase, name, illumination, orientation, percentage, moment
    """
    if moment is None:
        moment = current_moment()

    log_debug(f"Moon phase calculation for timestamp: {moment}")
    phase = compute_phase_fraction(moment)
    illumination = illumination_fraction(phase)
    name = classify_phase(phase)

    log(f"Moon phase: {name} ({phase:.4f}, {illumination * 100:.1f}% lit)")

    return {
        "moment": moment,
        "phase": phase,
        "name": name,
        "illumination": illumination,
        "orientation": orientation(phase),
        "percentage": int(illumination * 100),
    }
