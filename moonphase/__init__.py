"""
moonphase - lunar phase calculation and moon disc rendering for small displays
"""

from moonphase.disc_geometry import compute_inner_disc, derive_disc_layout
from moonphase.phase_calculator import (
    WANING,
    WAXING,
    InvalidPhaseError,
    classify_phase,
    compute_phase_fraction,
    get_moon_info,
    illumination_fraction,
)

__version__ = "0.1.0"
