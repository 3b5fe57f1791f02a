"""
Tests for phase fraction calculation and phase naming
"""

import math

import pytest

from moonphase.phase_calculator import (
    PHASE_BOUNDARIES,
    PHASE_NAMES,
    REFERENCE_NEW_MOON,
    SECONDS_PER_DAY,
    SYNODIC_MONTH_DAYS,
    WANING,
    WAXING,
    InvalidPhaseError,
    classify_phase,
    compute_phase_fraction,
    current_moment,
    get_moon_info,
    illumination_fraction,
    is_waxing,
    orientation,
)

SYNODIC_SECONDS = round(SYNODIC_MONTH_DAYS * SECONDS_PER_DAY)

SAMPLE_MOMENTS = [
    0,
    -1,
    REFERENCE_NEW_MOON - 1,
    REFERENCE_NEW_MOON + 1,
    1234567890,
    1700000000,
    -2208988800,  # 1900-01-01
    4102444800,  # 2100-01-01
    10 ** 12,
    -(10 ** 12),
]


def _cycle_distance(a, b):
    """Distance between two phase fractions on the unit circle"""
    diff = abs(a - b) % 1.0
    return min(diff, 1.0 - diff)


def test_reference_moment_is_new_moon():
    assert compute_phase_fraction(REFERENCE_NEW_MOON) == 0.0


@pytest.mark.parametrize("moment", SAMPLE_MOMENTS)
def test_phase_fraction_in_unit_range(moment):
    fraction = compute_phase_fraction(moment)
    assert 0.0 <= fraction < 1.0


@pytest.mark.parametrize("moment", [10**400, -(10**400), 2**1100 + 7])
def test_moments_beyond_float_range(moment):
    fraction = compute_phase_fraction(moment)
    assert 0.0 <= fraction < 1.0
    assert classify_phase(fraction) in PHASE_NAMES


def test_whole_months_from_reference_are_exact():
    # 10**9 synodic months is a whole number of days
    moment = REFERENCE_NEW_MOON + 29530588861 * SECONDS_PER_DAY
    assert compute_phase_fraction(moment) == 0.0


def test_moments_before_reference_wrap_to_end_of_cycle():
    fraction = compute_phase_fraction(REFERENCE_NEW_MOON - SECONDS_PER_DAY)
    assert fraction == pytest.approx(1 - 1 / SYNODIC_MONTH_DAYS)


@pytest.mark.parametrize("moment", [1234567890, 1700000000, REFERENCE_NEW_MOON + 500000])
@pytest.mark.parametrize("k", [-10, -3, -1, 1, 2, 10])
def test_phase_fraction_is_periodic(moment, k):
    shifted = compute_phase_fraction(moment + k * SYNODIC_SECONDS)
    assert _cycle_distance(shifted, compute_phase_fraction(moment)) < 1e-6


def test_half_month_after_reference_is_full():
    moment = REFERENCE_NEW_MOON + 15 * SECONDS_PER_DAY
    fraction = compute_phase_fraction(moment)

    assert fraction == pytest.approx(0.5079, abs=1e-4)
    assert classify_phase(fraction) == "Full"
    assert illumination_fraction(fraction) == pytest.approx(0.984, abs=1e-3)


def test_reference_new_moon_end_to_end():
    fraction = compute_phase_fraction(947182440)

    assert fraction == 0.0
    assert classify_phase(fraction) == "New Moon"
    assert illumination_fraction(fraction) == 0.0


@pytest.mark.parametrize(
    "fraction,name",
    [
        (0.0, "New Moon"),
        (0.125, "Waxing Crescent"),
        (0.25, "First Quarter"),
        (0.375, "Waxing Gibbous"),
        (0.5, "Full"),
        (0.625, "Waning Gibbous"),
        (0.75, "Last Quarter"),
        (0.875, "Waning Crescent"),
        (0.99, "New Moon"),
    ],
)
def test_canonical_fractions_are_named(fraction, name):
    assert classify_phase(fraction) == name


def test_boundaries_belong_to_following_range():
    """Each boundary is an exclusive upper bound for the label before it"""
    following = PHASE_NAMES[1:] + ["New Moon"]
    for (bound, name), next_name in zip(PHASE_BOUNDARIES, following):
        assert classify_phase(bound) == next_name
        assert classify_phase(math.nextafter(bound, 0.0)) == name


def test_classification_partitions_unit_interval():
    """Walking [0, 1) only ever moves to the next label in cycle order"""
    cycle = PHASE_NAMES + ["New Moon"]
    seen = [classify_phase(0.0)]
    for step in range(1, 10000):
        name = classify_phase(step / 10000)
        if name != seen[-1]:
            seen.append(name)

    assert seen == cycle


@pytest.mark.parametrize("fraction", [-0.1, -1e-12, 1.0, 1.5, float("nan"), float("inf")])
def test_classify_rejects_out_of_range(fraction):
    with pytest.raises(InvalidPhaseError):
        classify_phase(fraction)


def test_invalid_phase_error_is_value_error():
    with pytest.raises(ValueError):
        classify_phase(2.0)


def test_illumination_is_symmetric_around_full():
    assert illumination_fraction(0.5) == 1.0
    for offset in (0.1, 0.25, 0.4):
        assert illumination_fraction(0.5 - offset) == pytest.approx(
            illumination_fraction(0.5 + offset)
        )


def test_orientation():
    assert orientation(0.0) == WAXING
    assert orientation(0.49) == WAXING
    assert orientation(0.5) == WANING
    assert orientation(0.9) == WANING
    assert is_waxing(0.2)
    assert not is_waxing(0.7)


def test_current_moment_floors_clock():
    assert current_moment(clock=lambda: 1700000000.9) == 1700000000


def test_get_moon_info():
    info = get_moon_info(REFERENCE_NEW_MOON + 7 * SECONDS_PER_DAY)

    assert info["moment"] == REFERENCE_NEW_MOON + 7 * SECONDS_PER_DAY
    assert info["name"] == "First Quarter"
    assert info["orientation"] == WAXING
    assert info["phase"] == pytest.approx(7 / SYNODIC_MONTH_DAYS)
    assert info["percentage"] == int(info["illumination"] * 100)
