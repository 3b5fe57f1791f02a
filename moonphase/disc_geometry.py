"""
Disc geometry for the moon phase drawing

The moon is drawn as two overlapping discs: a fixed outer disc and an inner
disc whose size and horizontal offset shape the lit crescent or gibbous.
The inner circle is chosen so its arc passes through the top and bottom of
the outer disc and crosses the horizontal diameter at the terminator. This is
an approximation of the lune, not an exact area solve.

All offsets are relative to the left edge of the outer disc's bounding box.
"""

from moonphase.config import apply_defaults
from moonphase.phase_calculator import WANING, WAXING

# Floor for the terminator distance when the inner arc degenerates to a line
MIN_TERMINATOR_DISTANCE = 0.01


def compute_inner_disc(outer_diameter, semi_phase):
    """
    Calculate diameter and horizontal offset of the inner disc

    Args:
        outer_diameter (float): Diameter of the outer disc, > 0
        semi_phase (float): Value in [-1, 1], sign picks the side the inner
            disc is pushed towards, magnitude how far the terminator moves

    Returns:
        dict: {"diameter": float, "offset": float}
    """
    abs_phase = abs(semi_phase)
    n = max((1 - abs_phase) * outer_diameter / 2, MIN_TERMINATOR_DISTANCE)

    inner_radius = n / 2 + (outer_diameter * outer_diameter) / (8 * n)

    if semi_phase > 0:
        offset = outer_diameter / 2 - n
    else:
        offset = -2 * inner_radius + outer_diameter / 2 + n

    return {"diameter": inner_radius * 2, "offset": offset}


def derive_disc_layout(config, illumination, orientation, is_light_phase=None):
    """
    Work out colors and geometry for both discs

    Args:
        config (dict): Display config, missing keys fall back to defaults
        illumination (float): Lit fraction of the disc, 0=new, 1=full
        orientation (str): WAXING puts the shadow on the left, or WANING
        is_light_phase (bool, optional): Force the outer disc to the light
            color; defaults to illumination < 0.5

    Returns:
        dict: {"outer": {...}, "inner": {...}, "blur": ...}
    """
    if orientation not in (WAXING, WANING):
        raise ValueError(f"Unknown orientation: {orientation!r}")
    waxing = orientation == WAXING

    config = apply_defaults(config)
    if is_light_phase is None:
        is_light_phase = illumination < 0.5

    phase = illumination
    if is_light_phase:
        outer_color = config["light_color"]
        inner_color = config["shadow_color"]
        if waxing:
            phase *= -1
    else:
        outer_color = config["shadow_color"]
        inner_color = config["light_color"]
        phase = 1 - phase
        if not waxing:
            phase *= -1

    inner = compute_inner_disc(config["diameter"], phase * 2)

    return {
        "outer": {
            "diameter": config["diameter"],
            "color": outer_color,
        },
        "inner": {
            "diameter": inner["diameter"],
            "offset": inner["offset"],
            "color": inner_color,
            "opacity": 1 - config["earthshine"],
        },
        "blur": config["blur"],
    }


def blurred_inner_box(layout):
    """Bounding box of the inner disc after shrinking it for the blur halo

    The blur spreads the disc edge outwards by the blur size, so the disc is
    drawn smaller by that amount and shifted to keep its center.
    """
    blur = layout["blur"]
    outer_diameter = layout["outer"]["diameter"]
    inner = layout["inner"]

    blurred_diameter = inner["diameter"] - blur
    return {
        "diameter": blurred_diameter,
        "left": inner["offset"] + blur / 2,
        "top": (outer_diameter - blurred_diameter) / 2,
    }
