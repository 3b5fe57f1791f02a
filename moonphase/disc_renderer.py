"""
Disc Renderer Module

Draws the two moon discs with Pillow. The inner disc is blurred, clipped to
the outer disc and blended with multiply, the way a browser composites a
blurred box-shadow inside a rounded, multiply-blended container.
"""

import math
import re

from PIL import Image, ImageChops, ImageColor, ImageDraw, ImageFilter

from moonphase.disc_geometry import blurred_inner_box

# Discs are drawn this many times larger and scaled down for smooth edges
SUPERSAMPLE = 4

# Discs wider than this many canvas widths are drawn at this size instead
MAX_DISC_FACTOR = 1024

_RGBA_PATTERN = re.compile(
    r"rgba\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*,\s*([0-9]*\.?[0-9]+)\s*\)$"
)


def parse_color(color):
    """Convert a CSS-style color to an (r, g, b, a) tuple

    Accepts anything ImageColor understands plus rgba() with a 0-1 alpha.
    """
    if isinstance(color, tuple):
        return color if len(color) == 4 else color + (255,)

    match = _RGBA_PATTERN.match(color.strip().lower())
    if match:
        r, g, b = (min(int(v), 255) for v in match.groups()[:3])
        alpha = float(match.group(4))
        # CSS alpha is 0-1, but accept Pillow style 0-255 as well
        if alpha <= 1:
            alpha *= 255
        return (r, g, b, min(int(round(alpha)), 255))

    rgb = ImageColor.getrgb(color)
    return rgb if len(rgb) == 4 else rgb + (255,)


def _clamp_huge_disc(canvas_size, diameter, left, top):
    """Shrink a disc far larger than the canvas to one that looks the same

    Near the quarters the terminator is almost a straight line and its
    circle grows to millions of pixels. The edge facing the canvas and the
    vertical center are kept, so the visible arc moves by at most
    canvas_size / 4096 pixels.
    """
    limit = MAX_DISC_FACTOR * canvas_size
    if diameter <= limit:
        return diameter, left, top

    center_x = left + diameter / 2
    center_y = top + diameter / 2
    if center_x >= canvas_size / 2:
        new_left = left
    else:
        new_left = left + diameter - limit
    return limit, new_left, center_y - limit / 2


def _circle_mask(canvas_size, diameter, left=0, top=0):
    """Anti-aliased circle mask ("L" mode) on a square canvas"""
    diameter, left, top = _clamp_huge_disc(canvas_size, diameter, left, top)
    big = Image.new("L", (canvas_size * SUPERSAMPLE, canvas_size * SUPERSAMPLE), 0)
    if diameter > 0:
        draw = ImageDraw.Draw(big)
        box = [
            left * SUPERSAMPLE,
            top * SUPERSAMPLE,
            (left + diameter) * SUPERSAMPLE,
            (top + diameter) * SUPERSAMPLE,
        ]
        draw.ellipse(box, fill=255)
    return big.resize((canvas_size, canvas_size), Image.LANCZOS)


def draw_disc(spec):
    """
    Draw a single filled disc on a transparent canvas.

    Args:
        spec (dict): diameter, color and optionally size (canvas edge,
            defaults to the diameter), left, top, opacity, blur and spread
            (grows the disc by that much on every side before blurring)

    Returns:
        PIL.Image: RGBA image of size x size
    """
    spread = spec.get("spread", 0)
    size = spec.get("size") or int(math.ceil(max(spec["diameter"], 0)))
    diameter = max(spec["diameter"] + 2 * spread, 0)
    left = spec.get("left", 0) - spread
    top = spec.get("top", 0) - spread
    opacity = spec.get("opacity", 1.0)
    blur = spec.get("blur", 0)

    r, g, b, a = parse_color(spec["color"])
    alpha = _circle_mask(size, diameter, left, top)

    if blur > 0:
        alpha = alpha.filter(ImageFilter.GaussianBlur(blur))

    # Color alpha and opacity both scale the disc coverage
    strength = int(round(a * max(min(opacity, 1.0), 0.0)))
    alpha = alpha.point(lambda value: value * strength // 255)

    disc = Image.new("RGBA", (size, size), (r, g, b, 0))
    disc.putalpha(alpha)
    return disc


def render_layout(layout):
    """
    Render a disc layout from derive_disc_layout() into an RGBA image.

    The image is the outer disc's bounding box; pixels outside the disc are
    fully transparent.
    """
    outer = layout["outer"]
    size = int(math.ceil(outer["diameter"]))

    content = Image.new("RGBA", (size, size), parse_color(outer["color"]))

    box = blurred_inner_box(layout)
    inner_disc = draw_disc(
        {
            "diameter": box["diameter"],
            "left": box["left"],
            "top": box["top"],
            "size": size,
            "color": layout["inner"]["color"],
            "opacity": layout["inner"]["opacity"],
            # shadow spread equals the blur size, blur radius maps to sigma / 2
            "spread": layout["blur"],
            "blur": layout["blur"] / 2,
        }
    )
    content = Image.alpha_composite(content, inner_disc)

    # Clip everything to the outer disc
    clip = _circle_mask(size, outer["diameter"])
    content.putalpha(ImageChops.multiply(content.getchannel("A"), clip))
    return content


def multiply_onto(background, disc, position):
    """Blend an RGBA disc onto an RGB background with multiply

    Args:
        background (PIL.Image): RGB image, modified in place
        disc (PIL.Image): RGBA image from render_layout()
        position (tuple): (x, y) of the disc's top-left corner
    """
    x, y = position
    region_box = (x, y, x + disc.width, y + disc.height)
    region = background.crop(region_box)

    multiplied = ImageChops.multiply(region, disc.convert("RGB"))
    region.paste(multiplied, (0, 0), disc.getchannel("A"))
    background.paste(region, region_box[:2])
    return background
