"""
Moon Phase Display Module

Builds the complete widget image: a title bar with the phase name above the
rendered moon disc. Used by the preview server and the command line preview.
"""

import os

from PIL import Image, ImageDraw, ImageFont

from moonphase import config as display_config
from moonphase.config import apply_defaults
from moonphase.disc_geometry import derive_disc_layout
from moonphase.disc_renderer import multiply_onto, render_layout
from moonphase.logger import log, log_debug
from moonphase.phase_calculator import get_moon_info

# Color constants for the black and white e-ink panel
WHITE = (0xFF, 0xFF, 0xFF)
BLACK = (0x00, 0x00, 0x00)


class MoonPhaseRenderer:
    def __init__(
        self,
        width=display_config.DISPLAY_WIDTH,
        height=display_config.DISPLAY_HEIGHT,
        font_path=display_config.TITLE_FONT_PATH,
        config=None,
    ):
        """
        Initialize the moon phase renderer.

        Args:
            width (int): Display width in pixels
            height (int): Display height in pixels
            font_path (str): Path to TTF font file for the title bar
            config (dict): Disc config, see config.DEFAULT_CONFIG
        """
        self.width = width
        self.height = height
        self.font_path = font_path
        self.config = apply_defaults(config)

        # Default styling
        self.title_bar_height = display_config.TITLE_BAR_HEIGHT
        self.font_size = display_config.TITLE_FONT_SIZE
        self.background_color = WHITE
        self.title_color = WHITE
        self.title_background = BLACK

    def _get_font(self, size=None):
        """Get font object, fallback to default if font file not found."""
        if size is None:
            size = self.font_size

        try:
            if os.path.exists(self.font_path):
                return ImageFont.truetype(self.font_path, size)
        except OSError:
            pass

        return ImageFont.load_default()

    def _fit_diameter(self):
        """Largest diameter that fits under the title bar, capped by config"""
        available = min(self.width, self.height - self.title_bar_height) - 20
        return max(min(self.config["diameter"], available), 1)

    def render_disc(self, moon_info, diameter=None):
        """
        Render just the moon disc.

        Args:
            moon_info (dict): Result of get_moon_info()
            diameter (float, optional): Override the configured diameter

        Returns:
            PIL.Image: RGBA image of the disc's bounding box
        """
        disc_config = dict(self.config)
        if diameter is not None:
            disc_config["diameter"] = diameter

        layout = derive_disc_layout(
            disc_config, moon_info["illumination"], moon_info["orientation"]
        )
        log_debug(f"Disc layout: {layout}")
        return render_layout(layout)

    def render_title_bar(self, image, title):
        """Draw the title bar with the phase name across the top of image"""
        draw = ImageDraw.Draw(image)
        draw.rectangle(
            [0, 0, self.width, self.title_bar_height], fill=self.title_background
        )

        font = self._get_font()
        bbox = font.getbbox(title)
        title_width = bbox[2] - bbox[0]
        title_height = bbox[3] - bbox[1]

        x = (self.width - title_width) // 2
        y = (self.title_bar_height - title_height) // 2 - bbox[1]
        draw.text(
            (x, y),
            title,
            font=font,
            fill=self.title_color,
        )
        return image

    def render_moon_display(self, moon_info, diameter=None):
        """
        Render the full widget: title bar plus centered moon disc.

        Returns:
            PIL.Image: RGB image of width x height
        """
        if diameter is None:
            diameter = self._fit_diameter()

        image = Image.new("RGB", (self.width, self.height), self.background_color)
        disc = self.render_disc(moon_info, diameter)

        content_height = self.height - self.title_bar_height
        x = (self.width - disc.width) // 2
        y = self.title_bar_height + (content_height - disc.height) // 2
        multiply_onto(image, disc, (x, y))

        return self.render_title_bar(image, moon_info["name"])


def draw_moon_phase(diameter=None, moment=None, config=None):
    """
    Render the moon phase widget for a moment (defaults to now).

    Returns:
        tuple: (PIL.Image, moon info dict)
    """
    moon_info = get_moon_info(moment)
    renderer = MoonPhaseRenderer(config=config)
    image = renderer.render_moon_display(moon_info, diameter)

    log(f"Rendered {moon_info['name']} at {image.width}x{image.height}")
    return image, moon_info
