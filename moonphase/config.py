"""
Moon display configuration - defaults plus overrides from a .env file
"""

import math
import os

from dotenv import load_dotenv

from moonphase.logger import log_error

# Display Configuration (TRMNL-sized e-ink panel)
DISPLAY_WIDTH = 800
DISPLAY_HEIGHT = 480
TITLE_BAR_HEIGHT = 48
TITLE_FONT_PATH = "AndaleMono.ttf"
TITLE_FONT_SIZE = 26

# Development server
SERVER_PORT = 8000

DEFAULT_CONFIG = {
    "shadow_color": "rgba(0, 0, 0, 0.8)",  # color of the shaded part of the disc
    "light_color": "white",  # color of the illuminated part of the disc
    "diameter": 500,  # diameter of the moon disc in pixels
    "earthshine": 0.0,  # light on the shaded part, 0=none, 1=full illumination
    "blur": 40,  # blur on the terminator in pixels, 0=no blur
}

# Environment variable -> (config key, parser)
ENV_OPTIONS = {
    "MOON_LIGHT_COLOR": ("light_color", str),
    "MOON_SHADOW_COLOR": ("shadow_color", str),
    "MOON_DIAMETER": ("diameter", float),
    "MOON_EARTHSHINE": ("earthshine", float),
    "MOON_BLUR": ("blur", float),
}

NUMERIC_OPTIONS = ("diameter", "earthshine", "blur")


def apply_defaults(config=None):
    """Return a fully populated copy of config

    Missing or None values and non-finite numbers take the default, unknown
    keys are dropped and out-of-range numbers are clamped rather than rejected.
    """
    config = config or {}
    merged = {}
    for key, default in DEFAULT_CONFIG.items():
        value = config.get(key)
        if value is None:
            value = default
        elif key in NUMERIC_OPTIONS and not math.isfinite(value):
            value = default
        merged[key] = value

    if merged["diameter"] <= 0:
        merged["diameter"] = DEFAULT_CONFIG["diameter"]
    merged["earthshine"] = min(max(merged["earthshine"], 0.0), 1.0)
    merged["blur"] = max(merged["blur"], 0)

    return merged


def load_config_from_env():
    """Build a config dict from MOON_* environment variables (.env supported)"""
    load_dotenv()

    config = {}
    for env_name, (key, parser) in ENV_OPTIONS.items():
        raw = os.getenv(env_name)
        if raw is None or raw == "":
            continue
        try:
            config[key] = parser(raw)
        except ValueError:
            log_error(f"Ignoring {env_name}={raw!r}: not a valid {parser.__name__}")

    return apply_defaults(config)


def get_server_port():
    load_dotenv()
    try:
        return int(os.getenv("MOON_SERVER_PORT", SERVER_PORT))
    except ValueError:
        log_error("Invalid MOON_SERVER_PORT, using default")
        return SERVER_PORT
