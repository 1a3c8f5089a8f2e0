# settings.py

import json
import logging
from collections import namedtuple

from constants import DEFAULT_TEXT_Y_OFFSET_RATIO, LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)

# Everything the animation reads from configuration, resolved once at start-up.
# Instances are immutable; use ._replace() to derive a modified copy.
AnimationSettings = namedtuple('AnimationSettings', [
    'capacity',             # Number of particle slots in the pool
    'duration',             # Particle lifetime in seconds
    'velocity',             # Base emission speed in pixels/second
    'effect',               # Acceleration = velocity * effect (negative decelerates)
    'size',                 # Particle base diameter in pixels
    'color',                # (R, G, B) fill color
    'text_content',         # Text whose silhouette emits particles ('' disables it)
    'text_size',            # Font size in pixels
    'text_font',            # System font name, falls back to pygame's default font
    'text_y_offset_ratio',  # Text anchor offset below center, as a fraction of height
])

DEFAULT_PARTICLES = {
    'length': 15000,
    'duration': 4.0,
    'velocity': 100.0,
    'effect': -1.3,
    'size': 6.0,
    'color': 'f50b02',
}

DEFAULT_TEXT = {
    'content': '',
    'size': 150,
    'font': 'arial',
    'y_offset_ratio': DEFAULT_TEXT_Y_OFFSET_RATIO,
}


def parse_hex_color(value: str):
    """Convert 'RRGGBB' (optionally prefixed with '#') to an (R, G, B) tuple."""
    digits = value[1:] if value.startswith('#') else value
    if len(digits) != 6:
        raise ValueError(f"particles.color must be a 6-digit hex string, got {value!r}")
    try:
        packed = int(digits, 16)
    except ValueError:
        raise ValueError(f"particles.color must be a 6-digit hex string, got {value!r}") from None
    return ((packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF)


def from_config(config: dict) -> AnimationSettings:
    """
    Builds an AnimationSettings record from a parsed configuration dictionary.

    Data Contract:
    - Inputs: config (dict) - The full configuration. The 'particles' and 'text'
      sections are optional; missing keys fall back to the defaults above.
    - Outputs: A validated AnimationSettings.
    - Invariants: capacity >= 2, duration > 0, size >= 0, text_size > 0.
      A violated invariant raises ValueError naming the key.
    """
    particles = {**DEFAULT_PARTICLES, **config.get('particles', {})}
    text = {**DEFAULT_TEXT, **config.get('text', {})}

    settings = AnimationSettings(
        capacity=int(particles['length']),
        duration=float(particles['duration']),
        velocity=float(particles['velocity']),
        effect=float(particles['effect']),
        size=float(particles['size']),
        color=parse_hex_color(str(particles['color'])),
        text_content=str(text['content']),
        text_size=int(text['size']),
        text_font=text['font'],
        text_y_offset_ratio=float(text['y_offset_ratio']),
    )

    # A ring buffer needs one spare slot to tell "full" from "empty".
    if settings.capacity < 2:
        raise ValueError(f"particles.length must be at least 2, got {settings.capacity}")
    if settings.duration <= 0:
        raise ValueError(f"particles.duration must be positive, got {settings.duration}")
    if settings.size < 0:
        raise ValueError(f"particles.size must not be negative, got {settings.size}")
    if settings.text_size <= 0:
        raise ValueError(f"text.size must be positive, got {settings.text_size}")

    return settings


def load_settings(config_path='config.json') -> AnimationSettings:
    """Reads config.json and returns the resolved AnimationSettings."""
    with open(config_path, 'r') as f:
        config = json.load(f)

    settings = from_config(config)
    logger.info(f"Loaded settings from {config_path}: {settings}")
    return settings
