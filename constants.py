# constants.py

"""
Application Constants

This module defines static configuration values for the animation's framework.
These are not expected to change between runs; per-run tuning lives in
config.json and is loaded through settings.py.

Data Contract:
- All values are immutable constants.
- Units are specified in comments where applicable.
"""

# Initial window dimensions (the window is resizable)
WIDTH = 1280  # Pixels
HEIGHT = 720  # Pixels

# Framerate
FPS = 60  # Frames per second

# Colors (RGB)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
BACKGROUND = BLACK

# Window Title
TITLE = "Heart Particles"

# Name of the dedicated application logger
LOGGER_NAME = "heart_particles"

# Per-frame statistics are logged at DEBUG level once every N frames
LOG_EVERY_N_FRAMES = 120

# Text silhouette sampling
SAMPLING_STRIDE = 2  # Pixels. Only every Nth pixel in each axis is inspected.
ALPHA_THRESHOLD = 128  # 0-255. Pixels with alpha strictly above this become emission sites.

# Emission split between the two sources. Must add up to 1.0.
HEART_EMISSION_SHARE = 0.7
TEXT_EMISSION_SHARE = 0.3

# Text particles get a random velocity with each component in
# [-0.5, 0.5) * velocity * TEXT_JITTER_SCALE.
TEXT_JITTER_SCALE = 0.5

# Vertical position of the text anchor below the surface center,
# as a fraction of the surface height.
DEFAULT_TEXT_Y_OFFSET_RATIO = 0.15
