"""
Fixed configuration for the hotspot map.

All values are module-level constants; there is no runtime configuration.
"""

# Background raster of the Wilderness, 800 px wide thumbnail.
WILDERNESS_MAP_URL = (
    'https://oldschool.runescape.wiki/images/thumb/The_Wilderness.png/'
    '800px-The_Wilderness.png?48133'
)

# Side length of the normalized coordinate space samples and hotspots live in.
DOMAIN_SIZE = 800.

# Probability that a single draw lands inside a (uniformly chosen) hotspot.
HOTSPOT_PROBABILITY = 0.8

# Number of samples the map is mounted with.
DEFAULT_SAMPLE_COUNT = 5000

# Default count of generate_samples() when called without arguments.
GENERATOR_DEFAULT_COUNT = 2000

# Surface size before the first successful render (HTML canvas default).
DEFAULT_SURFACE_WIDTH = 300
DEFAULT_SURFACE_HEIGHT = 150
SURFACE_DPI = 100

# Sample markers
SAMPLE_RADIUS_PX = 2.
SAMPLE_COLOR = (1., 0., 0., 0.5)

# Hotspot outlines
HOTSPOT_EDGE_COLOR = (0., 1., 1., 0.3)
HOTSPOT_LINE_WIDTH_PX = 1.

# Fallback diagnostic drawn when the background cannot be loaded
FALLBACK_MESSAGE = 'Failed to load map image. Please check URL.'
FALLBACK_COLOR = 'white'
FALLBACK_FONT_SIZE_PX = 20.
FALLBACK_POSITION = (10., 50.)
