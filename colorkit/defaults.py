"""Central place for colorkit default settings."""

# Canonical color ranges
MAX_CHROMA: float = 0.4  # Soft chroma ceiling, also the percent -> unit scale for C/a/b
ACHROMATIC_THRESHOLD: float = 1e-4  # Below this chroma, hue is forced to 0
PERCENT_CHROMA_SCALE: float = MAX_CHROMA / 100.0

# Gamut membership / mapping
GAMUT_EPSILON: float = 7.5e-5  # Slack on linear channels, absorbs float rounding only
GAMUT_MAP_TOLERANCE: float = 1e-4

# Boundary resolver
DEFAULT_BOUNDARY_TOLERANCE: float = 1e-4
DEFAULT_BOUNDARY_MAX_ITERATIONS: int = 30
DEFAULT_BOUNDARY_STEPS: int = 64
DEFAULT_GAMUT: str = "srgb"

# Contrast thresholds (normal text / large text)
WCAG_AA: float = 4.5
WCAG_AA_LARGE: float = 3.0
WCAG_AAA: float = 7.0
WCAG_AAA_LARGE: float = 4.5
APCA_AA: float = 60.0
APCA_AAA: float = 75.0

# Contrast region tracer
DEFAULT_LIGHTNESS_STEPS: int = 64
DEFAULT_CHROMA_STEPS: int = 64
DEFAULT_CONTRAST_LEVEL: str = "AA"
DEFAULT_EDGE_INTERPOLATION: str = "linear"
DEFAULT_CONTRAST_METRIC: str = "wcag"

# CSS output precision (decimal places)
CSS_LIGHTNESS_DIGITS: int = 4
CSS_OKLAB_DIGITS: int = 5  # oklab() L, a and b
CSS_HUE_DIGITS: int = 2
CSS_ALPHA_DIGITS: int = 3
CSS_PERCENT_DIGITS: int = 1
