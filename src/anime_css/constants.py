"""Global constants for CSS compilation."""

# Reserved CSS tree key whose value is written as a comment
COMMENT_KEY = "//"

# Pretty printer indent unit
DEFAULT_INDENT = "  "
INDENT_ENV_VAR = "ANIME_CSS_INDENT"

# Keyframe key naming the selectors; every other key is written into the stops
TARGETS_KEY = "targets"

# Sub-properties folded into a single `transform` declaration, in output order
TRANSFORM_FUNCTIONS = (
    "matrix",
    "translate",
    "translateX",
    "translateY",
    "scale",
    "scaleX",
    "scaleY",
    "rotate",
    "skew",
    "skewX",
    "skewY",
    "matrix3d",
    "translate3d",
    "translateZ",
    "scale3d",
    "scaleZ",
    "rotate3d",
    "rotateX",
    "rotateY",
    "rotateZ",
    "perspective",
)

# Sub-properties folded into a single `filter` declaration
FILTER_FUNCTIONS = (
    "blur",
    "brightness",
    "contrast",
    "drop-shadow",
    "grayscale",
    "hue-rotate",
    "invert",
    "opacity",
    "saturate",
    "sepia",
)

# Easing families that need runtime interpolation (no static CSS equivalent)
UNSUPPORTED_EASING_PREFIXES = ("easeIn", "easeOut", "spring(")

# Timeline defaults that never describe a single keyframe
TIMELINE_ONLY_KEYS = ("loop", "direction", "autoplay")
