"""
Configuration file for the shape-detection system.

Contains both STANDARD and HIGH-RESOLUTION parameter sets.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# Set to True for large scans where noise blobs are bigger than 100 px²
HIGH_RES_MODE = False


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

INPUT_IMAGE_PATTERN = "images/*.png"
OUTPUT_FOLDER = "output"


# ===============================================================
# STANDARD PARAMETERS
# ===============================================================

STANDARD = {
    "MIN_AREA": 100,
    "CIRCLE_AXIS_TOLERANCE": 2.0,
}


# ===============================================================
# HIGH-RESOLUTION PARAMETERS
# ===============================================================

HIGH_RES = {
    "MIN_AREA": 400,
    "CIRCLE_AXIS_TOLERANCE": 4.0,
}


# ---------------------------------------------------------------
# SHARED PARAMETERS (used in both modes)
# ---------------------------------------------------------------

APPROX_EPSILON_RATIO = 0.02        # fraction of the closed perimeter
RIGHT_ANGLE_TOLERANCE = 0.1        # radians around pi/2
ELLIPSE_TOLERANCE = 0.09           # |value - 1| for a conforming point
ELLIPSE_MIN_FIT_FRACTION = 0.5     # share of conforming contour points


# ---------------------------------------------------------------
# MASK GENERATION
# ---------------------------------------------------------------

CANNY_LOW = 10
CANNY_HIGH = 30
CANNY_APERTURE = 5
THRESHOLD_LEVELS = 11              # level 0 is the dilated edge map


# ---------------------------------------------------------------
# RESULT MERGING
# ---------------------------------------------------------------

# Same shape is reported once per channel/level unless this is on
DEDUPLICATE_RESULTS = False
DEDUP_RADIUS = 5.0                 # centroid distance, pixels


# ---------------------------------------------------------------
# VISUALIZATION COLORS
# ---------------------------------------------------------------

SHAPE_COLOR = (0, 255, 255)        # outlines - yellow
LABEL_COLOR = (128, 128, 128)      # label text - grey
SHAPE_THICKNESS = 3
LABEL_FONT_SCALE = 0.5


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters:
    - A combination of SHARED + mode-specific constants.
    - Used by detectors so they only import one dictionary.
    """

    base = {
        "APPROX_EPSILON_RATIO": APPROX_EPSILON_RATIO,
        "RIGHT_ANGLE_TOLERANCE": RIGHT_ANGLE_TOLERANCE,
        "ELLIPSE_TOLERANCE": ELLIPSE_TOLERANCE,
        "ELLIPSE_MIN_FIT_FRACTION": ELLIPSE_MIN_FIT_FRACTION,
        "CANNY_LOW": CANNY_LOW,
        "CANNY_HIGH": CANNY_HIGH,
        "CANNY_APERTURE": CANNY_APERTURE,
        "THRESHOLD_LEVELS": THRESHOLD_LEVELS,
        "DEDUPLICATE_RESULTS": DEDUPLICATE_RESULTS,
        "DEDUP_RADIUS": DEDUP_RADIUS,
    }

    # Merge in standard or high-resolution values
    if HIGH_RES_MODE:
        base.update(HIGH_RES)
    else:
        base.update(STANDARD)

    return base
