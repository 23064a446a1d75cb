"""Global constants for the renderer."""

# Point padding
DEFAULT_RADIUS = 0.0  # Default point radius
DEFAULT_STROKE_PADDING = 1.0  # Padding used when a style has no stroke width

# Point-of-interest icons
DEFAULT_ICON_VIEWBOX = (0, 0, 100, 100)  # min_x, min_y, width, height of the icon
DEFAULT_ICON_WIDTH_HEIGHT = (60, 60)  # Displayed icon size
POI_LABEL_OFFSET_X = 15.0  # Label gap to the right of the icon
POI_LABEL_OFFSET_Y = -45.0  # Label shift relative to the icon bottom

# Fallback for coordinates that cannot be cast to float
NUMERIC_FALLBACK = 0.0

# Diagnostic tag on circles rendered without an explicit point type
POINT_TYPE_NONE_MARKER = "point_type_none"

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"
