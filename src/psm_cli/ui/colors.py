# psm_cli/ui/colors.py
"""
Color definitions for the PSM CLI UI elements.
"""

# Border colors
BORDER_PRIMARY = "yellow"
BORDER_SECONDARY = "blue"

# Text colors and styles
TEXT_EMPHASIS = "bold"
TEXT_DEEMPHASIS = "dim"
TEXT_SUCCESS = "green"
TEXT_ERROR = "red"
TEXT_WARNING = "yellow"
TEXT_INFO = "cyan"

# Command tree placeholders
PLACEHOLDER_REQUIRED = "cyan"
PLACEHOLDER_OPTIONAL = "green"

# Component-specific colors
TITLE_COLOR = "bold cyan"
