"""Shared default values for user-facing layout options."""

# Spacing
DEFAULT_GUTTER = 0.0

# Placement
DEFAULT_COLLAPSING = True
DEFAULT_CENTERING = False
