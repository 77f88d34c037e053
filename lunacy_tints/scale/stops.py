"""Stop sets shared by request validation and the scale generator."""

# Public tonal scale, lightest to darkest
STOPS = (100, 200, 300, 400, 500, 600, 700, 800, 900)

DEFAULT_STOP = 500

# Boundary markers pinned to the lightness bounds
LIGHTEST_BOUNDARY = 0
DARKEST_BOUNDARY = 1000

# Full grid the lightness distribution is computed over; 50 and 950 are
# never emitted
DISTRIBUTION_GRID = (LIGHTEST_BOUNDARY, 50) + STOPS + (950, DARKEST_BOUNDARY)

# Grid entries dropped on each side before lining tweaks up with STOPS
TRIM_LOW = DISTRIBUTION_GRID.index(STOPS[0])
TRIM_HIGH = len(DISTRIBUTION_GRID) - 1 - DISTRIBUTION_GRID.index(STOPS[-1])

DEFAULT_LIGHTNESS_MIN = 0
DEFAULT_LIGHTNESS_MAX = 100
