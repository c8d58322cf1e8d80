from __future__ import annotations

# Down & distance
FIRST_AND_TEN_YTG = 10
MAX_DOWN = 4
TOUCHDOWN_POINTS = 7  # TD + extra point

# Flat field (offense-relative yard line)
MIN_YARDLINE = 0
MAX_YARDLINE = 100
START_YARDLINE = 20

# Hex field (axial r along the length, q across it)
END_ZONE_DEPTH = 10
HEX_FIELD_LENGTH = MAX_YARDLINE + 2 * END_ZONE_DEPTH  # 0..120

# Game
START_QUARTER = 1
LOG_CAPACITY = 10
