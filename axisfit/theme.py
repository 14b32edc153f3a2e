from __future__ import annotations

from axisfit.render import RGBA


# Small spacing used between axis lines, tick marks and labels.
SCALE_MARGIN = 5.0
FONT_SIZE_PX = 12.0

BACKGROUND_COLOR: RGBA = (255, 255, 255, 255)
AXIS_COLOR: RGBA = (0, 0, 0, 255)
TICK_COLOR: RGBA = (80, 80, 80, 255)
LABEL_COLOR: RGBA = (0, 0, 0, 255)
GRID_COLOR: RGBA = (220, 220, 220, 255)
BAR_COLOR: RGBA = (62, 149, 255, 255)
POINT_COLOR: RGBA = (0, 0, 255, 102)
