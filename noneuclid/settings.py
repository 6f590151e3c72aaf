"""Game-wide constants and small numeric helpers."""

from __future__ import annotations

import math
from typing import TypeVar

# Window
TITLE = "NonEuclideanDemo"

# General
PI = math.pi
MAX_PORTALS = 16

# Graphics
START_FULLSCREEN = False
HIDE_MOUSE = True
USE_SKY = True
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
SCREEN_X = 50
SCREEN_Y = 50
FOV = 60.0
NEAR_MIN = 1e-3
NEAR_MAX = 1e-1
FAR = 100.0
FBO_SIZE = 2048
MAX_RECURSION = 4

# Gameplay
MOUSE_SENSITIVITY = 0.005
MOUSE_SMOOTH = 0.5
WALK_SPEED = 2.9
WALK_ACCEL = 50.0
BOB_FREQ = 8.0
BOB_OFFS = 0.015
BOB_DAMP = 0.04
BOB_MIN = 0.1
DT = 0.002
MAX_STEPS = 30
PLAYER_HEIGHT = 1.5
PLAYER_RADIUS = 0.2
GRAVITY = -9.8

_T = TypeVar("_T", int, float)


def clamp(a: _T, mn: _T, mx: _T) -> _T:
    """Return ``a`` limited to the closed range ``[mn, mx]``."""
    if a < mn:
        return mn
    if a > mx:
        return mx
    return a