"""
Terrain Generator - Deterministic procedural tiles.

Every cell of the infinite grid has a default tile computed from 2D
Perlin gradient noise. The noise is seeded by a permutation table built
from a fixed seed, so the same position always yields the same tile, in
this process and the next one. Saved games rely on that: they only store
the cells that differ from this function's output.
"""

from __future__ import annotations
import math
import random
from functools import lru_cache

from .geometry import Pos
from .tiles import Tile, EMPTY, WALL_FULL

DEFAULT_SEED = 12412
NOISE_FREQUENCY = 0.1
WALL_THRESHOLD = 0.3

_GRADIENTS = (
    (1, 0), (-1, 0), (0, 1), (0, -1),
    (1, 1), (-1, 1), (1, -1), (-1, -1),
)


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def _grad(hashv: int, x: float, y: float) -> float:
    gx, gy = _GRADIENTS[hashv & 7]
    return gx * x + gy * y


@lru_cache(maxsize=16)
def permutation(seed: int) -> tuple[int, ...]:
    """Seeded permutation of 0..255, doubled to avoid index wrapping."""
    table = list(range(256))
    random.Random(seed).shuffle(table)
    return tuple(table * 2)


def perlin(x: float, y: float, seed: int = DEFAULT_SEED) -> float:
    """2D Perlin noise, roughly in [-1, 1]. Zero on integer lattice points."""
    perm = permutation(seed)
    x0 = math.floor(x)
    y0 = math.floor(y)
    xi = x0 & 255
    yi = y0 & 255
    xf = x - x0
    yf = y - y0
    u = _fade(xf)
    v = _fade(yf)

    aa = perm[perm[xi] + yi]
    ab = perm[perm[xi] + yi + 1]
    ba = perm[perm[xi + 1] + yi]
    bb = perm[perm[xi + 1] + yi + 1]

    x1 = _lerp(_grad(aa, xf, yf), _grad(ba, xf - 1, yf), u)
    x2 = _lerp(_grad(ab, xf, yf - 1), _grad(bb, xf - 1, yf - 1), u)
    return _lerp(x1, x2, v)


def noise_value(pos: Pos, seed: int = DEFAULT_SEED) -> float:
    """Noise at a cell, normalized to [0, 1]."""
    f = perlin(pos[0] * NOISE_FREQUENCY, pos[1] * NOISE_FREQUENCY, seed)
    return min(1.0, max(0.0, (f + 1.0) / 2.0))


def generate_tile(pos: Pos, seed: int = DEFAULT_SEED) -> Tile:
    """The default tile at `pos` before the player changes anything."""
    if noise_value(pos, seed) < WALL_THRESHOLD:
        return WALL_FULL
    return EMPTY
