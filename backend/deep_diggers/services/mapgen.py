"""Procedural tile grid, reproducible from the session seed."""

import random

from deep_diggers.models import Tile, tile_key

DEFAULT_WIDTH = 32
DEFAULT_HEIGHT = 32

SHALLOW_ORE_CHANCE = 0.10      # rows 10-14
DEEP_ORE_CHANCE = 0.05         # rows 15 and below


def _tile_for_depth(y: int, rng: random.Random) -> Tile:
    if y == 0:
        return Tile.GRASS
    if y < 5:
        return Tile.DIRT
    if y < 10:
        return Tile.STONE
    if y < 15:
        return Tile.ORE if rng.random() < SHALLOW_ORE_CHANCE else Tile.STONE
    return Tile.ORE if rng.random() < DEEP_ORE_CHANCE else Tile.STONE


def generate_map(seed: str, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> dict[str, Tile]:
    """
    Build the flat "x,y" -> tile map.

    Columns span [-width // 2, width // 2) around the spawn point, rows
    [0, height) going down from the surface.
    """
    rng = random.Random(seed)
    half_w = width // 2
    tiles: dict[str, Tile] = {}
    for x in range(-half_w, half_w):
        for y in range(height):
            tiles[tile_key(x, y)] = _tile_for_depth(y, rng)
    return tiles
