from __future__ import annotations
import logging
import random
from typing import List, Optional, Sequence

from models import (
    Coord,
    EMPTY,
    FIELD_SIZE,
    Field,
    OCCUPIED,
    ORIENTATIONS,
    Orientation,
    PlacementError,
    PlacementResult,
    Ship,
)

logger = logging.getLogger(__name__)

SHIP_SIZES = [4,3,3,2,2,2,1,1,1,1]


def can_place_ship(field: Field, ship: Ship) -> bool:
    """Return ``True`` if ``ship`` fits on ``field`` without touching others.

    Every ship cell must be inside the grid and ``EMPTY``, and no cell of the
    3×3 box around any ship cell may be ``OCCUPIED``.  Box cells that fall
    outside the grid are ignored.
    """
    for x, y in ship:
        if not field.in_bounds(x, y):
            return False
        if field.get(x, y) != EMPTY:
            return False
        # check neighbors
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                nx, ny = x + dx, y + dy
                if field.in_bounds(nx, ny) and field.get(nx, ny) == OCCUPIED:
                    return False
    return True


def available_cells(field: Field, size: int, orientation: Orientation) -> List[Coord]:
    cells: List[Coord] = []
    for x in range(FIELD_SIZE):
        for y in range(FIELD_SIZE):
            if can_place_ship(field, Ship(x, y, orientation, size)):
                cells.append((x, y))
    return cells


def emplace_ship(field: Field, size: int, rng: random.Random) -> PlacementResult:
    """Place one ship of ``size`` at a random legal origin.

    The orientation is drawn first; when it leaves no legal origin the
    field is left untouched and the returned result carries no ship.
    """
    orientation = rng.choice(ORIENTATIONS)
    candidates = available_cells(field, size, orientation)
    if not candidates:
        return PlacementResult(size=size, orientation=orientation)

    x, y = rng.choice(candidates)
    ship = Ship(x, y, orientation, size)
    for cx, cy in ship:
        field.set(cx, cy, OCCUPIED)
    field.ships.append(ship)
    logger.debug(
        "Placed ship size=%s at (%s, %s) dx=%s dy=%s out of %s candidates",
        size, x, y, orientation.dx, orientation.dy, len(candidates),
    )
    return PlacementResult(size=size, orientation=orientation, ship=ship)


def generate_field(
    rng: Optional[random.Random] = None,
    ship_sizes: Sequence[int] = SHIP_SIZES,
) -> Field:
    if rng is None:
        rng = random.Random()
    field = Field()
    for size in ship_sizes:
        result = emplace_ship(field, size, rng)
        if not result.placed:
            logger.error(
                "No valid placement for ship size=%s dx=%s dy=%s after %s ships",
                size, result.orientation.dx, result.orientation.dy, len(field.ships),
            )
            raise PlacementError(size, result.orientation)
    return field


__all__ = [
    "SHIP_SIZES",
    "can_place_ship",
    "available_cells",
    "emplace_ship",
    "generate_field",
]
