from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple


Coord = Tuple[int, int]  # x, y

FIELD_SIZE = 10

# cell states
EMPTY = 0
UNAVAILABLE = 1  # never produced by placement, still honoured when present
OCCUPIED = 2

CELL_STATES = (EMPTY, UNAVAILABLE, OCCUPIED)


@dataclass(frozen=True)
class Orientation:
    dx: int
    dy: int


HORIZONTAL = Orientation(1, 0)
VERTICAL = Orientation(0, 1)
ORIENTATIONS = (HORIZONTAL, VERTICAL)


@dataclass(frozen=True)
class Ship:
    x: int
    y: int
    orientation: Orientation
    size: int

    def __iter__(self) -> Iterator[Coord]:
        for i in range(self.size):
            yield self.x + i * self.orientation.dx, self.y + i * self.orientation.dy

    @property
    def cells(self) -> List[Coord]:
        return list(self)


@dataclass
class Field:
    grid: List[int] = field(default_factory=lambda: [EMPTY] * (FIELD_SIZE * FIELD_SIZE))
    # ships in placement order
    ships: List[Ship] = field(default_factory=list)

    @staticmethod
    def index(x: int, y: int) -> int:
        return x + y * FIELD_SIZE

    @staticmethod
    def in_bounds(x: int, y: int) -> bool:
        return 0 <= x < FIELD_SIZE and 0 <= y < FIELD_SIZE

    def get(self, x: int, y: int) -> int:
        return self.grid[self.index(x, y)]

    def set(self, x: int, y: int, state: int) -> None:
        if state not in CELL_STATES:
            raise ValueError(f"Unknown cell state: {state!r}")
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) is outside the field")
        self.grid[self.index(x, y)] = state

    def rows(self) -> List[List[int]]:
        return [
            self.grid[y * FIELD_SIZE:(y + 1) * FIELD_SIZE]
            for y in range(FIELD_SIZE)
        ]

    def occupied_count(self) -> int:
        return sum(1 for state in self.grid if state == OCCUPIED)


@dataclass(frozen=True)
class PlacementResult:
    """Outcome of a single emplacement step.

    ``ship`` is set when a ship was placed.  When no origin fits the chosen
    orientation ``ship`` is ``None`` and ``size``/``orientation`` describe
    the step that failed.
    """

    size: int
    orientation: Orientation
    ship: Optional[Ship] = None

    @property
    def placed(self) -> bool:
        return self.ship is not None


class PlacementError(RuntimeError):
    def __init__(self, size: int, orientation: Optional[Orientation] = None):
        super().__init__(f"no valid placement for ship of length {size}")
        self.size = size
        self.orientation = orientation


__all__ = [
    "Coord",
    "FIELD_SIZE",
    "EMPTY",
    "UNAVAILABLE",
    "OCCUPIED",
    "CELL_STATES",
    "Orientation",
    "HORIZONTAL",
    "VERTICAL",
    "ORIENTATIONS",
    "Ship",
    "Field",
    "PlacementResult",
    "PlacementError",
]
