from __future__ import annotations

from typing import Any, Dict, List, Tuple

from models import FIELD_SIZE, Field, OCCUPIED, Orientation, ORIENTATIONS, Ship
from logic.render import SYMBOLS, cell_symbol


_STATE_BY_SYMBOL = {symbol: state for state, symbol in SYMBOLS.items()}


# ---------------------------------------------------------------------------
# Helpers for serialising fields
# ---------------------------------------------------------------------------

def _coord_to_list(coord: Tuple[int, int]) -> List[int]:
    return [int(coord[0]), int(coord[1])]


def _ship_to_payload(ship: Ship) -> dict:
    return {
        "x": ship.x,
        "y": ship.y,
        "dx": ship.orientation.dx,
        "dy": ship.orientation.dy,
        "size": ship.size,
        "cells": [_coord_to_list(cell) for cell in ship],
    }


def _ship_from_payload(data: Any, field: Field) -> Ship:
    try:
        orientation = Orientation(int(data["dx"]), int(data["dy"]))
        ship = Ship(int(data["x"]), int(data["y"]), orientation, int(data["size"]))
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Invalid ship payload: {data!r}") from exc
    if orientation not in ORIENTATIONS:
        raise ValueError(f"Invalid ship orientation: {data!r}")
    if ship.size < 1:
        raise ValueError(f"Ship size must be positive: {data!r}")
    for x, y in ship:
        if not field.in_bounds(x, y):
            raise ValueError(f"Ship cell ({x}, {y}) is outside the field: {data!r}")
        if field.get(x, y) != OCCUPIED:
            raise ValueError(f"Ship cell ({x}, {y}) is not occupied in the grid: {data!r}")
    return ship


def field_to_payload(field: Field) -> Dict[str, Any]:
    return {
        "size": FIELD_SIZE,
        "grid": [''.join(cell_symbol(v) for v in row) for row in field.rows()],
        "ships": [_ship_to_payload(ship) for ship in field.ships],
    }


def field_from_payload(data: Dict[str, Any]) -> Field:
    """Rebuild a :class:`Field` from :func:`field_to_payload` output.

    Raises ``ValueError`` when the payload is not a mapping, the grid is not
    10 rows of 10 known symbols, or a ship entry is malformed, out of bounds
    or not backed by occupied grid cells.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Field payload must be a mapping, got {type(data).__name__}")
    try:
        size = int(data.get("size", FIELD_SIZE))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid field size: {data.get('size')!r}") from exc
    if size != FIELD_SIZE:
        raise ValueError(f"Unsupported field size: {data.get('size')!r}")
    rows = data.get("grid")
    if not isinstance(rows, list) or len(rows) != FIELD_SIZE:
        raise ValueError("grid must be a list of 10 rows")
    ships = data.get("ships") or []
    if not isinstance(ships, list):
        raise ValueError("ships must be a list")

    field = Field()
    for y, row in enumerate(rows):
        if not isinstance(row, str) or len(row) != FIELD_SIZE:
            raise ValueError(f"grid row {y} must be a string of length 10")
        for x, symbol in enumerate(row):
            if symbol not in _STATE_BY_SYMBOL:
                raise ValueError(f"Unknown cell symbol {symbol!r} at ({x}, {y})")
            field.set(x, y, _STATE_BY_SYMBOL[symbol])
    field.ships = [_ship_from_payload(item, field) for item in ships]
    return field


__all__ = ["field_to_payload", "field_from_payload"]
