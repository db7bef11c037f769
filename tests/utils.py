from models import EMPTY, OCCUPIED, UNAVAILABLE, Field

_STATES = {'.': EMPTY, ' ': UNAVAILABLE, 'X': OCCUPIED}


def _field_from_rows(rows):
    field = Field()
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            field.set(x, y, _STATES[ch])
    return field


def _touching(ship_a, ship_b):
    return any(
        abs(ax - bx) <= 1 and abs(ay - by) <= 1
        for ax, ay in ship_a
        for bx, by in ship_b
    )
