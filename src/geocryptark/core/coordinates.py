"""Range checks and canonical text form for latitude/longitude pairs."""

from __future__ import annotations

import math
from decimal import Decimal
from numbers import Real
from typing import Iterable, List

from geocryptark.core.exceptions import InvalidCoordinateListError, InvalidCoordinatesError
from geocryptark.core.models import CoordinateLike, GeoCoordinate


LAT_RANGE = (-90.0, 90.0)
LNG_RANGE = (-180.0, 180.0)


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def validate_coordinates(lat, lng) -> bool:
    """Return True iff lat is in [-90, 90] and lng is in [-180, 180], bounds inclusive."""
    if not (_is_number(lat) and _is_number(lng)):
        return False
    return LAT_RANGE[0] <= lat <= LAT_RANGE[1] and LNG_RANGE[0] <= lng <= LNG_RANGE[1]


def ensure_valid_coordinates(lat, lng) -> None:
    if not validate_coordinates(lat, lng):
        raise InvalidCoordinatesError(lat, lng)


def validate_coordinate_list(coordinates: Iterable[CoordinateLike]) -> List[GeoCoordinate]:
    """
    Check every pair before any cryptographic work is done.

    Returns the coordinates as GeoCoordinate values in input order, or raises
    InvalidCoordinateListError naming the first offending pair.
    """
    checked = []
    for item in coordinates:
        coord = GeoCoordinate.coerce(item)
        if not validate_coordinates(coord.lat, coord.lng):
            raise InvalidCoordinateListError(coord.lat, coord.lng)
        checked.append(coord)
    return checked


def format_number(value) -> str:
    """
    Render a finite number the way ECMAScript's Number#toString does.

    Integral values drop the fractional part (-0 becomes "0"), everything else
    uses the shortest round-trip digits, and exponent notation is used only
    below 1e-6 or at 1e21 and above.
    """
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Cannot format non-finite number {value!r}")
    if number.is_integer() and abs(number) < 1e21:
        return str(int(number))

    text = repr(number)
    if "e" not in text:
        return text

    mantissa, exponent = text.split("e")
    exp = int(exponent)
    if -7 < exp < 21:
        # repr switches to exponent form earlier than JS does
        return format(Decimal(text), "f")
    sign = "+" if exp > 0 else "-"
    return f"{mantissa}e{sign}{abs(exp)}"


def canonical_coordinate_json(lat, lng) -> str:
    # Fixed key order, no whitespace; matches JSON.stringify({lat, lng}).
    return '{"lat":%s,"lng":%s}' % (format_number(lat), format_number(lng))
