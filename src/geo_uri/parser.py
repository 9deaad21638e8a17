"""
Parser — разбор строки geo URI

RFC 5870: 3.3 (синтаксис)

    geo-uri    = "geo:" coord-part *( ";" param )
    coord-part = lat "," lon [ "," alt ]

Разбор регистронезависимый: вся строка приводится к нижнему регистру.
Из параметров распознаются только crs и u, и только в двух формах:
"crs" (за ним возможно "u") либо "u" первым. Остальные параметры
игнорируются (RFC 5870 допускает параметры-расширения).

Percent-encoding значений параметров не декодируется.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from geo_uri.constants import (
    COORD_SEPARATOR,
    MAX_COORD_PARTS,
    PARAM_CRS,
    PARAM_SEPARATOR,
    PARAM_UNCERTAINTY,
    PARAM_VALUE_SEPARATOR,
    UNCERTAINTY_MIN,
    URI_SCHEME_PREFIX,
)
from geo_uri.crs import CoordRefSystem
from geo_uri.errors import (
    GeoUriError,
    InvalidCoord,
    InvalidUncertainty,
    MissingCoords,
    MissingLatitude,
    MissingLongitude,
    MissingScheme,
    OutOfRangeUncertainty,
)
from geo_uri.numbers import parse_float

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedGeoUri:
    """Провалидированные значения полей, полученные из строки."""

    crs: CoordRefSystem
    latitude: float
    longitude: float
    altitude: Optional[float]
    uncertainty: Optional[float]


def parse_geo_uri(uri: str) -> ParsedGeoUri:
    """
    Разбор строки geo URI в провалидированные значения полей.

    Args:
        uri: Произвольная строка

    Returns:
        ParsedGeoUri, все инварианты которого уже проверены

    Raises:
        GeoUriError: Конкретный подкласс, описывающий первую найденную проблему
    """
    try:
        return _parse(uri)
    except GeoUriError as e:
        logger.debug("Rejected geo URI %r: %s", uri, e)
        raise


def _parse(uri: str) -> ParsedGeoUri:
    uri = uri.lower()
    if not uri.startswith(URI_SCHEME_PREFIX):
        raise MissingScheme()

    coords_part, *param_parts = uri[len(URI_SCHEME_PREFIX):].split(PARAM_SEPARATOR)
    if not coords_part:
        raise MissingCoords()

    latitude, longitude, altitude = _parse_coords(coords_part)
    crs, uncertainty = _parse_params(param_parts)

    crs.validate(latitude, longitude)
    if uncertainty is not None and uncertainty < UNCERTAINTY_MIN:
        raise OutOfRangeUncertainty()

    return ParsedGeoUri(
        crs=crs,
        latitude=latitude,
        longitude=longitude,
        altitude=altitude,
        uncertainty=uncertainty,
    )


def _parse_coords(coords_part: str) -> Tuple[float, float, Optional[float]]:
    # maxsplit: лишние запятые остаются в altitude и ломают его разбор
    coords = coords_part.split(COORD_SEPARATOR, MAX_COORD_PARTS - 1)

    if len(coords) < 1:
        raise MissingLatitude()  # недостижимо: split всегда даёт хотя бы одну часть
    latitude = _parse_coord(coords[0])

    if len(coords) < 2:
        raise MissingLongitude()
    longitude = _parse_coord(coords[1])

    altitude = _parse_coord(coords[2]) if len(coords) == MAX_COORD_PARTS else None

    return latitude, longitude, altitude


def _parse_coord(text: str) -> float:
    try:
        return parse_float(text)
    except ValueError as e:
        raise InvalidCoord(e) from e


def _parse_uncertainty(text: str) -> float:
    try:
        return parse_float(text)
    except ValueError as e:
        raise InvalidUncertainty(e) from e


def _split_params(param_parts: list) -> Iterator[Tuple[str, str]]:
    """Пары (имя, значение); сегменты без "=" пропускаются."""
    for part in param_parts:
        name, sep, value = part.partition(PARAM_VALUE_SEPARATOR)
        if sep:
            yield name, value


def _parse_params(param_parts: list) -> Tuple[CoordRefSystem, Optional[float]]:
    """Разбор первых двух параметров: crs[;u] или u."""
    params = _split_params(param_parts)

    first = next(params, None)
    if first is None:
        return CoordRefSystem.default(), None

    name, value = first
    if name == PARAM_CRS:
        crs = CoordRefSystem.from_param(value)
        second = next(params, None)
        if second is not None and second[0] == PARAM_UNCERTAINTY:
            return crs, _parse_uncertainty(second[1])
        return crs, None

    if name == PARAM_UNCERTAINTY:
        return CoordRefSystem.default(), _parse_uncertainty(value)

    return CoordRefSystem.default(), None
