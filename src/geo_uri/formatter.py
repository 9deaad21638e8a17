"""
Formatter — каноническое строковое представление GeoUri

    geo:<latitude>,<longitude>[,<altitude>][;u=<uncertainty>]

Параметр crs не выводится: поддерживается только WGS-84.
"""

from typing import TYPE_CHECKING

from geo_uri.constants import (
    COORD_SEPARATOR,
    PARAM_SEPARATOR,
    PARAM_UNCERTAINTY,
    PARAM_VALUE_SEPARATOR,
    URI_SCHEME_PREFIX,
)
from geo_uri.numbers import format_float

if TYPE_CHECKING:
    from geo_uri.model import GeoUri


def format_geo_uri(geo_uri: "GeoUri") -> str:
    """
    Examples:
        >>> format_geo_uri(GeoUri(latitude=52.107, longitude=5.134, uncertainty=25000.0))
        'geo:52.107,5.134;u=25000'
    """
    coords = [format_float(geo_uri.latitude), format_float(geo_uri.longitude)]
    if geo_uri.altitude is not None:
        coords.append(format_float(geo_uri.altitude))

    uri = URI_SCHEME_PREFIX + COORD_SEPARATOR.join(coords)

    if geo_uri.uncertainty is not None:
        uri += (
            PARAM_SEPARATOR
            + PARAM_UNCERTAINTY
            + PARAM_VALUE_SEPARATOR
            + format_float(geo_uri.uncertainty)
        )

    return uri
