"""
geo-uri — разбор и построение geo URI (RFC 5870)

    >>> from geo_uri import GeoUri
    >>> geo = GeoUri.parse("geo:52.107,5.134,3.6;u=1000")
    >>> str(geo)
    'geo:52.107,5.134,3.6;u=1000'
"""

import logging

from geo_uri.builder import GeoUriBuilder
from geo_uri.crs import CoordRefSystem
from geo_uri.errors import (
    BuilderValidationError,
    GeoUriBuilderError,
    GeoUriError,
    InvalidCoord,
    InvalidCoordRefSystem,
    InvalidDistance,
    InvalidUncertainty,
    MissingCoords,
    MissingLatitude,
    MissingLongitude,
    MissingScheme,
    OutOfRangeLatitude,
    OutOfRangeLongitude,
    OutOfRangeUncertainty,
    UninitializedFieldError,
)
from geo_uri.formatter import format_geo_uri
from geo_uri.model import GeoUri
from geo_uri.parser import ParsedGeoUri, parse_geo_uri
from geo_uri.types import GeoUriStr
from geo_uri.url import from_url, to_url

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Model
    "GeoUri",
    "GeoUriBuilder",
    "CoordRefSystem",
    "GeoUriStr",
    # Parser / formatter
    "ParsedGeoUri",
    "parse_geo_uri",
    "format_geo_uri",
    # URL
    "to_url",
    "from_url",
    # Errors
    "GeoUriError",
    "MissingScheme",
    "MissingCoords",
    "MissingLatitude",
    "MissingLongitude",
    "InvalidCoord",
    "InvalidCoordRefSystem",
    "InvalidUncertainty",
    "InvalidDistance",
    "OutOfRangeLatitude",
    "OutOfRangeLongitude",
    "OutOfRangeUncertainty",
    "GeoUriBuilderError",
    "UninitializedFieldError",
    "BuilderValidationError",
]
