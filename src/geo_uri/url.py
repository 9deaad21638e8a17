"""
Преобразование GeoUri ↔ URL

URL — это pydantic AnyUrl со схемой geo. Своей логики здесь нет:
GeoUri → URL через formatter, URL → GeoUri через parser.
"""

from typing import Any

from pydantic import AnyUrl, TypeAdapter

from geo_uri.model import GeoUri

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def to_url(geo_uri: GeoUri) -> AnyUrl:
    """
    Examples:
        >>> url = to_url(GeoUri.parse("geo:52.107,5.134,3.6;u=1000"))
        >>> url.scheme, url.path
        ('geo', '52.107,5.134,3.6;u=1000')
    """
    return _URL_ADAPTER.validate_python(str(geo_uri))


def from_url(url: Any) -> GeoUri:
    """
    Разбор URL (AnyUrl или любого объекта со строковым представлением).

    Raises:
        GeoUriError: Если строка URL не является валидным geo URI
    """
    return GeoUri.parse(str(url))
