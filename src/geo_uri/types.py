"""
GeoUriStr — GeoUri как поле других pydantic моделей

На входе принимает GeoUri или строку geo URI, при сериализации выдаёт
каноническую строку:

    class Place(BaseModel):
        name: str
        location: GeoUriStr

    Place(name="Wien", location="geo:48.2010,16.3695,183").model_dump()
    # {'name': 'Wien', 'location': 'geo:48.201,16.3695,183'}
"""

from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from geo_uri.errors import GeoUriError
from geo_uri.model import GeoUri


def _to_geo_uri(value: Any) -> GeoUri:
    if isinstance(value, GeoUri):
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected geo URI string, got {type(value).__name__}")
    try:
        return GeoUri.parse(value)
    except GeoUriError as e:
        # ValueError → pydantic ValidationError с текстом исходной ошибки
        raise ValueError(str(e)) from e


GeoUriStr = Annotated[
    GeoUri,
    PlainValidator(_to_geo_uri),
    PlainSerializer(str, return_type=str),
    WithJsonSchema({"type": "string", "format": "uri", "pattern": "^[Gg][Ee][Oo]:"}),
]
