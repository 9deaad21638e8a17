"""
GeoUri — универсальный идентификатор ресурса для географического положения

RFC 5870: 3.4 (компоненты), 6.4 (сравнение URI)

Pydantic модель с validate_assignment=True: каждое присваивание проходит
через те же field_validator, что и конструктор. Валидаторы выполняются
до записи значения, поэтому при ошибке поле остаётся прежним и объект
никогда не бывает в невалидном состоянии.

Порядок полей важен: crs → latitude → longitude → altitude → uncertainty.
Если невалидны и широта, и долгота, поднимается OutOfRangeLatitude.

model_copy(update=...) валидирует обновлённые значения заново.
model_construct() валидацию пропускает и предназначен только для уже
проверенных значений (так его использует GeoUriBuilder.build()).
"""

from typing import TYPE_CHECKING, Any, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from geo_uri.constants import UNCERTAINTY_MIN, WGS84_POLE_LATITUDE
from geo_uri.crs import CoordRefSystem
from geo_uri.errors import OutOfRangeUncertainty
from geo_uri.formatter import format_geo_uri
from geo_uri.parser import parse_geo_uri

if TYPE_CHECKING:
    from pydantic import AnyUrl

    from geo_uri.builder import GeoUriBuilder


class GeoUri(BaseModel):
    """
    Geo URI: координаты, необязательные высота и неопределённость.

    Examples:
        >>> geo = GeoUri.parse("geo:52.107,5.134,3.6;u=1000")
        >>> geo.latitude, geo.longitude, geo.altitude, geo.uncertainty
        (52.107, 5.134, 3.6, 1000.0)
        >>> str(geo)
        'geo:52.107,5.134,3.6;u=1000'
        >>> str(GeoUri.builder().latitude(52.107).longitude(5.134).uncertainty(1000.0).build())
        'geo:52.107,5.134;u=1000'
    """

    crs: CoordRefSystem = Field(
        default=CoordRefSystem.WGS84, description="Система координат (только WGS-84)"
    )
    latitude: float = Field(..., description="Широта, градусы")
    longitude: float = Field(..., description="Долгота, градусы")
    altitude: Optional[float] = Field(None, description="Высота, метры")
    uncertainty: Optional[float] = Field(
        None, description="Радиус неопределённости, метры (не отрицательный)"
    )

    model_config = ConfigDict(validate_assignment=True)

    # =========================================================================
    # ВАЛИДАЦИЯ
    # =========================================================================

    @field_validator("crs")
    @classmethod
    def validate_crs(cls, v: CoordRefSystem, info: ValidationInfo) -> CoordRefSystem:
        """При смене crs существующие координаты проверяются заново."""
        if "latitude" in info.data and "longitude" in info.data:
            v.validate(info.data["latitude"], info.data["longitude"])
        return v

    @field_validator("latitude")
    @classmethod
    def validate_latitude(cls, v: float, info: ValidationInfo) -> float:
        crs = info.data.get("crs", CoordRefSystem.default())
        crs.validate_latitude(v)
        return v

    @field_validator("longitude")
    @classmethod
    def validate_longitude(cls, v: float, info: ValidationInfo) -> float:
        crs = info.data.get("crs", CoordRefSystem.default())
        crs.validate_longitude(v)
        return v

    @field_validator("uncertainty")
    @classmethod
    def validate_uncertainty(cls, v: Optional[float]) -> Optional[float]:
        """Неопределённость не может быть отрицательной (ноль допустим)."""
        if v is not None and v < UNCERTAINTY_MIN:
            raise OutOfRangeUncertainty()
        return v

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def builder(cls) -> "GeoUriBuilder":
        """Новый GeoUriBuilder."""
        from geo_uri.builder import GeoUriBuilder

        return GeoUriBuilder()

    @classmethod
    def parse(cls, uri: str) -> "GeoUri":
        """
        Разбор строки geo URI.

        RFC 5870: 3.3

        Raises:
            GeoUriError: Если разбор или валидация не прошли
        """
        parsed = parse_geo_uri(uri)
        return cls(
            crs=parsed.crs,
            latitude=parsed.latitude,
            longitude=parsed.longitude,
            altitude=parsed.altitude,
            uncertainty=parsed.uncertainty,
        )

    @classmethod
    def from_tuple(
        cls, coords: Union[Tuple[float, float], Tuple[float, float, float]]
    ) -> "GeoUri":
        """
        GeoUri из (latitude, longitude) или (latitude, longitude, altitude).

        Raises:
            ValueError: Если в кортеже не 2 и не 3 элемента
            OutOfRangeLatitude, OutOfRangeLongitude: Координаты вне диапазона
        """
        if len(coords) == 2:
            latitude, longitude = coords
            return cls(latitude=latitude, longitude=longitude)
        if len(coords) == 3:
            latitude, longitude, altitude = coords
            return cls(latitude=latitude, longitude=longitude, altitude=altitude)
        raise ValueError(f"expected 2 or 3 coordinates, got {len(coords)}")

    @classmethod
    def from_url(cls, url: Any) -> "GeoUri":
        """Повторный разбор строкового представления URL."""
        from geo_uri.url import from_url

        return from_url(url)

    # =========================================================================
    # ПРЕОБРАЗОВАНИЯ
    # =========================================================================

    def model_copy(
        self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False
    ) -> "GeoUri":
        """
        Копия GeoUri; значения из update проходят полную валидацию.

        Raises:
            GeoUriError: Если update нарушает инвариант (исходный объект не меняется)
        """
        if update:
            return type(self).model_validate({**self.model_dump(), **update})
        return super().model_copy(deep=deep)

    def to_tuple(self) -> Union[Tuple[float, float], Tuple[float, float, float]]:
        if self.altitude is None:
            return self.latitude, self.longitude
        return self.latitude, self.longitude, self.altitude

    def to_url(self) -> "AnyUrl":
        from geo_uri.url import to_url

        return to_url(self)

    def __str__(self) -> str:
        return format_geo_uri(self)

    # =========================================================================
    # СРАВНЕНИЕ (RFC 5870 6.4)
    # =========================================================================

    def ignores_longitude(self) -> bool:
        """На полюсах WGS-84 любая долгота обозначает одну и ту же точку."""
        return (
            self.crs is CoordRefSystem.WGS84
            and abs(self.latitude) == WGS84_POLE_LATITUDE
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeoUri):
            return NotImplemented

        return (
            self.crs == other.crs
            and self.latitude == other.latitude
            and (self.ignores_longitude() or self.longitude == other.longitude)
            and self.altitude == other.altitude
            and self.uncertainty == other.uncertainty
        )

