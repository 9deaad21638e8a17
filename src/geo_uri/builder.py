"""
GeoUriBuilder — пошаговое построение GeoUri

Сеттеры только накапливают значения; вся проверка выполняется один раз в
build(). latitude и longitude обязательны, остальные поля необязательны.
"""

from typing import Optional

from geo_uri.constants import UNCERTAINTY_MIN
from geo_uri.crs import CoordRefSystem
from geo_uri.errors import (
    BuilderValidationError,
    GeoUriError,
    OutOfRangeUncertainty,
    UninitializedFieldError,
)
from geo_uri.model import GeoUri


class GeoUriBuilder:
    """
    Builder для GeoUri.

    Examples:
        >>> geo = GeoUri.builder().latitude(52.107).longitude(5.134).build()
        >>> str(geo)
        'geo:52.107,5.134'

    Builder можно переиспользовать: build() не сбрасывает накопленные значения.
    """

    def __init__(self) -> None:
        self._crs: Optional[CoordRefSystem] = None
        self._latitude: Optional[float] = None
        self._longitude: Optional[float] = None
        self._altitude: Optional[float] = None
        self._uncertainty: Optional[float] = None

    def crs(self, crs: CoordRefSystem) -> "GeoUriBuilder":
        self._crs = crs
        return self

    def latitude(self, latitude: float) -> "GeoUriBuilder":
        self._latitude = latitude
        return self

    def longitude(self, longitude: float) -> "GeoUriBuilder":
        self._longitude = longitude
        return self

    def altitude(self, altitude: float) -> "GeoUriBuilder":
        self._altitude = altitude
        return self

    def uncertainty(self, uncertainty: float) -> "GeoUriBuilder":
        self._uncertainty = uncertainty
        return self

    def build(self) -> GeoUri:
        """
        Проверка и сборка GeoUri.

        Returns:
            Новый провалидированный GeoUri

        Raises:
            UninitializedFieldError: latitude или longitude не заданы
            BuilderValidationError: Нарушен инвариант (сообщение первой ошибки,
                исходная GeoUriError доступна в __cause__)
        """
        if self._latitude is None:
            raise UninitializedFieldError("latitude")
        if self._longitude is None:
            raise UninitializedFieldError("longitude")

        crs = CoordRefSystem(self._crs) if self._crs is not None else CoordRefSystem.default()
        try:
            self._validate(crs)
        except GeoUriError as e:
            raise BuilderValidationError(str(e)) from e

        # Инварианты уже проверены _validate: единственный проход валидации
        return GeoUri.model_construct(
            crs=crs,
            latitude=float(self._latitude),
            longitude=float(self._longitude),
            altitude=_optional_float(self._altitude),
            uncertainty=_optional_float(self._uncertainty),
        )

    def _validate(self, crs: CoordRefSystem) -> None:
        crs.validate(self._latitude, self._longitude)
        if self._uncertainty is not None and self._uncertainty < UNCERTAINTY_MIN:
            raise OutOfRangeUncertainty()


def _optional_float(value: Optional[float]) -> Optional[float]:
    return None if value is None else float(value)
