"""
CoordRefSystem — система координат geo URI

RFC 5870: 3.4.2 (WGS-84), 8.3 (реестр значений crs)

Пока поддерживается только WGS-84: широта и долгота в десятичных градусах,
высота в метрах. Новые системы добавляются как новые члены enum вместе с
записью в _RANGES; неизвестные значения параметра crs отклоняются через
from_param().
"""

from enum import Enum
from typing import Dict, Tuple

from geo_uri.constants import (
    WGS84_LATITUDE_MAX,
    WGS84_LATITUDE_MIN,
    WGS84_LONGITUDE_MAX,
    WGS84_LONGITUDE_MIN,
)
from geo_uri.errors import InvalidCoordRefSystem, OutOfRangeLatitude, OutOfRangeLongitude


class CoordRefSystem(str, Enum):
    """Система координат; значение члена совпадает со значением параметра crs."""

    WGS84 = "wgs84"

    @classmethod
    def default(cls) -> "CoordRefSystem":
        """Система по умолчанию, когда параметр crs не задан."""
        return cls.WGS84

    @classmethod
    def from_param(cls, value: str) -> "CoordRefSystem":
        """
        Разрешение значения параметра crs.

        Args:
            value: Значение параметра (уже в нижнем регистре)

        Returns:
            Член enum

        Raises:
            InvalidCoordRefSystem: Если система не поддерживается
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidCoordRefSystem() from None

    @property
    def latitude_range(self) -> Tuple[float, float]:
        return _RANGES[self][0]

    @property
    def longitude_range(self) -> Tuple[float, float]:
        return _RANGES[self][1]

    def validate_latitude(self, latitude: float) -> None:
        """
        Raises:
            OutOfRangeLatitude: Если широта вне диапазона системы (NaN тоже вне)
        """
        low, high = self.latitude_range
        if not low <= latitude <= high:
            raise OutOfRangeLatitude()

    def validate_longitude(self, longitude: float) -> None:
        """
        Raises:
            OutOfRangeLongitude: Если долгота вне диапазона системы (NaN тоже вне)
        """
        low, high = self.longitude_range
        if not low <= longitude <= high:
            raise OutOfRangeLongitude()

    def validate(self, latitude: float, longitude: float) -> None:
        """
        Проверка пары координат относительно системы.

        Широта проверяется первой: если обе координаты невалидны,
        поднимается OutOfRangeLatitude.

        Examples:
            >>> CoordRefSystem.WGS84.validate(52.107, 5.134)
            >>> CoordRefSystem.WGS84.validate(100.0, 5.134)  # doctest: +SKIP
            Traceback (most recent call last):
                ...
            OutOfRangeLatitude: Latitude coordinate is out of range

        Raises:
            OutOfRangeLatitude: Широта вне диапазона
            OutOfRangeLongitude: Долгота вне диапазона
        """
        self.validate_latitude(latitude)
        self.validate_longitude(longitude)


# (latitude_range, longitude_range) для каждой системы
_RANGES: Dict[CoordRefSystem, Tuple[Tuple[float, float], Tuple[float, float]]] = {
    CoordRefSystem.WGS84: (
        (WGS84_LATITUDE_MIN, WGS84_LATITUDE_MAX),
        (WGS84_LONGITUDE_MIN, WGS84_LONGITUDE_MAX),
    ),
}
