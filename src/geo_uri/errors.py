"""
Ошибки geo URI

Закрытая таксономия: каждый класс описывает ровно одну причину отказа.

GeoUriError намеренно наследуется от Exception, а не от ValueError:
pydantic оборачивает ValueError в ValidationError, а исключения других
типов из валидаторов пробрасывает как есть. Благодаря этому присваивание
geo.latitude = 100.0 поднимает OutOfRangeLatitude, а не ValidationError.
"""

from typing import Optional


# =============================================================================
# GEO URI ERRORS
# =============================================================================


class GeoUriError(Exception):
    """Базовая ошибка разбора/валидации geo URI."""

    message: str = "Invalid geo URI"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)


class MissingScheme(GeoUriError):
    """Строка не начинается с префикса `geo:`."""

    message = "Missing geo URI scheme"


class MissingCoords(GeoUriError):
    """Часть с координатами пуста."""

    message = "Missing coordinates in geo URI"


class MissingLatitude(GeoUriError):
    message = "Missing latitude coordinate in geo URI"


class MissingLongitude(GeoUriError):
    message = "Missing longitude coordinate in geo URI"


class InvalidCoord(GeoUriError):
    """
    Координата присутствует, но не является числом.

    Attributes:
        cause: Исходная ошибка разбора числа (ValueError)
    """

    def __init__(self, cause: ValueError) -> None:
        self.cause = cause
        super().__init__(f"Invalid coordinate in geo URI: {cause}")


class InvalidCoordRefSystem(GeoUriError):
    """Параметр crs задан, но система координат не поддерживается."""

    message = "Invalid coordinate reference system"


class InvalidUncertainty(GeoUriError):
    """
    Параметр u задан, но не является числом.

    Attributes:
        cause: Исходная ошибка разбора числа (ValueError)
    """

    def __init__(self, cause: ValueError) -> None:
        self.cause = cause
        super().__init__(f"Invalid distance in geo URI: {cause}")


# Расстояние неопределённости — то же самое условие
InvalidDistance = InvalidUncertainty


class OutOfRangeLatitude(GeoUriError):
    """Широта вне диапазона `-90.0..=90.0` (WGS-84)."""

    message = "Latitude coordinate is out of range"


class OutOfRangeLongitude(GeoUriError):
    """Долгота вне диапазона `-180.0..=180.0` (WGS-84)."""

    message = "Longitude coordinate is out of range"


class OutOfRangeUncertainty(GeoUriError):
    """Неопределённость отрицательна."""

    message = "Uncertainty distance not positive"


# =============================================================================
# BUILDER ERRORS
# =============================================================================


class GeoUriBuilderError(Exception):
    """Базовая ошибка GeoUriBuilder.build()."""


class UninitializedFieldError(GeoUriBuilderError):
    """
    Обязательное поле не было задано в builder.

    Attributes:
        field: Имя поля ("latitude" или "longitude")
    """

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"uninitialized field: {field}")


class BuilderValidationError(GeoUriBuilderError):
    """Собранные значения нарушают инвариант; сообщение берётся из первой ошибки."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
