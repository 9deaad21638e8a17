"""
Константы geo URI

RFC 5870: 3.3 (синтаксис), 3.4.2 (WGS-84)

Единственное место, где задаются имена схемы/параметров и допустимые
диапазоны координат. Модули пакета не должны дублировать эти литералы.
"""

import re
from typing import Final


# =============================================================================
# СХЕМА И ПАРАМЕТРЫ (RFC 5870 3.3)
# =============================================================================

# Имя схемы без двоеточия
URI_SCHEME_NAME: Final[str] = "geo"

# Префикс, с которого обязана начинаться строка (после приведения к нижнему регистру)
URI_SCHEME_PREFIX: Final[str] = f"{URI_SCHEME_NAME}:"

COORD_SEPARATOR: Final[str] = ","
PARAM_SEPARATOR: Final[str] = ";"
PARAM_VALUE_SEPARATOR: Final[str] = "="

# Максимум частей координат: latitude, longitude, altitude
MAX_COORD_PARTS: Final[int] = 3

PARAM_CRS: Final[str] = "crs"
PARAM_UNCERTAINTY: Final[str] = "u"


# =============================================================================
# ДИАПАЗОНЫ WGS-84 (RFC 5870 3.4.2)
# =============================================================================

WGS84_LATITUDE_MIN: Final[float] = -90.0
WGS84_LATITUDE_MAX: Final[float] = 90.0

WGS84_LONGITUDE_MIN: Final[float] = -180.0
WGS84_LONGITUDE_MAX: Final[float] = 180.0

# |latitude| на полюсе: долгота там не различает точки (RFC 5870 6.4)
WGS84_POLE_LATITUDE: Final[float] = 90.0

# Минимально допустимая неопределённость (метры)
UNCERTAINTY_MIN: Final[float] = 0.0


# =============================================================================
# ГРАММАТИКА ЧИСЕЛ
# =============================================================================

# Десятичный литерал с плавающей точкой: знак, цифры, дробь, экспонента.
# Вход уже приведён к нижнему регистру. Только ASCII цифры (RFC 5870 DIGIT):
# \d совпал бы и с "٥٢", которые float() тоже принимает.
FLOAT_LITERAL_RE: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)"
)
