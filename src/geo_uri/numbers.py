"""
Числа в geo URI — разбор и каноническое представление

Разбор строже встроенного float(): пробелы, подчёркивания ("1_000") и
пустые строки не допускаются, поэтому литерал сначала сверяется с
FLOAT_LITERAL_RE.

Вывод: кратчайшая форма, однозначно восстанавливающая значение
(как repr()), но всегда в позиционной записи и без ".0" у целых:
    1000.0 → "1000", 1e-07 → "0.0000001", -0.0 → "-0"
"""

import math
from decimal import Decimal

from geo_uri.constants import FLOAT_LITERAL_RE


def parse_float(text: str) -> float:
    """
    Разбор десятичного литерала.

    Args:
        text: Литерал (в нижнем регистре)

    Returns:
        Значение float

    Raises:
        ValueError: Если строка не является литералом с плавающей точкой
    """
    if not text:
        raise ValueError("cannot parse float from empty string")
    if FLOAT_LITERAL_RE.fullmatch(text) is None:
        raise ValueError(f"invalid float literal: {text!r}")
    return float(text)


def format_float(value: float) -> str:
    """
    Каноническая строка для числа.

    Examples:
        >>> format_float(1000.0)
        '1000'
        >>> format_float(52.107)
        '52.107'
        >>> format_float(1e-07)
        '0.0000001'
    """
    value = float(value)
    if not math.isfinite(value):
        return repr(value)  # 'inf', '-inf', 'nan'

    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
