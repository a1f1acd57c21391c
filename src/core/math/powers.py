"""
Powers — Factorial, возведение в степень и квадратный корень

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. factorial накапливает произведение с int32 wrap на каждом шаге
2. power следует IEEE-754: вместо исключений возвращает nan / ±inf
3. square_root определён только для x >= 0
"""

import math

from src.core.math.errors import InvalidArgument
from src.core.math.numerical_safeguards import is_odd_integer, wrap_int32


def factorial(n: int) -> int:
    """
    Factorial n! через аккумулятор (без мемоизации).

    Args:
        n: Неотрицательное целое

    Returns:
        1 для n в {0, 1}, иначе 1·2·…·n с int32 wrap

    Raises:
        InvalidArgument: Если n < 0

    Examples:
        >>> factorial(5)
        120
        >>> factorial(13)  # переполнение int32
        1932053504
    """
    if n < 0:
        raise InvalidArgument("Factorial cannot be calculated for negative numbers")

    if n in (0, 1):
        return 1

    result = 1
    for i in range(2, n + 1):
        result = wrap_int32(result * i)

    return result


def power(base: float, exponent: float) -> float:
    """
    Возведение base в степень exponent по IEEE-754.

    math.pow выбрасывает исключения там, где IEEE-754 возвращает
    специальное значение. Здесь они переводятся обратно:
    - переполнение → ±inf (минус только для base < 0 и нечётного целого exponent)
    - 0 ** отрицательная степень → ±inf (полюс)
    - прочие нарушения области (отрицательное основание, дробная степень) → nan

    Args:
        base: Основание
        exponent: Показатель (может быть отрицательным и дробным)

    Returns:
        base ** exponent

    Examples:
        >>> power(2, 8)
        256.0
        >>> power(2, -2)
        0.25
        >>> power(-8, 1 / 3)
        nan
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0 and exponent < 0:
            # -0.0 в нечётной отрицательной степени даёт -inf
            if math.copysign(1.0, base) < 0 and is_odd_integer(exponent):
                return -math.inf
            return math.inf
        return math.nan


def square_root(number: float) -> float:
    """
    Неотрицательный квадратный корень.

    Raises:
        InvalidArgument: Если number < 0

    Examples:
        >>> square_root(25)
        5.0
        >>> square_root(0)
        0.0
    """
    if number < 0:
        raise InvalidArgument("Cannot calculate square root of negative number")

    return math.sqrt(number)
