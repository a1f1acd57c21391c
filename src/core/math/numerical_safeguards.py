"""
Numerical Safeguards — Fixed-width Integers & Float Primitives

Модуль содержит общие примитивы для всех операций библиотеки:
- 32-битная two's-complement арифметика (wrap без проверки переполнения)
- Проверки float на NaN/Inf
- Валидация входов с выбросом InvalidArgument

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Целочисленные результаты всегда лежат в [INT32_MIN, INT32_MAX]
2. Входные последовательности никогда не изменяются
3. Все операции детерминированы и воспроизводимы
"""

import math
from collections.abc import Sequence
from typing import Final

from src.core.math.errors import InvalidArgument

# =============================================================================
# FIXED-WIDTH INTEGER ПАРАМЕТРЫ
# =============================================================================

# Ширина целого в битах (int32)
INT_BITS: Final[int] = 32

# Границы знакового 32-битного целого
INT32_MIN: Final[int] = -(2 ** (INT_BITS - 1))
INT32_MAX: Final[int] = 2 ** (INT_BITS - 1) - 1

_INT32_MODULUS: Final[int] = 2**INT_BITS


# =============================================================================
# TWO'S-COMPLEMENT WRAP
# =============================================================================


def wrap_int32(value: int) -> int:
    """
    Приведение целого к 32-битному two's-complement диапазону.

    Python int не ограничен по ширине, поэтому переполнение эмулируется
    явно: значение берётся по модулю 2**32 и интерпретируется как знаковое.

    Args:
        value: Произвольное целое

    Returns:
        Значение в [INT32_MIN, INT32_MAX]

    Examples:
        >>> wrap_int32(5)
        5
        >>> wrap_int32(2**31)
        -2147483648
        >>> wrap_int32(-2**31 - 1)
        2147483647
    """
    return (value - INT32_MIN) % _INT32_MODULUS + INT32_MIN


def is_int32(value: int) -> bool:
    """Проверка, что целое помещается в int32 без wrap."""
    return INT32_MIN <= value <= INT32_MAX


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite, False если NaN или Inf
    """
    return math.isfinite(value)


def is_odd_integer(value: float) -> bool:
    """
    Проверка, что float является нечётным целым (например 3.0, -5.0).

    Нужна для определения знака IEEE-754 результата возведения в степень.
    """
    if not is_valid_float(value):
        return False
    return float(value).is_integer() and int(value) % 2 == 1


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def require_non_empty(numbers: Sequence[float] | None, message: str) -> list[float]:
    """
    Проверка, что последовательность передана и не пуста.

    Отсутствующая (None) и пустая последовательности обрабатываются
    одинаково: одна проверка длины.

    Args:
        numbers: Последовательность чисел или None
        message: Сообщение для InvalidArgument

    Returns:
        Новый список с теми же элементами (вход не изменяется)

    Raises:
        InvalidArgument: Если numbers is None или пуст
    """
    values = list(numbers) if numbers is not None else []

    if len(values) == 0:
        raise InvalidArgument(message)

    return values


def validate_positive(value: float, message: str) -> None:
    """
    Валидация, что значение строго положительное.

    Raises:
        InvalidArgument: Если value <= 0
    """
    if value <= 0:
        raise InvalidArgument(message)


def validate_non_negative(value: float, message: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Raises:
        InvalidArgument: Если value < 0
    """
    if value < 0:
        raise InvalidArgument(message)
