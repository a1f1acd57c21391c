"""
Arithmetic — Базовые целочисленные операции

Сложение, вычитание и умножение выполняются в 32-битной two's-complement
арифметике: переполнение не проверяется, результат wrap'ается.
Деление возвращает float и запрещает нулевой делитель.
"""

from src.core.math.errors import DivisionByZero
from src.core.math.numerical_safeguards import wrap_int32


def add(a: int, b: int) -> int:
    """
    Сумма a + b (int32 wrap).

    Examples:
        >>> add(5, 3)
        8
        >>> add(2147483647, 1)
        -2147483648
    """
    return wrap_int32(a + b)


def subtract(a: int, b: int) -> int:
    """Разность a - b (int32 wrap)."""
    return wrap_int32(a - b)


def multiply(a: int, b: int) -> int:
    """Произведение a * b (int32 wrap)."""
    return wrap_int32(a * b)


def divide(a: int, b: int) -> float:
    """
    Деление a / b в floating-point.

    Args:
        a: Делимое
        b: Делитель

    Returns:
        float(a) / b

    Raises:
        DivisionByZero: Если b == 0

    Examples:
        >>> divide(15, 3)
        5.0
        >>> divide(1, 4)
        0.25
    """
    if b == 0:
        raise DivisionByZero("Cannot divide by zero")

    return float(a) / b


def is_even(number: int) -> bool:
    """True если number % 2 == 0 (включая 0 и отрицательные чётные)."""
    return number % 2 == 0
