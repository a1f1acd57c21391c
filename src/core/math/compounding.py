"""
Compounding — Percentage & Compound Interest

Модуль содержит финансовые вычисления:
- Процент value от total
- Сложный процент: principal × (1 + rate/n)^(n × years)
- Годовой график баланса при сложном проценте

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. total == 0 → DivisionByZero (процент не определён)
2. principal <= 0, rate < 0, n <= 0, years < 0 → InvalidArgument
3. Возведение в степень следует IEEE-754 (переполнение → inf, без исключений)

ФОРМУЛЫ:
    percentage = (value / total) × 100
    A = P × (1 + r/n)^(n × t)
"""

from typing import Final

from src.core.math.errors import DivisionByZero
from src.core.math.numerical_safeguards import validate_non_negative, validate_positive
from src.core.math.powers import power

INVALID_COMPOUND_TERMS: Final[str] = "Invalid parameters for compound interest calculation"

# =============================================================================
# PERCENTAGE
# =============================================================================


def percentage(value: float, total: float) -> float:
    """
    Доля value от total в процентах.

    Args:
        value: Часть
        total: Целое (знаменатель)

    Returns:
        (value / total) * 100

    Raises:
        DivisionByZero: Если total == 0

    Examples:
        >>> percentage(25, 100)
        25.0
        >>> percentage(75, 150)
        50.0
    """
    if total == 0:
        raise DivisionByZero("Total cannot be zero")

    return (value / total) * 100


# =============================================================================
# COMPOUND INTEREST
# =============================================================================


def _validate_compound_terms(
    principal: float,
    rate: float,
    times_compounded: int,
    years: float,
) -> None:
    validate_positive(principal, INVALID_COMPOUND_TERMS)
    validate_non_negative(rate, INVALID_COMPOUND_TERMS)
    validate_positive(times_compounded, INVALID_COMPOUND_TERMS)
    validate_non_negative(years, INVALID_COMPOUND_TERMS)


def calculate_compound_interest(
    principal: float,
    rate: float,
    times_compounded: int,
    years: float,
) -> float:
    """
    Итоговая сумма при сложном проценте.

    A = principal × (1 + rate / times_compounded) ^ (times_compounded × years)

    Args:
        principal: Начальная сумма (> 0)
        rate: Годовая ставка в долях (>= 0, например 0.05 для 5%)
        times_compounded: Число начислений в год (> 0)
        years: Срок в годах (>= 0, может быть дробным)

    Returns:
        Итоговая сумма (principal + начисленные проценты)

    Raises:
        InvalidArgument: Если любой параметр вне допустимой области

    Examples:
        >>> round(calculate_compound_interest(1000, 0.05, 4, 2), 2)
        1104.49
        >>> calculate_compound_interest(1000, 0.05, 12, 0)
        1000.0
    """
    _validate_compound_terms(principal, rate, times_compounded, years)

    growth = power(1 + rate / times_compounded, times_compounded * years)
    return principal * growth


def compound_interest_schedule(
    principal: float,
    rate: float,
    times_compounded: int,
    years: float,
) -> list[float]:
    """
    Баланс на конец каждого полного года.

    Args:
        principal: Начальная сумма (> 0)
        rate: Годовая ставка в долях (>= 0)
        times_compounded: Число начислений в год (> 0)
        years: Срок в годах (>= 0); учитываются только полные годы

    Returns:
        schedule: [A(1), A(2), ..., A(floor(years))], пустой для years < 1

    Raises:
        InvalidArgument: Если любой параметр вне допустимой области

    Examples:
        >>> [round(v, 2) for v in compound_interest_schedule(1000, 0.1, 1, 3)]
        [1100.0, 1210.0, 1331.0]
        >>> compound_interest_schedule(1000, 0.1, 1, 0.5)
        []
    """
    _validate_compound_terms(principal, rate, times_compounded, years)

    return [
        calculate_compound_interest(principal, rate, times_compounded, year)
        for year in range(1, int(years) + 1)
    ]
