"""
Descriptive Statistics — среднее, медиана, максимум, минимум

Все функции принимают последовательность float переменной длины.
Отсутствующая (None) и пустая последовательности → InvalidArgument.
Входная последовательность никогда не изменяется.

NaN:
- maximum пропускает NaN; NaN только если все элементы NaN
- minimum возвращает NaN, если NaN есть среди элементов
- median сортирует NaN в начало (NaN меньше любого числа)
Результат не зависит от позиции NaN во входе.
"""

import math
from collections.abc import Sequence

from src.core.domain.summary import StatisticsSummary
from src.core.math.numerical_safeguards import require_non_empty


def _nan_first(value: float) -> tuple[bool, float]:
    # NaN не сравнивается, поэтому ключ упорядочивает его отдельным флагом
    return (not math.isnan(value), value)


def average(numbers: Sequence[float] | None) -> float:
    """
    Среднее арифметическое.

    Сумма накапливается последовательно в double, затем делится на длину.

    Raises:
        InvalidArgument: Если numbers пуст или None

    Examples:
        >>> average([10, 20, 30, 40, 50])
        30.0
    """
    values = require_non_empty(numbers, "Cannot calculate average of empty array")

    total = 0.0
    for value in values:
        total += value

    return total / len(values)


def median(numbers: Sequence[float] | None) -> float:
    """
    Медиана.

    Сортируется копия входа (NaN в начале). Для чётной длины — среднее
    двух центральных элементов, для нечётной — центральный элемент.

    Raises:
        InvalidArgument: Если numbers пуст или None

    Examples:
        >>> median([1, 2, 3, 4])
        2.5
        >>> median([7])
        7.0
    """
    values = require_non_empty(numbers, "Cannot calculate median of empty array")

    ordered = sorted(values, key=_nan_first)
    count = len(ordered)
    middle = count // 2

    if count % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2.0

    return float(ordered[middle])


def maximum(numbers: Sequence[float] | None) -> float:
    """Максимальный элемент без учёта NaN. InvalidArgument для пустого входа."""
    values = require_non_empty(numbers, "Cannot find max of empty array")

    comparable = [value for value in values if not math.isnan(value)]
    if not comparable:
        return math.nan

    return float(max(comparable))


def minimum(numbers: Sequence[float] | None) -> float:
    """Минимальный элемент; NaN, если NaN есть во входе. InvalidArgument для пустого входа."""
    values = require_non_empty(numbers, "Cannot find min of empty array")

    if any(math.isnan(value) for value in values):
        return math.nan

    return float(min(values))


def summarize(numbers: Sequence[float] | None) -> StatisticsSummary:
    """
    Сводка описательной статистики одним вызовом.

    Args:
        numbers: Последовательность float

    Returns:
        StatisticsSummary (count, average, median, maximum, minimum)

    Raises:
        InvalidArgument: Если numbers пуст или None
    """
    values = require_non_empty(numbers, "Cannot summarize empty array")

    return StatisticsSummary(
        count=len(values),
        average=average(values),
        median=median(values),
        maximum=maximum(values),
        minimum=minimum(values),
    )
