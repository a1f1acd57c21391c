"""
Units — Конверсия единиц температуры и расстояния

Единственный допустимый способ преобразований между:
- градусы Цельсия ↔ градусы Фаренгейта
- мили ↔ километры

Коэффициент миля/километр — фиксированная округлённая константа.
Пара miles_to_kilometers / kilometers_to_miles не является точно обратной:
остаточная погрешность round-trip ожидаема и сохраняется.
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ КОНВЕРСИИ
# =============================================================================

# Километров в одной миле (округлённое значение)
KM_PER_MILE: Final[float] = 1.60934

# Смещение нуля шкалы Фаренгейта относительно Цельсия
FAHRENHEIT_OFFSET: Final[float] = 32.0


# =============================================================================
# ТЕМПЕРАТУРА
# =============================================================================


def celsius_to_fahrenheit(celsius: float) -> float:
    """
    Конверсия: °C → °F

    F = C × 9 / 5 + 32

    Examples:
        >>> celsius_to_fahrenheit(100)
        212.0
        >>> celsius_to_fahrenheit(-40)
        -40.0
    """
    return (celsius * 9.0 / 5.0) + FAHRENHEIT_OFFSET


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """
    Конверсия: °F → °C

    C = (F - 32) × 5 / 9
    """
    return (fahrenheit - FAHRENHEIT_OFFSET) * 5.0 / 9.0


# =============================================================================
# РАССТОЯНИЕ
# =============================================================================


def miles_to_kilometers(miles: float) -> float:
    """Конверсия: мили → километры (× KM_PER_MILE)."""
    return miles * KM_PER_MILE


def kilometers_to_miles(kilometers: float) -> float:
    """Конверсия: километры → мили (÷ KM_PER_MILE)."""
    return kilometers / KM_PER_MILE
