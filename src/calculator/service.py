"""Calculator — единый stateless сервис численных операций.

Группы операций:
- Arithmetic: add, subtract, multiply, divide, is_even
- Powers: factorial, power, square_root
- Number theory: greatest_common_divisor, least_common_multiple, is_prime,
  fibonacci_sequence
- Statistics: average, median, max, min, summarize
- Finance: percentage, calculate_compound_interest, compound_interest_schedule
- Conversion: celsius/fahrenheit, miles/kilometers

Сервис не хранит состояния: каждый метод делегирует чистой функции из
src.core, поэтому один экземпляр безопасно использовать из нескольких потоков.
"""

from collections.abc import Sequence

from src.core.domain import units
from src.core.domain.summary import StatisticsSummary
from src.core.math import (
    arithmetic,
    compounding,
    descriptive_stats,
    number_theory,
    powers,
)


class Calculator:
    """Фасад численной библиотеки.

    Ошибки:
    - InvalidArgument: нарушена область определения
    - DivisionByZero: нулевой знаменатель в divide / percentage
    """

    def __init__(self):
        """Calculator не требует зависимостей (stateless)."""
        pass

    # --- Arithmetic -----------------------------------------------------------

    def add(self, a: int, b: int) -> int:
        return arithmetic.add(a, b)

    def subtract(self, a: int, b: int) -> int:
        return arithmetic.subtract(a, b)

    def multiply(self, a: int, b: int) -> int:
        return arithmetic.multiply(a, b)

    def divide(self, a: int, b: int) -> float:
        return arithmetic.divide(a, b)

    def is_even(self, number: int) -> bool:
        return arithmetic.is_even(number)

    # --- Factorial / Power / Root ---------------------------------------------

    def factorial(self, n: int) -> int:
        return powers.factorial(n)

    def power(self, base: float, exponent: float) -> float:
        return powers.power(base, exponent)

    def square_root(self, number: float) -> float:
        return powers.square_root(number)

    # --- Number theory --------------------------------------------------------

    def greatest_common_divisor(self, a: int, b: int) -> int:
        return number_theory.greatest_common_divisor(a, b)

    def least_common_multiple(self, a: int, b: int) -> int:
        return number_theory.least_common_multiple(a, b)

    def is_prime(self, number: int) -> bool:
        return number_theory.is_prime(number)

    def fibonacci_sequence(self, count: int) -> list[int]:
        return number_theory.fibonacci_sequence(count)

    # --- Statistics -----------------------------------------------------------

    def average(self, numbers: Sequence[float] | None) -> float:
        return descriptive_stats.average(numbers)

    def median(self, numbers: Sequence[float] | None) -> float:
        return descriptive_stats.median(numbers)

    def max(self, numbers: Sequence[float] | None) -> float:
        return descriptive_stats.maximum(numbers)

    def min(self, numbers: Sequence[float] | None) -> float:
        return descriptive_stats.minimum(numbers)

    def summarize(self, numbers: Sequence[float] | None) -> StatisticsSummary:
        return descriptive_stats.summarize(numbers)

    # --- Percentage / Finance -------------------------------------------------

    def percentage(self, value: float, total: float) -> float:
        return compounding.percentage(value, total)

    def calculate_compound_interest(
        self,
        principal: float,
        rate: float,
        times_compounded: int,
        years: float,
    ) -> float:
        return compounding.calculate_compound_interest(
            principal, rate, times_compounded, years
        )

    def compound_interest_schedule(
        self,
        principal: float,
        rate: float,
        times_compounded: int,
        years: float,
    ) -> list[float]:
        return compounding.compound_interest_schedule(
            principal, rate, times_compounded, years
        )

    # --- Conversion -----------------------------------------------------------

    def celsius_to_fahrenheit(self, celsius: float) -> float:
        return units.celsius_to_fahrenheit(celsius)

    def fahrenheit_to_celsius(self, fahrenheit: float) -> float:
        return units.fahrenheit_to_celsius(fahrenheit)

    def miles_to_kilometers(self, miles: float) -> float:
        return units.miles_to_kilometers(miles)

    def kilometers_to_miles(self, kilometers: float) -> float:
        return units.kilometers_to_miles(kilometers)
