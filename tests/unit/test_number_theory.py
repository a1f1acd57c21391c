"""
Тесты для модуля Number Theory

Проверяет:
1. НОД: алгоритм Евклида, знаки, gcd(0, 0)
2. НОК: нулевые операнды, знаки, INT32_MIN → InvalidArgument
3. is_prime: совпадение с trial division на [0, 10000], граница int32
4. fibonacci_sequence: значения, длина, InvalidArgument, int32 wrap
"""

import pytest

from src.core.math.errors import InvalidArgument
from src.core.math.number_theory import (
    fibonacci_sequence,
    greatest_common_divisor,
    is_prime,
    least_common_multiple,
)


def _is_prime_naive(n: int) -> bool:
    if n < 2:
        return False
    return all(n % d != 0 for d in range(2, n))


class TestGreatestCommonDivisor:
    """Тесты для greatest_common_divisor"""

    @pytest.mark.parametrize(
        "a,b,expected",
        [(48, 18, 6), (56, 42, 14), (17, 13, 1), (-12, 8, 4), (12, -8, 4), (-12, -8, 4)],
    )
    def test_known_values(self, a: int, b: int, expected: int) -> None:
        assert greatest_common_divisor(a, b) == expected

    def test_zero_operands(self) -> None:
        assert greatest_common_divisor(0, 0) == 0
        assert greatest_common_divisor(0, 9) == 9
        assert greatest_common_divisor(-9, 0) == 9

    def test_always_non_negative(self) -> None:
        for a in range(-20, 21, 3):
            for b in range(-20, 21, 7):
                assert greatest_common_divisor(a, b) >= 0

    @pytest.mark.parametrize("a,b", [(-2**31, 0), (0, -2**31), (-2**31, 6)])
    def test_int32_min_operand_raises(self, a: int, b: int) -> None:
        with pytest.raises(InvalidArgument, match="INT32_MIN"):
            greatest_common_divisor(a, b)

    def test_int32_max_operand(self) -> None:
        assert greatest_common_divisor(2147483647, 0) == 2147483647


class TestLeastCommonMultiple:
    """Тесты для least_common_multiple"""

    def test_known_values(self) -> None:
        assert least_common_multiple(12, 8) == 24
        assert least_common_multiple(4, 6) == 12
        assert least_common_multiple(-4, 6) == 12

    @pytest.mark.parametrize("a", [0, 1, -5, 12, 2147483647])
    def test_zero_operand(self, a: int) -> None:
        assert least_common_multiple(a, 0) == 0
        assert least_common_multiple(0, a) == 0

    @pytest.mark.parametrize("a,b", [(-2**31, 1), (1, -2**31), (-2**31, -2**31)])
    def test_int32_min_operand_raises(self, a: int, b: int) -> None:
        """|INT32_MIN| не представим в int32"""
        with pytest.raises(InvalidArgument, match="INT32_MIN"):
            least_common_multiple(a, b)

    def test_product_wrapping_to_int32_min_raises(self) -> None:
        """65536 * -32768 == -2**31 после wrap"""
        with pytest.raises(InvalidArgument, match="INT32_MIN"):
            least_common_multiple(65536, -32768)

    def test_int32_min_with_zero_is_zero(self) -> None:
        assert least_common_multiple(-2**31, 0) == 0


class TestIsPrime:
    """Тесты для is_prime"""

    def test_boundaries(self) -> None:
        assert is_prime(0) is False
        assert is_prime(1) is False
        assert is_prime(2) is True
        assert is_prime(3) is True
        assert is_prime(-7) is False

    @pytest.mark.parametrize("n,expected", [(17, True), (29, True), (4, False), (15, False), (25, False)])
    def test_known_values(self, n: int, expected: bool) -> None:
        assert is_prime(n) is expected

    def test_matches_trial_division_up_to_10000(self) -> None:
        """Совпадение с наивным trial division на [0, 10000]"""
        sieve = [True] * 10001
        sieve[0] = sieve[1] = False
        for i in range(2, 101):
            if sieve[i]:
                for j in range(i * i, 10001, i):
                    sieve[j] = False
        for n in range(10001):
            assert is_prime(n) is sieve[n], n

    def test_naive_reference_small_range(self) -> None:
        for n in range(200):
            assert is_prime(n) is _is_prime_naive(n)

    def test_int32_max_is_prime(self) -> None:
        """2**31 - 1 — простое число Мерсенна"""
        assert is_prime(2147483647) is True

    def test_square_of_large_prime(self) -> None:
        """46337**2 составное: граница i * i <= n включительная"""
        assert is_prime(46337 * 46337) is False


class TestFibonacciSequence:
    """Тесты для fibonacci_sequence"""

    @pytest.mark.parametrize(
        "count,expected",
        [
            (1, [0]),
            (2, [0, 1]),
            (5, [0, 1, 1, 2, 3]),
            (8, [0, 1, 1, 2, 3, 5, 8, 13]),
        ],
    )
    def test_first_terms(self, count: int, expected: list[int]) -> None:
        assert fibonacci_sequence(count) == expected

    @pytest.mark.parametrize("count", [0, -5])
    def test_non_positive_count_raises(self, count: int) -> None:
        with pytest.raises(InvalidArgument, match="Count must be positive"):
            fibonacci_sequence(count)

    def test_returns_list(self) -> None:
        result = fibonacci_sequence(10)
        assert isinstance(result, list)
        assert len(result) == 10

    def test_recurrence(self) -> None:
        seq = fibonacci_sequence(30)
        for i in range(2, 30):
            assert seq[i] == seq[i - 1] + seq[i - 2]

    def test_overflow_wraps(self) -> None:
        """F(47) = 2971215073 не помещается в int32"""
        seq = fibonacci_sequence(48)
        assert seq[46] == 1836311903
        assert seq[47] == 2971215073 - 2**32
