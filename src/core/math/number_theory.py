"""
Number Theory — НОД, НОК, простота и последовательность Фибоначчи

Все функции работают с целыми. Результаты, которые могут выйти за
пределы int32 (НОК, члены Фибоначчи), wrap'аются как в fixed-width
арифметике.

|INT32_MIN| не представим в int32, поэтому модуль от INT32_MIN
(в gcd, lcm и в произведении a * b внутри lcm) → InvalidArgument.
"""

from src.core.math.errors import InvalidArgument
from src.core.math.numerical_safeguards import is_int32, wrap_int32


def _abs_int32(value: int) -> int:
    """Модуль int32; InvalidArgument, если результат не помещается в int32."""
    result = abs(value)
    if not is_int32(result):
        raise InvalidArgument("Cannot take absolute value of INT32_MIN")
    return result


def greatest_common_divisor(a: int, b: int) -> int:
    """
    НОД по алгоритму Евклида на абсолютных значениях.

    Результат всегда >= 0; gcd(0, 0) == 0 (естественное завершение цикла).

    Raises:
        InvalidArgument: Если a или b равен INT32_MIN

    Examples:
        >>> greatest_common_divisor(48, 18)
        6
        >>> greatest_common_divisor(-12, 8)
        4
        >>> greatest_common_divisor(0, 0)
        0
    """
    a = _abs_int32(a)
    b = _abs_int32(b)

    while b != 0:
        a, b = b, a % b

    return a


def least_common_multiple(a: int, b: int) -> int:
    """
    НОК: |a * b| / gcd(a, b).

    Произведение вычисляется в int32 (с wrap), как и в остальной
    целочисленной арифметике библиотеки.

    Returns:
        0 если a == 0 или b == 0

    Raises:
        InvalidArgument: Если a, b или wrap'нутое a * b равны INT32_MIN

    Examples:
        >>> least_common_multiple(12, 8)
        24
        >>> least_common_multiple(7, 0)
        0
    """
    if a == 0 or b == 0:
        return 0

    product = _abs_int32(wrap_int32(a * b))
    return product // greatest_common_divisor(a, b)


def is_prime(number: int) -> bool:
    """
    Проверка простоты trial division по 6k±1.

    Граница цикла целочисленная (i * i <= number), без float sqrt,
    поэтому результат точен для всего диапазона int32.

    Examples:
        >>> is_prime(17)
        True
        >>> is_prime(25)
        False
        >>> is_prime(1)
        False
    """
    if number <= 1:
        return False
    if number <= 3:
        return True
    if number % 2 == 0 or number % 3 == 0:
        return False

    i = 5
    while i * i <= number:
        if number % i == 0 or number % (i + 2) == 0:
            return False
        i += 6

    return True


def fibonacci_sequence(count: int) -> list[int]:
    """
    Первые count членов последовательности Фибоначчи: 0, 1, 1, 2, 3, ...

    Возвращается материализованный список (не генератор).

    Args:
        count: Количество членов (> 0)

    Returns:
        Список длины count

    Raises:
        InvalidArgument: Если count <= 0

    Examples:
        >>> fibonacci_sequence(8)
        [0, 1, 1, 2, 3, 5, 8, 13]
        >>> fibonacci_sequence(1)
        [0]
    """
    if count <= 0:
        raise InvalidArgument("Count must be positive")

    sequence = [0]
    if count >= 2:
        sequence.append(1)

    for i in range(2, count):
        sequence.append(wrap_int32(sequence[i - 1] + sequence[i - 2]))

    return sequence
