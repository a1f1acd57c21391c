"""
Errors — Исключения численной библиотеки

Два вида ошибок, различимых вызывающим кодом:
- InvalidArgument: нарушена математическая область определения входа
- DivisionByZero: знаменатель, переданный вызывающим кодом, точно равен нулю

Оба наследуют соответствующие builtin исключения, поэтому
`except ValueError` / `except ZeroDivisionError` продолжают работать.
"""


class InvalidArgument(ValueError):
    """
    Нарушение области определения функции.

    Примеры: отрицательный аргумент factorial, отрицательный аргумент
    square_root, count <= 0 для fibonacci_sequence, пустая последовательность
    для статистики, недопустимые параметры compound interest.

    Сообщение всегда описывает нарушенное предусловие.
    """

    pass


class DivisionByZero(ZeroDivisionError):
    """
    Знаменатель, переданный вызывающим кодом, точно равен нулю.

    Используется в divide и percentage. Отделён от InvalidArgument:
    "математика не определена" vs "вход некорректен".
    """

    pass
