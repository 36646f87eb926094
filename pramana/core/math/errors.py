"""
Errors — Иерархия исключений точной арифметики

Все ошибки локальны для вызова: операции чистые и детерминированные,
поэтому повторный вызов с теми же аргументами завершится той же ошибкой.
Retry/recovery политики нет: вызывающий код должен трактовать исключение
как окончательный сигнал для данного входа.

Каждый вид ошибки одновременно наследует соответствующее builtin-исключение,
чтобы стандартные `except ZeroDivisionError` / `except ValueError` продолжали
работать.
"""


class PramanaError(Exception):
    """Базовое исключение библиотеки."""


class DivisionByZero(PramanaError, ZeroDivisionError):
    """
    Нулевой знаменатель при конструировании, нулевой делитель в
    делении / modulo / divmod, нулевой модуль в проверке сравнимости.
    """


class InvalidOperation(PramanaError, ArithmeticError):
    """Операция не определена для данного значения (например, modulo для комплексного)."""


class UnsupportedOperation(InvalidOperation):
    """
    Результат операции иррационален или требует округления.

    Точность — главная гарантия типа, поэтому magnitude, phase, polar и
    десятичное представление не аппроксимируются, а отклоняются.
    """

    def __init__(self, operation: str, hint: str = "") -> None:
        message = f"{operation} is unsupported: would lose exactness"
        if hint:
            message = f"{message}. {hint}"
        super().__init__(message)
        self.operation = operation


class InvalidCast(PramanaError, TypeError):
    """Сужение значения к целому / вещественному типу невозможно без потерь."""


# Каноническое имя для сужения Gaussian rational → Gaussian integer
NarrowingFailure = InvalidCast


class FormatError(PramanaError, ValueError):
    """Строка не соответствует канонической грамматике или неизвестный format code."""


class ArgumentError(PramanaError, ValueError):
    """
    Некорректные аргументы: GCD двух нулей, массив неверной длины,
    показатель степени вне допустимой области, неподдерживаемый тип.
    """
