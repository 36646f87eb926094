"""
Number Theory — Скалярные примитивы теории чисел

Используются алгоритмами над Gaussian integers:
- is_prime: оракул простоты для рациональных целых (trial division)
- rounding_divide: деление с округлением к ближайшему (half away from zero)
"""

import math


def is_prime(n: int) -> bool:
    """
    Проверка простоты рационального целого.

    Trial division по кандидатам 6k ± 1 до isqrt(n). Для больших n
    стоимость растёт как sqrt(n), что приемлемо для норм умеренного размера.

    Args:
        n: Проверяемое число (любой знак)

    Returns:
        True если n простое; n < 2 → False

    Examples:
        >>> is_prime(97)
        True
        >>> is_prime(-3)
        False
    """
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    limit = math.isqrt(n)
    candidate = 5
    while candidate <= limit:
        if n % candidate == 0 or n % (candidate + 2) == 0:
            return False
        candidate += 6

    return True


def rounding_divide(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с округлением к ближайшему целому.

    Половины округляются от нуля: rounding_divide(1, 2) == 1,
    rounding_divide(-1, 2) == -1. Знаменатель приводится к положительному.

    Raises:
        ZeroDivisionError: Если denominator == 0 (проверяется вызывающим)
    """
    if denominator < 0:
        numerator = -numerator
        denominator = -denominator

    half = denominator // 2
    if numerator >= 0:
        return (numerator + half) // denominator
    return -((-numerator + half) // denominator)
