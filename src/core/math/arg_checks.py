"""
Argument Checks — Проверка предусловий для геометрических примитивов

Модуль содержит единственный тип ошибки InvalidArgumentError и набор
helper-функций для проверки аргументов операций Matrix2 / Cartesian2:
- Обязательные аргументы (None недопустим)
- Числовые скаляры (int/float, но не bool)
- Индексы строк/столбцов (только 0 или 1)
- Последовательности фиксированной длины

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибка поднимается синхронно в точке нарушения предусловия
2. Сообщение всегда содержит имя нарушенного параметра
3. Ошибки никогда не подавляются внутри библиотеки
"""

import logging
from collections.abc import Sequence
from numbers import Real
from typing import Any, Final

logger = logging.getLogger(__name__)

# Допустимые индексы строки/столбца матрицы 2x2
VALID_INDICES: Final[tuple[int, int]] = (0, 1)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgumentError(ValueError):
    """
    Нарушение предусловия операции: отсутствующий аргумент, индекс вне {0, 1},
    нечисловой скаляр или некорректная входная последовательность.

    Наследует ValueError, поэтому существующие `except ValueError`
    продолжают работать.
    """

    pass


def invalid_argument(message: str) -> InvalidArgumentError:
    """Создание InvalidArgumentError с DEBUG-записью в лог (для `raise invalid_argument(...)`)."""
    logger.debug("invalid argument: %s", message)
    return InvalidArgumentError(message)


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_number(value: Any) -> bool:
    """
    Проверка, является ли значение вещественным числом.

    bool формально является подклассом int, но как скаляр не принимается.

    Examples:
        >>> is_number(2.5)
        True
        >>> is_number(3)
        True
        >>> is_number(True)
        False
        >>> is_number("1.0")
        False
    """
    return isinstance(value, Real) and not isinstance(value, bool)


def require_defined(value: Any, name: str) -> None:
    """
    Проверка, что обязательный аргумент передан.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidArgumentError: Если value is None
    """
    if value is None:
        raise invalid_argument(f"{name} is required")


def require_number(value: Any, name: str) -> None:
    """
    Проверка, что аргумент передан и является числом.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidArgumentError: Если value отсутствует или не число
    """
    if not is_number(value):
        raise invalid_argument(f"{name} is required and must be a number, got {value!r}")


def require_index(index: Any, name: str = "index") -> None:
    """
    Проверка индекса строки/столбца матрицы 2x2.

    Args:
        index: Проверяемый индекс
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidArgumentError: Если index не является целым 0 или 1
    """
    if isinstance(index, bool) or not isinstance(index, int) or index not in VALID_INDICES:
        raise invalid_argument(f"{name} is required and must be 0 or 1, got {index!r}")


def require_sequence(values: Any, name: str, length: int) -> None:
    """
    Проверка, что аргумент является упорядоченной последовательностью
    заданной длины.

    Строки и bytes последовательностями чисел не считаются.

    Args:
        values: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        length: Ожидаемая длина

    Raises:
        InvalidArgumentError: Если values не последовательность или длина неверна
    """
    if not isinstance(values, Sequence) or isinstance(values, (str, bytes)):
        raise invalid_argument(f"{name} must be a sequence of {length} numbers, got {type(values).__name__}")

    if len(values) != length:
        raise invalid_argument(f"{name} must contain exactly {length} elements, got {len(values)}")
