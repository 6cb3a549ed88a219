"""
Matrix2 — Матрица 2x2 для линейных преобразований на плоскости

Строительный блок для 2D линейных преобразований (rotation, scale, shear):
- Конструирование: нулевая матрица, from_components, from_row_major_array, clone
- Фабрики преобразований: from_scale, from_uniform_scale, from_rotation
- Доступ к строкам/столбцам через Cartesian2
- Арифметика: multiply, multiply_by_vector, multiply_by_scalar, negate, transpose
- Сравнение (equals, equals_epsilon) и текстовое представление (to_string)

РАСКЛАДКА ХРАНЕНИЯ:
    values = [column0Row0, column1Row0, column0Row1, column1Row1]

    get_column(m, c) = (values[c],     values[c + 2])
    get_row(m, r)    = (values[r * 2], values[r * 2 + 1])

RESULT PARAMETER:
    Каждая операция с опциональным `result` либо записывает значения в
    result in-place и возвращает его, либо создаёт и возвращает новый
    экземпляр. Оба режима дают идентичные значения компонент.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. values всегда содержит ровно 4 элемента (запись in-place не меняет длину)
2. Все выходные компоненты вычисляются до записи, поэтому один и тот же
   экземпляр можно передавать и как вход, и как result
3. IDENTITY неизменяема структурно (frozen модель + tuple хранилище)
4. equals / equals_epsilon считают отсутствующий операнд допустимым
   (просто неравным), все остальные операции требуют операнды
"""

import math
from collections.abc import Sequence
from typing import Any, Final

from pydantic import BaseModel, Field, ValidationError, field_validator

from src.core.math.arg_checks import (
    invalid_argument,
    is_number,
    require_defined,
    require_index,
    require_number,
    require_sequence,
)
from src.core.math.cartesian2 import Cartesian2, format_number

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Количество компонент матрицы 2x2
MATRIX2_COMPONENT_COUNT: Final[int] = 4

# Стандартные epsilon для equals_epsilon
EPSILON1: Final[float] = 1e-1
EPSILON2: Final[float] = 1e-2
EPSILON3: Final[float] = 1e-3
EPSILON4: Final[float] = 1e-4
EPSILON5: Final[float] = 1e-5
EPSILON6: Final[float] = 1e-6
EPSILON7: Final[float] = 1e-7
EPSILON8: Final[float] = 1e-8
EPSILON9: Final[float] = 1e-9
EPSILON10: Final[float] = 1e-10


# =============================================================================
# MATRIX2 MODEL
# =============================================================================


class Matrix2(BaseModel):
    """
    Матрица 2x2, хранимая плоским списком из 4 компонент.

    Мутабельна только через result parameter операций модуля.
    Все методы экземпляра делегируют одноимённым функциям модуля
    с self в качестве первого операнда.
    """

    values: list[float] = Field(
        default_factory=lambda: [0.0, 0.0, 0.0, 0.0],
        min_length=MATRIX2_COMPONENT_COUNT,
        max_length=MATRIX2_COMPONENT_COUNT,
        description="Компоненты [column0Row0, column1Row0, column0Row1, column1Row1]",
    )

    model_config = {"validate_assignment": True}

    @field_validator("values", mode="before")
    @classmethod
    def validate_components(cls, v: Any) -> Any:
        """
        Проверка, что все компоненты числа; приведение к float.

        bool и строки не принимаются (в отличие от lax-режима Pydantic).
        """
        if not isinstance(v, Sequence) or isinstance(v, (str, bytes)):
            return v
        for i, component in enumerate(v):
            if not is_number(component):
                raise ValueError(f"values[{i}] must be a number, got {component!r}")
        return [float(component) for component in v]

    def __init__(self, values: Sequence[float] | None = None) -> None:
        """
        Args:
            values: 4 компоненты в порядке хранения (default: нулевая матрица).
                Последовательность всегда копируется.

        Raises:
            InvalidArgumentError: Если values не последовательность из 4 чисел
        """
        if values is None:
            values = [0.0, 0.0, 0.0, 0.0]
        require_sequence(values, "values", MATRIX2_COMPONENT_COUNT)
        try:
            super().__init__(values=values)
        except ValidationError as e:
            raise invalid_argument(f"values must contain only numbers, got {list(values)!r}") from e

    def _store(self, column0_row0: float, column1_row0: float, column0_row1: float, column1_row1: float) -> "Matrix2":
        """Запись 4 компонент in-place (длина хранилища не меняется)."""
        # Срез сохраняет тот же list-буфер; validate_assignment здесь не срабатывает, отсюда float()
        self.values[:] = [float(column0_row0), float(column1_row0), float(column0_row1), float(column1_row1)]
        return self

    # -------------------------------------------------------------------------
    # Instance shorthands
    # -------------------------------------------------------------------------

    def clone(self, result: "Matrix2 | None" = None) -> "Matrix2":
        return clone(self, result)

    def get_column(self, index: int, result: Cartesian2 | None = None) -> Cartesian2:
        return get_column(self, index, result)

    def set_column(self, index: int, cartesian: Cartesian2, result: "Matrix2 | None" = None) -> "Matrix2":
        return set_column(self, index, cartesian, result)

    def get_row(self, index: int, result: Cartesian2 | None = None) -> Cartesian2:
        return get_row(self, index, result)

    def set_row(self, index: int, cartesian: Cartesian2, result: "Matrix2 | None" = None) -> "Matrix2":
        return set_row(self, index, cartesian, result)

    def multiply(self, right: "Matrix2", result: "Matrix2 | None" = None) -> "Matrix2":
        return multiply(self, right, result)

    def multiply_by_vector(self, cartesian: Cartesian2, result: Cartesian2 | None = None) -> Cartesian2:
        return multiply_by_vector(self, cartesian, result)

    def multiply_by_scalar(self, scalar: float, result: "Matrix2 | None" = None) -> "Matrix2":
        return multiply_by_scalar(self, scalar, result)

    def negate(self, result: "Matrix2 | None" = None) -> "Matrix2":
        return negate(self, result)

    def transpose(self, result: "Matrix2 | None" = None) -> "Matrix2":
        return transpose(self, result)

    def equals(self, right: "Matrix2 | None") -> bool:
        return equals(self, right)

    def equals_epsilon(self, right: "Matrix2 | None", epsilon: float) -> bool:
        return equals_epsilon(self, right, epsilon)

    def to_string(self) -> str:
        return to_string(self)

    def __eq__(self, other: object) -> bool:
        # Tuple-backed IDENTITY равна list-backed копии
        if not isinstance(other, Matrix2):
            return NotImplemented
        return equals(self, other)

    def __str__(self) -> str:
        return to_string(self)


class ImmutableMatrix2(Matrix2):
    """
    Неизменяемая матрица 2x2 (используется для IDENTITY).

    - frozen=True: присваивание атрибутов отклоняется Pydantic
    - values хранится как tuple: присваивание элементов невозможно
    - использование в качестве result отклоняется InvalidArgumentError
    """

    values: tuple[float, float, float, float] = Field(
        ..., description="Компоненты [column0Row0, column1Row0, column0Row1, column1Row1]"
    )

    model_config = {"frozen": True, "validate_assignment": True}  # Immutable

    def _store(self, column0_row0: float, column1_row0: float, column0_row1: float, column1_row1: float) -> "Matrix2":
        raise invalid_argument("result must be a mutable Matrix2, got an immutable matrix")


# =============================================================================
# ВНУТРЕННИЕ HELPERS
# =============================================================================


def _emit(
    result: Matrix2 | None,
    column0_row0: float,
    column1_row0: float,
    column0_row1: float,
    column1_row1: float,
) -> Matrix2:
    """Запись в result или создание нового экземпляра."""
    if result is None:
        return Matrix2([column0_row0, column1_row0, column0_row1, column1_row1])
    return result._store(column0_row0, column1_row0, column0_row1, column1_row1)


def _emit_cartesian(result: Cartesian2 | None, x: float, y: float) -> Cartesian2:
    if result is None:
        return Cartesian2(x, y)
    return result.update(x, y)


# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


def from_components(
    column0_row0: float,
    column1_row0: float,
    column0_row1: float,
    column1_row1: float,
    result: Matrix2 | None = None,
) -> Matrix2:
    """
    Создание матрицы из 4 компонент в порядке хранения.

    Args:
        column0_row0: Значение column 0, row 0
        column1_row0: Значение column 1, row 0
        column0_row1: Значение column 0, row 1
        column1_row1: Значение column 1, row 1
        result: Матрица для записи результата (optional)

    Returns:
        result (изменённый) или новый Matrix2

    Raises:
        InvalidArgumentError: Если любая компонента не число

    Examples:
        >>> from_components(1, 2, 3, 4).values
        [1.0, 2.0, 3.0, 4.0]
    """
    require_number(column0_row0, "column0_row0")
    require_number(column1_row0, "column1_row0")
    require_number(column0_row1, "column0_row1")
    require_number(column1_row1, "column1_row1")
    return _emit(result, column0_row0, column1_row0, column0_row1, column1_row1)


def from_row_major_array(values: Sequence[float], result: Matrix2 | None = None) -> Matrix2:
    """
    Создание матрицы из массива в row-major порядке.

    [row0Column0, row0Column1, row1Column0, row1Column1]
        -> values = [values[0], values[2], values[1], values[3]]

    Args:
        values: 4 компоненты в row-major порядке
        result: Матрица для записи результата (optional)

    Returns:
        result (изменённый) или новый Matrix2

    Raises:
        InvalidArgumentError: Если values не последовательность из 4 элементов

    Examples:
        >>> from_row_major_array([1, 2, 3, 4]).values
        [1.0, 3.0, 2.0, 4.0]
    """
    require_sequence(values, "values", MATRIX2_COMPONENT_COUNT)
    for i, value in enumerate(values):
        require_number(value, f"values[{i}]")
    return _emit(result, values[0], values[2], values[1], values[3])


def clone(matrix: Matrix2, result: Matrix2 | None = None) -> Matrix2:
    """
    Копирование 4 компонент матрицы.

    Raises:
        InvalidArgumentError: Если matrix отсутствует
    """
    require_defined(matrix, "matrix")
    values = matrix.values
    return _emit(result, values[0], values[1], values[2], values[3])


def from_scale(scale: Cartesian2, result: Matrix2 | None = None) -> Matrix2:
    """
    Матрица неравномерного масштабирования: [scale.x, 0, 0, scale.y].

    Raises:
        InvalidArgumentError: Если scale отсутствует
    """
    require_defined(scale, "scale")
    return _emit(result, scale.x, 0.0, 0.0, scale.y)


def from_uniform_scale(scale: float, result: Matrix2 | None = None) -> Matrix2:
    """
    Матрица равномерного масштабирования: [scale, 0, 0, scale].

    Raises:
        InvalidArgumentError: Если scale не число
    """
    require_number(scale, "scale")
    return _emit(result, scale, 0.0, 0.0, scale)


def from_rotation(angle: float, result: Matrix2 | None = None) -> Matrix2:
    """
    Матрица поворота против часовой стрелки на angle радиан.

        | cos(angle)  -sin(angle) |
        | sin(angle)   cos(angle) |

    Args:
        angle: Угол в радианах (положительный = против часовой стрелки)
        result: Матрица для записи результата (optional)

    Raises:
        InvalidArgumentError: Если angle не число

    Examples:
        >>> m = from_rotation(math.pi / 2)
        >>> v = multiply_by_vector(m, Cartesian2(1.0, 0.0))
        >>> round(v.x, 12), round(v.y, 12)
        (0.0, 1.0)
    """
    require_number(angle, "angle")
    cos_angle = math.cos(angle)
    sin_angle = math.sin(angle)
    return _emit(result, cos_angle, -sin_angle, sin_angle, cos_angle)


# =============================================================================
# СТРОКИ И СТОЛБЦЫ
# =============================================================================


def get_column(matrix: Matrix2, index: int, result: Cartesian2 | None = None) -> Cartesian2:
    """
    Копия столбца index как Cartesian2: (values[index], values[index + 2]).

    Raises:
        InvalidArgumentError: Если matrix отсутствует или index не 0/1
    """
    require_defined(matrix, "matrix")
    require_index(index)
    values = matrix.values
    return _emit_cartesian(result, values[index], values[index + 2])


def set_column(
    matrix: Matrix2,
    index: int,
    cartesian: Cartesian2,
    result: Matrix2 | None = None,
) -> Matrix2:
    """
    Копия matrix, в которой столбец index заменён на (cartesian.x, cartesian.y).

    Raises:
        InvalidArgumentError: Если matrix/cartesian отсутствуют или index не 0/1
    """
    require_defined(matrix, "matrix")
    require_defined(cartesian, "cartesian")
    require_index(index)
    values = list(matrix.values)
    values[index] = cartesian.x
    values[index + 2] = cartesian.y
    return _emit(result, *values)


def get_row(matrix: Matrix2, index: int, result: Cartesian2 | None = None) -> Cartesian2:
    """
    Копия строки index как Cartesian2: (values[index * 2], values[index * 2 + 1]).

    Raises:
        InvalidArgumentError: Если matrix отсутствует или index не 0/1
    """
    require_defined(matrix, "matrix")
    require_index(index)
    start = index * 2
    values = matrix.values
    return _emit_cartesian(result, values[start], values[start + 1])


def set_row(
    matrix: Matrix2,
    index: int,
    cartesian: Cartesian2,
    result: Matrix2 | None = None,
) -> Matrix2:
    """
    Копия matrix, в которой строка index заменена на (cartesian.x, cartesian.y).

    Raises:
        InvalidArgumentError: Если matrix/cartesian отсутствуют или index не 0/1
    """
    require_defined(matrix, "matrix")
    require_defined(cartesian, "cartesian")
    require_index(index)
    start = index * 2
    values = list(matrix.values)
    values[start] = cartesian.x
    values[start + 1] = cartesian.y
    return _emit(result, *values)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def multiply(left: Matrix2, right: Matrix2, result: Matrix2 | None = None) -> Matrix2:
    """
    Произведение матриц left * right.

    Некоммутативно: (left * right) * v = left * (right * v).

    Raises:
        InvalidArgumentError: Если left или right отсутствует

    Examples:
        >>> multiply(from_components(1, 2, 3, 4), from_components(5, 6, 7, 8)).values
        [19.0, 22.0, 43.0, 50.0]
    """
    require_defined(left, "left")
    require_defined(right, "right")

    lv = left.values
    rv = right.values
    column0_row0 = lv[0] * rv[0] + lv[1] * rv[2]
    column1_row0 = lv[0] * rv[1] + lv[1] * rv[3]
    column0_row1 = lv[2] * rv[0] + lv[3] * rv[2]
    column1_row1 = lv[2] * rv[1] + lv[3] * rv[3]

    return _emit(result, column0_row0, column1_row0, column0_row1, column1_row1)


def multiply_by_vector(
    matrix: Matrix2,
    cartesian: Cartesian2,
    result: Cartesian2 | None = None,
) -> Cartesian2:
    """
    Произведение матрицы на вектор-столбец.

        x' = values[0] * x + values[1] * y
        y' = values[2] * x + values[3] * y

    Raises:
        InvalidArgumentError: Если matrix или cartesian отсутствует
    """
    require_defined(matrix, "matrix")
    require_defined(cartesian, "cartesian")

    mv = matrix.values
    x = mv[0] * cartesian.x + mv[1] * cartesian.y
    y = mv[2] * cartesian.x + mv[3] * cartesian.y

    return _emit_cartesian(result, x, y)


def multiply_by_scalar(matrix: Matrix2, scalar: float, result: Matrix2 | None = None) -> Matrix2:
    """
    Покомпонентное умножение на скаляр.

    Raises:
        InvalidArgumentError: Если matrix отсутствует или scalar не число
    """
    require_defined(matrix, "matrix")
    require_number(scalar, "scalar")

    mv = matrix.values
    return _emit(result, mv[0] * scalar, mv[1] * scalar, mv[2] * scalar, mv[3] * scalar)


def negate(matrix: Matrix2, result: Matrix2 | None = None) -> Matrix2:
    """Покомпонентная смена знака."""
    require_defined(matrix, "matrix")

    mv = matrix.values
    return _emit(result, -mv[0], -mv[1], -mv[2], -mv[3])


def transpose(matrix: Matrix2, result: Matrix2 | None = None) -> Matrix2:
    """
    Транспонирование: values[1] <-> values[2], диагональ без изменений.

    Raises:
        InvalidArgumentError: Если matrix отсутствует
    """
    require_defined(matrix, "matrix")

    mv = matrix.values
    return _emit(result, mv[0], mv[2], mv[1], mv[3])


# =============================================================================
# СРАВНЕНИЕ И ФОРМАТИРОВАНИЕ
# =============================================================================


def equals(left: Matrix2 | None, right: Matrix2 | None) -> bool:
    """
    Точное покомпонентное сравнение.

    Отсутствующий операнд допустим: None равен только None.
    Никогда не поднимает исключений.
    """
    if left is right:
        return True
    if left is None or right is None:
        return False

    lv = left.values
    rv = right.values
    return lv[0] == rv[0] and lv[1] == rv[1] and lv[2] == rv[2] and lv[3] == rv[3]


def equals_epsilon(left: Matrix2 | None, right: Matrix2 | None, epsilon: float) -> bool:
    """
    Покомпонентное сравнение с абсолютной толерантностью: |a - b| <= epsilon.

    Отсутствующий операнд обрабатывается как в equals, но epsilon обязателен.

    Raises:
        InvalidArgumentError: Если epsilon не число
    """
    require_number(epsilon, "epsilon")
    if left is right:
        return True
    if left is None or right is None:
        return False

    lv = left.values
    rv = right.values
    return (
        abs(lv[0] - rv[0]) <= epsilon
        and abs(lv[1] - rv[1]) <= epsilon
        and abs(lv[2] - rv[2]) <= epsilon
        and abs(lv[3] - rv[3]) <= epsilon
    )


def to_string(matrix: Matrix2) -> str:
    """
    Строковое представление: каждая строка матрицы на отдельной строке.

        (column0Row0, column1Row0)
        (column0Row1, column1Row1)

    Без завершающего перевода строки.

    Raises:
        InvalidArgumentError: Если matrix отсутствует

    Examples:
        >>> print(to_string(from_components(1, 2, 3, 4)))
        (1, 2)
        (3, 4)
    """
    require_defined(matrix, "matrix")
    v = [format_number(value) for value in matrix.values]
    return f"({v[0]}, {v[1]})\n({v[2]}, {v[3]})"


# =============================================================================
# КОНСТАНТЫ-ЭКЗЕМПЛЯРЫ
# =============================================================================

# Единичная матрица. Неизменяема: frozen модель с tuple хранилищем.
IDENTITY: Final[ImmutableMatrix2] = ImmutableMatrix2((1.0, 0.0, 0.0, 1.0))
