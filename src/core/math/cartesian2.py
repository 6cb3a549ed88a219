"""
Cartesian2 — 2D вектор (x, y)

Мутабельная Pydantic модель: упорядоченная пара координат с get/set
семантикой. Используется Matrix2 для чтения/записи строк и столбцов,
а также как результат произведения матрицы на вектор.

Поддерживает паттерн "result parameter": операции, принимающие
опциональный result, записывают значения в него (update) и возвращают его.
"""

from typing import Any, Final

from pydantic import BaseModel, Field, ValidationError, field_validator

from src.core.math.arg_checks import invalid_argument, is_number, require_number

# Порог, начиная с которого целые float печатаются в экспоненциальной форме
INTEGER_FORMAT_LIMIT: Final[float] = 1e21


def format_number(value: Any) -> str:
    """
    Текстовое представление компоненты вектора/матрицы.

    Целые float с |value| < 1e21 печатаются без дробной части (1.0 -> "1"),
    остальные значения (включая 1e+300, nan, inf) через repr.

    Examples:
        >>> format_number(1.0)
        '1'
        >>> format_number(-2.5)
        '-2.5'
        >>> format_number(0.1)
        '0.1'
        >>> format_number(1e300)
        '1e+300'
    """
    if isinstance(value, float) and value.is_integer() and abs(value) < INTEGER_FORMAT_LIMIT:
        return str(int(value))
    return repr(value)


class Cartesian2(BaseModel):
    """
    2D вектор (x, y).

    Мутабельная модель: validate_assignment=True гарантирует, что
    присваивание x/y проходит ту же валидацию, что и конструктор.
    """

    x: float = Field(default=0.0, description="Координата X")
    y: float = Field(default=0.0, description="Координата Y")

    model_config = {"validate_assignment": True}

    @field_validator("x", "y", mode="before")
    @classmethod
    def validate_coordinate(cls, v: Any) -> Any:
        """bool и строки не принимаются (в отличие от lax-режима Pydantic)."""
        if not is_number(v):
            raise ValueError(f"coordinate must be a number, got {v!r}")
        return v

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        try:
            super().__init__(x=x, y=y)
        except ValidationError as e:
            raise invalid_argument(f"x and y must be numbers, got ({x!r}, {y!r})") from e

    def update(self, x: float, y: float) -> "Cartesian2":
        """
        Запись обеих координат in-place.

        Обе координаты проверяются до записи: при ошибке вектор не меняется.

        Returns:
            self (для цепочек вызовов)

        Raises:
            InvalidArgumentError: Если x или y не число
        """
        require_number(x, "x")
        require_number(y, "y")
        self.x = x
        self.y = y
        return self

    def clone(self, result: "Cartesian2 | None" = None) -> "Cartesian2":
        """Копия вектора (в result, если передан)."""
        if result is None:
            return Cartesian2(self.x, self.y)
        return result.update(self.x, self.y)

    def equals(self, right: "Cartesian2 | None") -> bool:
        """Покомпонентное точное сравнение; None никогда не равен вектору."""
        if self is right:
            return True
        if right is None:
            return False
        return self.x == right.x and self.y == right.y

    def equals_epsilon(self, right: "Cartesian2 | None", epsilon: float) -> bool:
        """
        Покомпонентное сравнение с абсолютной толерантностью.

        Raises:
            InvalidArgumentError: Если epsilon не число
        """
        require_number(epsilon, "epsilon")
        if self is right:
            return True
        if right is None:
            return False
        return abs(self.x - right.x) <= epsilon and abs(self.y - right.y) <= epsilon

    def to_string(self) -> str:
        """Строка вида '(x, y)'."""
        return f"({format_number(self.x)}, {format_number(self.y)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cartesian2):
            return NotImplemented
        return self.equals(other)

    def __str__(self) -> str:
        return self.to_string()
