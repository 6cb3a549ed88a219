"""
Свойства Matrix2 на наборе представительных матриц

Проверяет:
1. Раскладку строк/столбцов для from_components
2. Инволюции: transpose(transpose(M)) == M, negate(negate(M)) == M
3. Закон единицы: IDENTITY * M == M * IDENTITY == M
4. equals_epsilon(epsilon=0) совпадает с equals
5. Result parameter: in-place режим даёт те же компоненты, что и новый экземпляр
"""

import pytest

from src.core.math import (
    IDENTITY,
    Cartesian2,
    Matrix2,
    clone,
    equals,
    equals_epsilon,
    from_components,
    from_row_major_array,
    from_scale,
    from_uniform_scale,
    get_column,
    get_row,
    multiply,
    multiply_by_scalar,
    multiply_by_vector,
    negate,
    set_column,
    set_row,
    transpose,
)

COMPONENTS = [
    (1.0, 2.0, 3.0, 4.0),
    (0.0, 0.0, 0.0, 0.0),
    (-1.5, 2.25, 1e-9, -7.0),
    (1e6, -3.0, 0.125, 42.0),
]


@pytest.fixture(params=COMPONENTS, ids=lambda c: "m" + "_".join(str(v) for v in c))
def matrix(request: pytest.FixtureRequest) -> Matrix2:
    return from_components(*request.param)


class TestLayout:
    """Раскладка строк и столбцов"""

    @pytest.mark.parametrize("a, b, c, d", COMPONENTS)
    def test_rows_and_columns(self, a: float, b: float, c: float, d: float) -> None:
        m = from_components(a, b, c, d)
        assert get_row(m, 0) == Cartesian2(a, b)
        assert get_row(m, 1) == Cartesian2(c, d)
        assert get_column(m, 0) == Cartesian2(a, c)
        assert get_column(m, 1) == Cartesian2(b, d)

    @pytest.mark.parametrize("a, b, c, d", COMPONENTS)
    def test_row_major_is_transpose_of_components(self, a: float, b: float, c: float, d: float) -> None:
        assert from_row_major_array([a, b, c, d]).equals(transpose(from_components(a, b, c, d)))


class TestAlgebraicLaws:
    """Алгебраические свойства"""

    def test_transpose_involution(self, matrix: Matrix2) -> None:
        assert transpose(transpose(matrix)).equals(matrix)

    def test_negate_involution(self, matrix: Matrix2) -> None:
        assert negate(negate(matrix)).equals(matrix)

    def test_identity_law(self, matrix: Matrix2) -> None:
        assert multiply(IDENTITY, matrix).equals(matrix)
        assert multiply(matrix, IDENTITY).equals(matrix)

    def test_scalar_zero(self, matrix: Matrix2) -> None:
        zero = multiply_by_scalar(matrix, 0)
        assert all(value == 0.0 for value in zero.values)

    def test_identity_preserves_vectors(self) -> None:
        v = Cartesian2(-2.5, 7.0)
        assert multiply_by_vector(IDENTITY, v) == v

    def test_uniform_scale_matches_scalar_multiply(self, matrix: Matrix2) -> None:
        assert multiply(from_uniform_scale(3.0), matrix).equals(multiply_by_scalar(matrix, 3.0))

    def test_equals_epsilon_zero_matches_equals(self, matrix: Matrix2) -> None:
        for other in (clone(matrix), negate(matrix), transpose(matrix), IDENTITY):
            assert equals_epsilon(matrix, other, 0) == equals(matrix, other)


class TestResultParameter:
    """In-place запись совпадает с созданием нового экземпляра"""

    @pytest.mark.parametrize(
        "operation",
        [
            lambda m, r: clone(m, r),
            lambda m, r: from_components(*m.values, r),
            lambda m, r: from_row_major_array(m.values, r),
            lambda m, r: from_scale(get_row(m, 0), r),
            lambda m, r: from_uniform_scale(m.values[3], r),
            lambda m, r: set_column(m, 1, Cartesian2(9.0, -9.0), r),
            lambda m, r: set_row(m, 0, Cartesian2(9.0, -9.0), r),
            lambda m, r: multiply(m, from_components(5.0, 6.0, 7.0, 8.0), r),
            lambda m, r: multiply_by_scalar(m, -2.5, r),
            lambda m, r: negate(m, r),
            lambda m, r: transpose(m, r),
        ],
        ids=[
            "clone",
            "from_components",
            "from_row_major_array",
            "from_scale",
            "from_uniform_scale",
            "set_column",
            "set_row",
            "multiply",
            "multiply_by_scalar",
            "negate",
            "transpose",
        ],
    )
    def test_matrix_operations(self, matrix: Matrix2, operation) -> None:
        allocated = operation(matrix, None)
        result = Matrix2([11.0, 12.0, 13.0, 14.0])
        returned = operation(matrix, result)
        assert returned is result
        assert result.values == allocated.values

    @pytest.mark.parametrize(
        "operation",
        [
            lambda m, r: negate(m, r),
            lambda m, r: transpose(m, r),
            lambda m, r: multiply(m, m, r),
            lambda m, r: multiply_by_scalar(m, 4.0, r),
            lambda m, r: set_column(m, 0, Cartesian2(1.0, 2.0), r),
        ],
        ids=["negate", "transpose", "multiply", "multiply_by_scalar", "set_column"],
    )
    def test_self_aliasing(self, matrix: Matrix2, operation) -> None:
        """Один экземпляр как вход и как result"""
        expected = operation(clone(matrix), None)
        operation(matrix, matrix)
        assert matrix.values == expected.values

    @pytest.mark.parametrize(
        "operation",
        [
            lambda m, r: get_column(m, 0, r),
            lambda m, r: get_row(m, 1, r),
            lambda m, r: multiply_by_vector(m, Cartesian2(3.0, 4.0), r),
        ],
        ids=["get_column", "get_row", "multiply_by_vector"],
    )
    def test_vector_operations(self, matrix: Matrix2, operation) -> None:
        allocated = operation(matrix, None)
        result = Cartesian2(-1.0, -1.0)
        returned = operation(matrix, result)
        assert returned is result
        assert result == allocated

    def test_result_storage_keeps_length(self, matrix: Matrix2) -> None:
        result = Matrix2()
        storage = result.values
        multiply(matrix, matrix, result)
        assert result.values is storage
        assert len(storage) == 4
