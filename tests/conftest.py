"""Общие fixtures для тестов Matrix2 / Cartesian2."""

import pytest

from src.core.math import Cartesian2, Matrix2, from_components


@pytest.fixture
def sample_matrix() -> Matrix2:
    """Матрица [1, 2, 3, 4] (строки (1, 2) и (3, 4))"""
    return from_components(1.0, 2.0, 3.0, 4.0)


@pytest.fixture
def other_matrix() -> Matrix2:
    """Матрица [5, 6, 7, 8]"""
    return from_components(5.0, 6.0, 7.0, 8.0)


@pytest.fixture
def sample_vector() -> Cartesian2:
    """Вектор (3, 4)"""
    return Cartesian2(3.0, 4.0)
