"""
Core math modules

Геометрические примитивы для 2D линейных преобразований.
"""

import logging

# Argument checks
from src.core.math.arg_checks import (
    InvalidArgumentError,
    is_number,
    require_defined,
    require_index,
    require_number,
    require_sequence,
)

# Cartesian2
from src.core.math.cartesian2 import Cartesian2, format_number

# Matrix2
from src.core.math.matrix2 import (
    # Constants
    EPSILON1,
    EPSILON2,
    EPSILON3,
    EPSILON4,
    EPSILON5,
    EPSILON6,
    EPSILON7,
    EPSILON8,
    EPSILON9,
    EPSILON10,
    IDENTITY,
    MATRIX2_COMPONENT_COUNT,
    # Models
    ImmutableMatrix2,
    Matrix2,
    # Construction
    clone,
    from_components,
    from_rotation,
    from_row_major_array,
    from_scale,
    from_uniform_scale,
    # Rows / columns
    get_column,
    get_row,
    set_column,
    set_row,
    # Arithmetic
    multiply,
    multiply_by_scalar,
    multiply_by_vector,
    negate,
    transpose,
    # Comparison / formatting
    equals,
    equals_epsilon,
    to_string,
)

# Библиотека не настраивает логирование: только NullHandler
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Argument checks
    "InvalidArgumentError",
    "is_number",
    "require_defined",
    "require_index",
    "require_number",
    "require_sequence",
    # Cartesian2
    "Cartesian2",
    "format_number",
    # Matrix2: Constants
    "EPSILON1",
    "EPSILON2",
    "EPSILON3",
    "EPSILON4",
    "EPSILON5",
    "EPSILON6",
    "EPSILON7",
    "EPSILON8",
    "EPSILON9",
    "EPSILON10",
    "IDENTITY",
    "MATRIX2_COMPONENT_COUNT",
    # Matrix2: Models
    "Matrix2",
    "ImmutableMatrix2",
    # Matrix2: Construction
    "from_components",
    "from_row_major_array",
    "from_scale",
    "from_uniform_scale",
    "from_rotation",
    "clone",
    # Matrix2: Rows / columns
    "get_column",
    "set_column",
    "get_row",
    "set_row",
    # Matrix2: Arithmetic
    "multiply",
    "multiply_by_vector",
    "multiply_by_scalar",
    "negate",
    "transpose",
    # Matrix2: Comparison / formatting
    "equals",
    "equals_epsilon",
    "to_string",
]
