"""
Core geometry primitives.

Contains the foundational value types for 2D linear transformations
(Matrix2, Cartesian2) that are independent of rendering or scene code.
"""
