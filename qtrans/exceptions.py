# Copyright (c) 2024, Kerry He, James Saunderson, and Hamza Fawzi

# This Python package QTRANS is licensed under the MIT license; see LICENSE.md
# file in the root directory.


class QtransError(Exception):
    """Base class for all errors raised by QTRANS."""


class MaskDimensionMismatch(QtransError, ValueError):
    """Raised when a subsystem selection mask does not have one entry per
    subsystem of the quantum object it is applied to."""


class DimensionMismatch(QtransError, ValueError):
    """Raised when subsystem dimensions are inconsistent with the shape of
    the data they describe, or when a subsystem index is out of range."""


class QobjTypeError(QtransError, TypeError):
    """Raised when an operation is applied to the wrong kind of quantum
    object, e.g., a ket where an operator is required."""
