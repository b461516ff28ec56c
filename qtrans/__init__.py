# Copyright (c) 2024, Kerry He, James Saunderson, and Hamza Fawzi

# This Python package QTRANS is licensed under the MIT license; see LICENSE.md
# file in the root directory.

# __init__.py
from qtrans._version import __version__  # noqa

from qtrans._settings import settings  # noqa
from qtrans._backend import StorageFormat  # noqa
from qtrans.exceptions import (  # noqa
    QtransError,
    MaskDimensionMismatch,
    DimensionMismatch,
    QobjTypeError,
)
from qtrans.qobj import Qobj, tensor, ket2dm, fock  # noqa
from qtrans.qobj import dense_to_sparse, sparse_to_dense, tidyup  # noqa
from qtrans.quantum import partial_transpose, ptrace, negativity  # noqa
