# Copyright (c) 2024, Kerry He, James Saunderson, and Hamza Fawzi

# This Python package QTRANS is licensed under the MIT license; see LICENSE.md
# file in the root directory.

# __init__.py
import qtrans.quantum.random  # noqa

from qtrans.quantum.operator import partial_transpose, ptrace  # noqa
from qtrans.quantum.entanglement import negativity  # noqa
