# Copyright (c) 2024, Kerry He, James Saunderson, and Hamza Fawzi

# This Python package QTRANS is licensed under the MIT license; see LICENSE.md
# file in the root directory.

import enum

import numpy as np
import scipy as sp


class StorageFormat(enum.Enum):
    """Storage tag of the matrix held by a :class:`~qtrans.Qobj`."""

    DENSE = "dense"
    SPARSE = "sparse"


CPU = "cpu"
GPU = "gpu"


def _is_cupy(data):
    return type(data).__module__.split(".")[0] in ("cupy", "cupyx")


def storage_of(data):
    """Returns the :class:`StorageFormat` tag and device of an array."""
    if sp.sparse.issparse(data):
        return StorageFormat.SPARSE, CPU
    if _is_cupy(data):
        import cupyx.scipy.sparse

        if cupyx.scipy.sparse.issparse(data):
            return StorageFormat.SPARSE, GPU
        return StorageFormat.DENSE, GPU
    return StorageFormat.DENSE, CPU


def array_module(device):
    """Returns the dense array module for a device, i.e., ``numpy`` or
    ``cupy``."""
    if device == GPU:
        import cupy

        return cupy
    return np


def sparse_module(device):
    """Returns the sparse matrix module for a device, i.e.,
    ``scipy.sparse`` or ``cupyx.scipy.sparse``."""
    if device == GPU:
        import cupyx.scipy.sparse

        return cupyx.scipy.sparse
    return sp.sparse


def to_host(arr, device):
    if device == GPU:
        import cupy

        return cupy.asnumpy(arr)
    return arr


def to_device(arr, device, dtype=None):
    if device == GPU:
        import cupy

        return cupy.asarray(arr, dtype=dtype)
    return np.asarray(arr, dtype=dtype)
