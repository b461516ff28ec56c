# Copyright (c) 2024, Kerry He, James Saunderson, and Hamza Fawzi

# This Python package QTRANS is licensed under the MIT license; see LICENSE.md
# file in the root directory.

import numpy as np
import scipy as sp

from qtrans._backend import to_host
from qtrans.qobj import Qobj

_DTYPES = {
    64: {"i": np.int64, "f": np.float64, "c": np.complex128},
    32: {"i": np.int32, "f": np.float32, "c": np.complex64},
}


def _gpu_dtype(dtype, word_size, issparse):
    kind = np.dtype(dtype).kind
    if kind in "ub":
        kind = "i"
    if issparse and kind == "i":
        # CuPy sparse matrices only support floating point data
        kind = "f"
    return _DTYPES[word_size][kind]


def cu(q, word_size=64):
    """Moves a quantum object to the GPU.

    Parameters
    ----------
    q : :class:`~qtrans.Qobj`
        Quantum object to move to the GPU.
    word_size : {``64``, ``32``}, optional
        Word size of the data on the GPU, i.e., ``64`` stores integer, real
        and complex data as ``int64``, ``float64`` and ``complex128``, and
        ``32`` stores them as ``int32``, ``float32`` and ``complex64``. The
        default is ``64``.

    Returns
    -------
    :class:`~qtrans.Qobj`
        The quantum object stored as a CuPy array, or as a CuPy CSC sparse
        matrix if ``q`` is sparse. Sparse integer data is stored as floating
        point data of the same word size.

    Raises
    ------
    ValueError
        If ``word_size`` is not ``32`` or ``64``.
    """
    if word_size not in _DTYPES:
        raise ValueError(f"word_size must be 32 or 64, got {word_size!r}.")

    import cupy
    import cupyx.scipy.sparse

    if q.issparse:
        dtype = _gpu_dtype(q.data.dtype, word_size, True)
        if q.device == "gpu":
            out = q.data.tocsc().astype(dtype)
        else:
            host = sp.sparse.csc_matrix(q.data).astype(dtype)
            out = cupyx.scipy.sparse.csc_matrix(host)
    else:
        out = cupy.asarray(q.data, dtype=_gpu_dtype(q.data.dtype, word_size, False))

    return Qobj(out, q.dims, q.type)


def cpu(q):
    """Moves a quantum object back to the CPU, as a NumPy array or a SciPy
    CSC sparse matrix."""
    if q.device == "cpu":
        return q.copy()
    if q.issparse:
        return Qobj(q.data.tocsc().get(), q.dims, q.type)
    return Qobj(to_host(q.data, q.device), q.dims, q.type)
