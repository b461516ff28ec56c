# Copyright (c) 2024, Kerry He, James Saunderson, and Hamza Fawzi

# This Python package QTRANS is licensed under the MIT license; see LICENSE.md
# file in the root directory.

import numpy as np
import numba as nb


@nb.njit
def decompose(flat, dims):
    """Decomposes a flat index into a multi-index over subsystems with
    dimensions ``dims``, using row-major ordering, i.e., the first
    subsystem is the most significant digit. This matches the ordering
    used by ``numpy.reshape`` and ``numpy.unravel_index``.

    Parameters
    ----------
    flat : int
        Flat index in ``[0, prod(dims))``.
    dims : ndarray
        Integer array of subsystem dimensions ``(n0, n1, ..., nk-1)``.

    Returns
    -------
    ndarray
        Integer array ``(i0, i1, ..., ik-1)`` with ``0 <= ij < nj``.
    """
    n = len(dims)
    multi = np.empty(n, dtype=np.int64)
    rem = np.int64(flat)
    for k in range(n - 1, -1, -1):
        multi[k] = rem % dims[k]
        rem = rem // dims[k]
    return multi


@nb.njit
def recompose(multi, dims):
    """Recomposes a multi-index into a flat index. This is the inverse of
    :func:`decompose`.

    Parameters
    ----------
    multi : ndarray
        Integer array ``(i0, i1, ..., ik-1)`` with ``0 <= ij < nj``.
    dims : ndarray
        Integer array of subsystem dimensions ``(n0, n1, ..., nk-1)``.

    Returns
    -------
    int
        Flat index in ``[0, prod(dims))``.
    """
    flat = np.int64(0)
    for k in range(len(dims)):
        flat = flat * dims[k] + multi[k]
    return flat


@nb.njit(parallel=True)
def pt_coords(indptr, indices, dims, mask):
    """Computes the row and column coordinates of the partial transpose of
    a sparse matrix stored in compressed sparse column format.

    Parameters
    ----------
    indptr : ndarray
        Column pointers of the CSC matrix, of length ``N+1``.
    indices : ndarray
        Row indices of the CSC matrix, of length ``indptr[N]``.
    dims : ndarray
        Integer array of subsystem dimensions.
    mask : ndarray
        Boolean array indicating which subsystems are transposed.

    Returns
    -------
    ndarray
        Row indices of the transposed entries, in storage order.
    ndarray
        Column indices of the transposed entries, in storage order.
    """
    ncol = len(indptr) - 1
    nnz = len(indices)
    rows = np.empty(nnz, dtype=np.int64)
    cols = np.empty(nnz, dtype=np.int64)

    for j in nb.prange(ncol):
        for p in range(indptr[j], indptr[j + 1]):
            i = indices[p]
            if i == j:
                # Diagonal entries have identical ket and bra multi-indices
                rows[p] = i
                cols[p] = j
                continue

            ket = decompose(i, dims)
            bra = decompose(j, dims)
            for k in range(len(dims)):
                if mask[k]:
                    ket[k], bra[k] = bra[k], ket[k]
            rows[p] = recompose(ket, dims)
            cols[p] = recompose(bra, dims)

    return rows, cols
