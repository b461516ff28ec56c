# Copyright (c) 2024, Kerry He, James Saunderson, and Hamza Fawzi

# This Python package QTRANS is licensed under the MIT license; see LICENSE.md
# file in the root directory.

import numbers
import time

import numpy as np

from qtrans._backend import StorageFormat, sparse_module, to_device, to_host
from qtrans._settings import settings
from qtrans._utils.index import pt_coords
from qtrans.exceptions import DimensionMismatch, MaskDimensionMismatch, QobjTypeError
from qtrans.qobj import Qobj


def partial_transpose(rho, mask):
    r"""Performs the partial transpose on a multipartite operator, e.g., for
    a bipartite operator with ``dims=(n0, n1)``, the unique linear map
    satisfying

    .. math::

        X \otimes Y \mapsto X^\top \otimes Y,

    if ``mask=[True, False]``, or

    .. math::

        X \otimes Y \mapsto X \otimes Y^\top,

    if ``mask=[False, True]``, for all :math:`X,Y\in\mathbb{C}^{n\times n}`.

    Parameters
    ----------
    rho : :class:`~qtrans.Qobj`
        Operator defined on :math:`k` subsystems with dimensions
        ``rho.dims=(n0, n1, ..., nk-1)`` which we want to take the partial
        transpose of. Can be stored as a dense or sparse matrix, on either
        the CPU or GPU.
    mask : :obj:`list` of :obj:`bool`
        Sequence of length :math:`k` indicating which of the subsystems
        should be transposed (``True``) and which should be left untouched
        (``False``).

    Returns
    -------
    :class:`~qtrans.Qobj`
        A new operator with the same dimensions, storage format and device
        as ``rho`` with the selected subsystems transposed.

    Raises
    ------
    MaskDimensionMismatch
        If ``mask`` is not a one-dimensional sequence, or its length is not
        equal to the length of ``rho.dims``.
    QobjTypeError
        If ``rho`` is not an operator.
    """
    if not rho.isoper:
        raise QobjTypeError("The partial transpose is only defined for operators.")
    if np.ndim(mask) != 1:
        raise MaskDimensionMismatch(
            f"`mask` should be a one-dimensional sequence of booleans, got {mask!r}."
        )
    mask = np.asarray(mask, dtype=bool)
    if len(mask) != len(rho.dims):
        raise MaskDimensionMismatch(
            "The length of `mask` should be equal to the length of `rho.dims` "
            f"(got {len(mask)} and {len(rho.dims)})."
        )

    if settings.verbose:
        print(
            f"Partial transpose:  dims={rho.dims}  mask={mask.astype(int).tolist()}"
            f"  storage={rho.storage.value}  device={rho.device}"
        )
        t0 = time.time()

    rho_pt = _PARTIAL_TRANSPOSE[rho.storage](rho, mask)

    if settings.verbose >= 2:
        print(f"\tdone in {time.time() - t0:.3e} s")

    return rho_pt


def _partial_transpose_dense(rho, mask):
    dims = rho.dims
    n = len(dims)
    N = int(np.prod(dims))

    # Output axis k takes the bra axis n+k of a transposed subsystem (and
    # vice versa), all other axes stay in place
    perm = list(range(2 * n))
    for k in np.flatnonzero(mask):
        perm[k], perm[k + n] = perm[k + n], perm[k]

    temp = rho.data.reshape(*dims, *dims)
    temp = temp.transpose(tuple(perm))
    out = temp.reshape(N, N)
    if not mask.any():
        out = out.copy()

    return Qobj(out, dims, rho.type)


def _partial_transpose_sparse(rho, mask):
    device = rho.device
    data = rho.data.tocsc()
    nnz = int(data.indptr[-1])

    # Only the index arrays are moved to the host, values stay in place
    indptr = to_host(data.indptr, device)
    indices = to_host(data.indices, device)[:nnz]
    assert len(indptr) == data.shape[1] + 1
    rows, cols = pt_coords(indptr, indices, np.array(rho.dims, dtype=np.int64), mask)

    idx_dtype = np.int32 if device == "gpu" else np.int64
    rows = to_device(rows, device, dtype=idx_dtype)
    cols = to_device(cols, device, dtype=idx_dtype)

    out = sparse_module(device).coo_matrix(
        (data.data[:nnz], (rows, cols)), shape=data.shape
    )
    out.sum_duplicates()
    if out.nnz < nnz and settings.verbose:
        print(f"\tsummed {nnz - out.nnz} duplicate entries of the input")
    out = out.tocsc()
    if settings.auto_tidyup:
        out.eliminate_zeros()

    return Qobj(out, rho.dims, rho.type)


_PARTIAL_TRANSPOSE = {
    StorageFormat.DENSE: _partial_transpose_dense,
    StorageFormat.SPARSE: _partial_transpose_sparse,
}


def ptrace(q, sel):
    r"""Performs the partial trace on a multipartite quantum object, keeping
    the subsystems in ``sel`` and tracing out all others, e.g., for a
    bipartite operator with ``dims=(n0, n1)``, this is the unique linear
    map satisfying

    .. math::

        X \otimes Y \mapsto \text{tr}[Y] X,

    if ``sel=0``, or

    .. math::

        X \otimes Y \mapsto \text{tr}[X] Y,

    if ``sel=1``, for all :math:`X,Y\in\mathbb{H}^n`.

    Parameters
    ----------
    q : :class:`~qtrans.Qobj`
        Operator, ket or bra defined on :math:`k` subsystems. Kets and bras
        are treated as the density matrix they define.
    sel : :obj:`int` or :obj:`tuple` of :obj:`int`
        Which of the :math:`k` subsystems to keep. The order of the
        subsystems is irrelevant.

    Returns
    -------
    :class:`~qtrans.Qobj` or scalar
        The reduced operator on the subsystems ``sel``, stored densely on
        the same device as ``q``. If ``sel`` is empty, the full trace is
        returned instead.

    See also
    --------
    partial_transpose : The partial transpose operator
    """
    dims = q.dims
    if isinstance(sel, numbers.Integral):
        sel = [sel]
    sel = sorted([int(k) for k in sel])
    if len(set(sel)) != len(sel) or any([k < 0 or k >= len(dims) for k in sel]):
        raise DimensionMismatch(
            f"Invalid subsystem selection {sel} for a Qobj with dims {dims}."
        )
    not_sel = [k for k in range(len(dims)) if k not in sel]

    new_dims = [dims[k] for k in sel]
    new_dim = int(np.prod(new_dims, dtype=int))
    tr_dim = int(np.prod([dims[k] for k in not_sel], dtype=int))

    if q.isoper:
        # Sort subsystems so the ones we want to keep are at the front
        reordered_dims = sel + not_sel
        reordered_dims = reordered_dims + [k + len(dims) for k in reordered_dims]

        temp = q.full().reshape(*dims, *dims).transpose(tuple(reordered_dims))
        temp = temp.reshape(new_dim, tr_dim, new_dim, tr_dim)
        out = temp.trace(axis1=1, axis2=3)
    else:
        psi = q.full().reshape(*dims)
        if q.isbra:
            psi = psi.conj()
        psi = psi.transpose(tuple(sel + not_sel)).reshape(new_dim, tr_dim)
        out = psi @ psi.conj().T

    if len(sel) == 0:
        return out[0, 0]
    return Qobj(out, new_dims, "oper")
