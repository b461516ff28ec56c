# Copyright (c) 2024, Kerry He, James Saunderson, and Hamza Fawzi

# This Python package QTRANS is licensed under the MIT license; see LICENSE.md
# file in the root directory.

import numbers

import numpy as np

from qtrans._backend import (
    StorageFormat,
    array_module,
    sparse_module,
    storage_of,
)
from qtrans._settings import settings
from qtrans.exceptions import DimensionMismatch, QobjTypeError

OPER = "oper"
KET = "ket"
BRA = "bra"


class Qobj:
    r"""A class representing a quantum object, i.e., an operator, ket or
    bra defined on a composite Hilbert space

    .. math::

        \mathcal{H} = \mathcal{H}_0 \otimes \mathcal{H}_1 \otimes \ldots
        \otimes \mathcal{H}_{k-1},

    where :math:`\mathcal{H}_i` has dimension ``n_i``.

    Parameters
    ----------
    data : :class:`~numpy.ndarray` or :class:`~scipy.sparse.spmatrix`
        Matrix representation of the quantum object. Can also be a CuPy
        array or CuPy sparse matrix, in which case the object lives on the
        GPU. One-dimensional arrays are interpreted as kets.
    dims : :obj:`tuple` of :obj:`int`, optional
        The dimensions ``(n0, n1, ..., nk-1)`` of the :math:`k` subsystems.
        The product of the dimensions must equal the dimension of the
        Hilbert space. The default is a single subsystem.
    type : {``"oper"``, ``"ket"``, ``"bra"``}, optional
        Kind of quantum object. The default is inferred from the shape of
        ``data``, i.e., square arrays are operators, column vectors are
        kets, and row vectors are bras.

    Attributes
    ----------
    storage : :class:`~qtrans._backend.StorageFormat`
        Whether ``data`` is stored as a dense or sparse matrix.
    device : {``"cpu"``, ``"gpu"``}
        Where ``data`` physically resides.
    """

    # Let NumPy scalars defer to Qobj.__rmul__ and friends
    __array_ufunc__ = None

    def __init__(self, data, dims=None, type=None):
        storage, device = storage_of(data)
        if storage == StorageFormat.DENSE:
            if device == "cpu":
                data = np.asarray(data)
            if data.ndim == 1:
                data = data.reshape(-1, 1)

        if len(data.shape) != 2:
            raise DimensionMismatch(
                f"Data of a Qobj must be two-dimensional, got shape {data.shape}."
            )

        self.data = data
        self.storage = storage
        self.device = device

        (nrow, ncol) = data.shape
        if type is None:
            if nrow == ncol:
                type = OPER
            elif ncol == 1:
                type = KET
            elif nrow == 1:
                type = BRA
            else:
                raise DimensionMismatch(
                    f"Cannot infer the type of a Qobj with shape {data.shape}."
                )
        if type not in (OPER, KET, BRA):
            raise QobjTypeError(f"Unknown Qobj type {type!r}.")
        self.type = type

        if dims is None:
            dims = (ncol,) if type == BRA else (nrow,)
        if isinstance(dims, numbers.Integral):
            dims = (dims,)
        dims = tuple(int(d) for d in dims)
        if len(dims) == 0 or any([d <= 0 for d in dims]):
            raise DimensionMismatch(
                f"Subsystem dimensions must be positive integers, got {dims}."
            )
        self.dims = dims

        N = int(np.prod(dims))
        expected = {OPER: (N, N), KET: (N, 1), BRA: (1, N)}[type]
        if data.shape != expected:
            raise DimensionMismatch(
                f"Subsystem dimensions {dims} require a {type} of shape "
                f"{expected}, got shape {data.shape}."
            )

        return

    @property
    def shape(self):
        return self.data.shape

    @property
    def isoper(self):
        return self.type == OPER

    @property
    def isket(self):
        return self.type == KET

    @property
    def isbra(self):
        return self.type == BRA

    @property
    def issparse(self):
        return self.storage == StorageFormat.SPARSE

    def __repr__(self):
        return (
            f"Qobj(type={self.type!r}, dims={self.dims}, shape={self.shape}, "
            f"storage={self.storage.value!r}, device={self.device!r})\n"
            f"{self.data!r}"
        )

    def copy(self):
        return Qobj(self.data.copy(), self.dims, self.type)

    def full(self):
        """Returns a dense copy of the data, on the same device as the
        quantum object."""
        if self.issparse:
            return self.data.toarray()
        return self.data.copy()

    def to_dense(self):
        return sparse_to_dense(self)

    def to_sparse(self, tol=None):
        return dense_to_sparse(self, tol=tol)

    def dag(self):
        """Returns the conjugate transpose of the quantum object."""
        data = self.data.conj().transpose()
        if self.issparse:
            data = data.tocsc()
        return Qobj(data, self.dims, _flip_type(self.type))

    def trans(self):
        """Returns the (full) transpose of the quantum object."""
        data = self.data.transpose()
        if self.issparse:
            data = data.tocsc()
        return Qobj(data, self.dims, _flip_type(self.type))

    def tr(self):
        """Returns the trace of an operator."""
        if not self.isoper:
            raise QobjTypeError("The trace is only defined for operators.")
        return self.data.diagonal().sum()

    def __neg__(self):
        return Qobj(-self.data, self.dims, self.type)

    def __add__(self, other):
        if not isinstance(other, Qobj):
            return NotImplemented
        _check_compatible(self, other)
        if self.issparse and other.issparse:
            return Qobj((self.data + other.data).tocsc(), self.dims, self.type)
        return Qobj(self.full() + other.full(), self.dims, self.type)

    def __sub__(self, other):
        if not isinstance(other, Qobj):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other):
        if isinstance(other, numbers.Number):
            return Qobj(self.data * other, self.dims, self.type)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, numbers.Number):
            return Qobj(self.data / other, self.dims, self.type)
        return NotImplemented

    def __matmul__(self, other):
        if not isinstance(other, Qobj):
            return NotImplemented
        if self.dims != other.dims:
            raise DimensionMismatch(
                f"Cannot multiply Qobj with dims {self.dims} and {other.dims}."
            )
        data = self.data @ other.data

        # Inner products <bra|ket> are scalars
        if self.isbra and other.isket:
            if self.issparse and other.issparse:
                data = data.toarray()
            return data[0, 0]

        return Qobj(data, self.dims)


def _flip_type(type):
    return {OPER: OPER, KET: BRA, BRA: KET}[type]


def _check_compatible(A, B):
    if A.dims != B.dims or A.type != B.type:
        raise DimensionMismatch(
            f"Incompatible quantum objects: {A.type} with dims {A.dims} and "
            f"{B.type} with dims {B.dims}."
        )


def tensor(*qobjs):
    r"""Computes the tensor (Kronecker) product of quantum objects, e.g.,

    .. math::

        (A, B, C) \mapsto A \otimes B \otimes C.

    Parameters
    ----------
    *qobjs : :class:`~qtrans.Qobj`
        Quantum objects of the same type to take the tensor product of. A
        single list or tuple of quantum objects is also accepted.

    Returns
    -------
    :class:`~qtrans.Qobj`
        The tensor product, with subsystem dimensions given by the
        concatenation of the dimensions of each factor. The result is
        sparse if any of the factors are sparse.
    """
    if len(qobjs) == 1 and isinstance(qobjs[0], (list, tuple)):
        qobjs = tuple(qobjs[0])
    if len(qobjs) == 0:
        raise DimensionMismatch("tensor() requires at least one Qobj.")
    if len(set([q.type for q in qobjs])) > 1:
        raise QobjTypeError("tensor() requires quantum objects of the same type.")

    device = qobjs[0].device
    issparse = any([q.issparse for q in qobjs])

    out = qobjs[0].data
    dims = list(qobjs[0].dims)
    for q in qobjs[1:]:
        if issparse:
            out = sparse_module(device).kron(out, q.data, format="csc")
        else:
            out = array_module(device).kron(out, q.data)
        dims += q.dims

    if issparse and not qobjs[1:]:
        out = sparse_module(device).csc_matrix(out)

    return Qobj(out, dims, qobjs[0].type)


def ket2dm(psi):
    r"""Computes the density matrix :math:`| \psi \rangle\langle \psi |`
    of a ket or bra."""
    if psi.isket:
        return psi @ psi.dag()
    if psi.isbra:
        return psi.dag() @ psi
    raise QobjTypeError("ket2dm() requires a ket or a bra.")


def fock(n, j, dtype=np.complex128):
    r"""Returns the ket :math:`| j \rangle` of the computational (Fock)
    basis of an ``n`` dimensional Hilbert space."""
    if not 0 <= j < n:
        raise DimensionMismatch(f"Fock state index {j} out of range for n={n}.")
    data = np.zeros((n, 1), dtype=dtype)
    data[j] = 1
    return Qobj(data, (n,), KET)


def dense_to_sparse(q, tol=None):
    """Converts a quantum object to sparse (CSC) storage, dropping entries
    whose absolute value is below ``tol``.

    Parameters
    ----------
    q : :class:`~qtrans.Qobj`
        Quantum object to convert.
    tol : :obj:`float`, optional
        Threshold below which entries are dropped. The default is
        ``qtrans.settings.tidyup_tol``.

    Returns
    -------
    :class:`~qtrans.Qobj`
        The quantum object with sparse storage on the same device.
    """
    tol = settings.tidyup_tol if (tol is None) else tol
    data = q.full()
    data[abs(data) < tol] = 0
    return Qobj(sparse_module(q.device).csc_matrix(data), q.dims, q.type)


def sparse_to_dense(q):
    """Converts a quantum object to dense storage."""
    return Qobj(q.full(), q.dims, q.type)


def tidyup(q, tol=None):
    """Returns a copy of a quantum object where all entries whose absolute
    value is below ``tol`` are set to zero. Sparse quantum objects also
    have these entries removed from storage. The default ``tol`` is
    ``qtrans.settings.tidyup_tol``."""
    tol = settings.tidyup_tol if (tol is None) else tol
    data = q.data.copy()
    if q.issparse:
        data.data[abs(data.data) < tol] = 0
        data.eliminate_zeros()
    else:
        data[abs(data) < tol] = 0
    return Qobj(data, q.dims, q.type)
