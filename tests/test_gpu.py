# Copyright (c) 2024, Kerry He, James Saunderson, and Hamza Fawzi

# This Python package QTRANS is licensed under the MIT license; see LICENSE.md
# file in the root directory.

import pytest

cupy = pytest.importorskip("cupy")


def _has_device():
    try:
        return cupy.cuda.runtime.getDeviceCount() > 0
    except cupy.cuda.runtime.CUDARuntimeError:
        return False


pytestmark = pytest.mark.skipif(not _has_device(), reason="no CUDA device")


def test_type_conversion():
    import itertools

    import numpy as np
    import scipy as sp
    import cupyx.scipy.sparse

    from qtrans import Qobj, StorageFormat
    from qtrans.gpu import cpu, cu

    psi = {
        np.int64: Qobj(np.array([1, 0], dtype=np.int64)),
        np.float64: Qobj(np.array([1, 0], dtype=np.float64)),
        np.complex128: Qobj(np.array([1, 0], dtype=np.complex128)),
    }
    X = {
        np.int64: Qobj(np.array([[0, 1], [1, 0]], dtype=np.int64)),
        np.float64: Qobj(np.array([[0, 1], [1, 0]], dtype=np.float64)),
        np.complex128: Qobj(np.array([[0, 1], [1, 0]], dtype=np.complex128)),
    }
    dtype32 = {np.int64: np.int32, np.float64: np.float32, np.complex128: np.complex64}

    with pytest.raises(ValueError):
        cu(psi[np.int64], word_size=16)

    # Dense arrays
    for dtype, q in itertools.chain(psi.items(), X.items()):
        q64 = cu(q, word_size=64)
        q32 = cu(q, word_size=32)
        assert isinstance(q64.data, cupy.ndarray) and q64.data.dtype == dtype
        assert isinstance(q32.data, cupy.ndarray) and q32.data.dtype == dtype32[dtype]
        assert q64.device == "gpu" and q64.storage == StorageFormat.DENSE
        assert q64.dims == q.dims and q64.type == q.type

        # Changing the precision of data already on the GPU
        assert cu(q64, word_size=32).data.dtype == dtype32[dtype]
        assert cu(q32, word_size=64).data.dtype == dtype

    # Sparse matrices, which CuPy only supports with floating point data
    for dtype, q in X.items():
        q_sparse = q.to_sparse()
        q64 = cu(q_sparse, word_size=64)
        q32 = cu(q_sparse, word_size=32)
        assert isinstance(q64.data, cupyx.scipy.sparse.csc_matrix)
        assert isinstance(q32.data, cupyx.scipy.sparse.csc_matrix)
        assert q64.device == "gpu" and q64.storage == StorageFormat.SPARSE
        if dtype == np.int64:
            assert q64.data.dtype == np.float64 and q32.data.dtype == np.float32
        else:
            assert q64.data.dtype == dtype and q32.data.dtype == dtype32[dtype]

        # Changing the precision of sparse data already on the GPU
        q64_to_32 = cu(q64, word_size=32)
        assert isinstance(q64_to_32.data, cupyx.scipy.sparse.csc_matrix)
        assert q64_to_32.data.dtype == q32.data.dtype
        assert q64_to_32.storage == StorageFormat.SPARSE
        assert np.array_equal(cpu(q64_to_32).full(), q.data)
        assert cu(q32, word_size=64).data.dtype == q64.data.dtype

    # Round trip back to the host
    back = cpu(cu(X[np.complex128].to_sparse()))
    assert back.device == "cpu" and sp.sparse.issparse(back.data)
    assert np.array_equal(back.full(), X[np.complex128].data)


def test_partial_transpose():
    # Tests that the partial transpose on the GPU agrees with the CPU
    import itertools

    import numpy as np
    import scipy as sp

    from qtrans import Qobj, partial_transpose
    from qtrans.gpu import cpu, cu

    np.random.seed(1)

    dims = (2, 3, 2)
    N = int(np.prod(dims))
    X = np.random.randn(N, N) + np.random.randn(N, N) * 1j
    X[np.random.rand(N, N) > 0.4] = 0

    rho_dense = Qobj(X, dims)
    rho_sparse = Qobj(sp.sparse.csc_matrix(X), dims)

    for mask in itertools.product([False, True], repeat=len(dims)):
        expected = partial_transpose(rho_dense, mask).data

        for rho in (rho_dense, rho_sparse):
            for word_size, atol in ((64, 1e-12), (32, 1e-5)):
                rho_pt = partial_transpose(cu(rho, word_size=word_size), mask)

                assert rho_pt.device == "gpu" and rho_pt.storage == rho.storage
                assert rho_pt.dims == dims
                assert np.allclose(cpu(rho_pt).full(), expected, atol=atol), (
                    "qtrans.partial_transpose on the GPU does not match the CPU "
                    f"for mask={mask}, storage={rho.storage.value}"
                )


def test_ptrace():
    import numpy as np

    from qtrans import fock, ket2dm, ptrace, tensor
    from qtrans.gpu import cpu, cu

    g = fock(2, 1)
    e = fock(2, 0)
    alpha = np.sqrt(0.7)
    beta = np.sqrt(0.3) * 1j
    psi = cu(alpha * tensor(g, e) + beta * tensor(e, g))

    for q in (psi, psi.dag(), ket2dm(psi)):
        rho0 = ptrace(q, 0)
        rho1 = ptrace(q, 1)

        assert isinstance(rho0.data, cupy.ndarray)
        assert isinstance(rho1.data, cupy.ndarray)
        assert np.allclose(cpu(rho0).data, [[0.3, 0.0], [0.0, 0.7]], atol=1e-10)
        assert np.allclose(cpu(rho1).data, [[0.7, 0.0], [0.0, 0.3]], atol=1e-10)


def test_negativity():
    import numpy as np

    from qtrans import dense_to_sparse, fock, ket2dm, negativity, tensor
    from qtrans.gpu import cu

    bell = (tensor(fock(2, 0), fock(2, 0)) + tensor(fock(2, 1), fock(2, 1))) / np.sqrt(2)
    rho = cu(ket2dm(bell))

    assert np.isclose(negativity(rho, 0), 0.5)
    assert np.isclose(negativity(cu(dense_to_sparse(ket2dm(bell))), 1), 0.5)
